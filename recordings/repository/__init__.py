"""
Repository package for the recordings client.

Re-exports the store interface and the concrete stores so downstream code can
import from `recordings.repository` directly.
"""

from recordings.repository.abstract import AlbumStore
from recordings.repository.albums import AlbumRepository
from recordings.repository.memory import InMemoryAlbumStore

__all__ = [
    # Interface
    "AlbumStore",
    # Concrete stores
    "AlbumRepository",
    "InMemoryAlbumStore",
]
