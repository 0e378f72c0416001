"""
Domain package for the recordings client.

Exports the album model shared by the repository, the in-memory store, and the
CLI.
"""

from recordings.domain.models import Album

__all__ = [
    "Album",
]
