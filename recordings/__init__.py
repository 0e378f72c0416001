"""
Recordings - a small PostgreSQL client for the `album` table.

This package connects to the `recordings` database and offers three operations
on albums:

- Look up every album by an artist
- Look up a single album by id
- Insert a new album and return its generated id

Operations are exposed through the AlbumStore interface, implemented by a
PostgreSQL repository and by an in-memory store for tests.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from recordings.config import Settings, get_settings
from recordings.domain.models import Album
from recordings.errors import (
    AlbumNotFoundError,
    ConfigurationError,
    DatabaseConnectionError,
    InsertError,
    QueryError,
    RecordingsError,
)
from recordings.infrastructure.db_factory import build_dsn, connect, open_connection
from recordings.repository import AlbumRepository, AlbumStore, InMemoryAlbumStore
from recordings.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Album",
    # Errors
    "RecordingsError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryError",
    "AlbumNotFoundError",
    "InsertError",
    # Connectivity
    "build_dsn",
    "connect",
    "open_connection",
    # Stores
    "AlbumStore",
    "AlbumRepository",
    "InMemoryAlbumStore",
    # Logging
    "configure_logging",
    "get_logger",
]
