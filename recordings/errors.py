"""Exception types raised by the recordings client."""

from __future__ import annotations


class RecordingsError(Exception):
    """Base exception for all recordings errors."""


class ConfigurationError(RecordingsError):
    """Raised when required settings (credentials) are missing."""


class DatabaseConnectionError(RecordingsError):
    """Raised when opening the connection or the liveness check fails."""


class QueryError(RecordingsError):
    """
    Raised when a read query fails.

    Carries the operation name and the input value so the failure can be
    diagnosed from the message alone.
    """

    def __init__(self, operation: str, value: object, reason: object) -> None:
        self.operation = operation
        self.value = value
        self.reason = reason
        super().__init__(f"{operation} {value!r}: {reason}")


class AlbumNotFoundError(QueryError):
    """Raised when a key lookup matches no row."""

    def __init__(self, operation: str, album_id: int) -> None:
        super().__init__(operation, album_id, "no such album")
        self.album_id = album_id


class InsertError(RecordingsError):
    """Raised when an insert or the retrieval of its generated id fails."""

    def __init__(self, operation: str, reason: object) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation}: {reason}")


__all__ = [
    "RecordingsError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "QueryError",
    "AlbumNotFoundError",
    "InsertError",
]
