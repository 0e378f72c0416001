"""
Infrastructure package for the recordings client.

Centralizes database connectivity (DSN building, connect, liveness check).
Keep this layer focused on I/O and resource management, decoupled from the
album queries.
"""

from recordings.infrastructure.db_factory import (
    build_dsn,
    connect,
    open_connection,
    ping,
    redact_dsn,
)

__all__ = [
    "build_dsn",
    "connect",
    "open_connection",
    "ping",
    "redact_dsn",
]
