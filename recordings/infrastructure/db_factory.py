"""
Database connection factory for the recordings client.

Builds the PostgreSQL connection string from settings, opens a single
long-lived connection, and verifies it with a liveness check before it is
handed to any query code. Failures are raised as DatabaseConnectionError and
are never retried.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator, Optional

import psycopg
from psycopg import Connection
from psycopg.conninfo import conninfo_to_dict, make_conninfo

from recordings.config import Settings, get_settings
from recordings.errors import ConfigurationError, DatabaseConnectionError
from recordings.utils.logging import get_logger

log = get_logger(__name__)

# Accepted when legacy password negotiation is disabled.
_MODERN_AUTH = "scram-sha-256"


def build_dsn(settings: Optional[Settings] = None) -> str:
    """
    Compose a libpq connection string from settings.

    Credentials must have been supplied (see `Settings.require_credentials`).

    Parameters
    ----------
    settings : Settings, optional
        Settings to read from. Defaults to the cached application settings.

    Returns
    -------
    str
        A keyword/value conninfo string, safely quoted.

    Raises
    ------
    ConfigurationError
        If DBUSER or DBPASS is missing, or libpq rejects a connection option.
    """
    settings = settings or get_settings()
    settings.require_credentials()
    params = {
        "host": settings.db_host,
        "port": settings.db_port,
        "dbname": settings.db_name,
        "user": settings.db_user,
        "password": settings.db_password,
        "connect_timeout": settings.db_connect_timeout,
    }
    if not settings.db_allow_native_passwords:
        params["require_auth"] = _MODERN_AUTH
    try:
        return make_conninfo(**params)
    except psycopg.ProgrammingError as exc:
        # libpq older than 16 does not know require_auth.
        raise ConfigurationError(f"invalid connection settings: {exc}") from exc


def redact_dsn(dsn: str) -> str:
    """Return the conninfo string with the password masked, for logs and output."""
    params = conninfo_to_dict(dsn)
    if params.get("password"):
        params["password"] = "***"
    return make_conninfo(**params)


def ping(conn: Connection) -> None:
    """
    Verify that the connection can reach the database.

    Raises
    ------
    DatabaseConnectionError
        If the liveness query fails.
    """
    try:
        with conn.cursor() as cur:
            cur.execute("SELECT 1")
            cur.fetchone()
    except psycopg.Error as exc:
        raise DatabaseConnectionError(f"ping failed: {exc}") from exc


def connect(dsn: Optional[str] = None, settings: Optional[Settings] = None) -> Connection:
    """
    Open a dedicated connection and verify it with a liveness check.

    The connection runs in autocommit mode so each statement commits on its
    own. A connection that fails the liveness check is closed before the
    error propagates.

    Parameters
    ----------
    dsn : str, optional
        Explicit conninfo string (tests, scripts). Built from settings if omitted.
    settings : Settings, optional
        Settings used to build the DSN when `dsn` is not given.

    Returns
    -------
    Connection
        An open, verified psycopg connection.

    Raises
    ------
    ConfigurationError
        If the DSN must be built and credentials are missing.
    DatabaseConnectionError
        If the connection cannot be opened or fails the liveness check.
    """
    conninfo = dsn or build_dsn(settings)
    try:
        redacted = redact_dsn(conninfo)
        log.debug("Opening connection", extra={"dsn": redacted})
        conn = psycopg.connect(conninfo, autocommit=True)
    except psycopg.Error as exc:
        raise DatabaseConnectionError(f"connect failed: {exc}") from exc

    try:
        ping(conn)
    except DatabaseConnectionError:
        conn.close()
        raise
    log.info("Connected", extra={"dsn": redacted})
    return conn


@contextmanager
def open_connection(
    dsn: Optional[str] = None, settings: Optional[Settings] = None
) -> Generator[Connection, None, None]:
    """
    Context manager around `connect` that always closes the connection.

    Example
    -------
        with open_connection() as conn:
            repo = AlbumRepository(conn)
            repo.albums_by_artist("John Coltrane")
    """
    conn = connect(dsn=dsn, settings=settings)
    try:
        yield conn
    finally:
        conn.close()


__all__ = [
    "build_dsn",
    "redact_dsn",
    "ping",
    "connect",
    "open_connection",
]
