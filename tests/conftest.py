"""
Pytest configuration for the recordings client.

Provides fixtures for:
- Settings isolation (env cleanup, cache reset)
- Fake psycopg connections/cursors for unit tests
- Database connection management and schema setup for integration tests
"""

from __future__ import annotations

import os
from typing import Any, Callable, Generator, Iterator, List, Optional

import psycopg
import pytest

from recordings.config import Settings, get_settings

_SETTINGS_ENV_VARS = (
    "DBUSER",
    "DBPASS",
    "DB_HOST",
    "DB_PORT",
    "DB_NAME",
    "DB_CONNECT_TIMEOUT",
    "DB_ALLOW_NATIVE_PASSWORDS",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """
    Remove every settings variable from the environment and run from an
    empty directory so no `.env` file is picked up.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


# ---------------------------------------------------------------------------
# Fake driver objects
# ---------------------------------------------------------------------------


class FakeCursor:
    """
    Stand-in for a psycopg cursor.

    `execute_error` is raised from execute(); `fail_at` makes iteration raise
    `iter_error` when that row index is reached.
    """

    def __init__(
        self,
        rows: Optional[List[Any]] = None,
        execute_error: Optional[Exception] = None,
        fail_at: Optional[int] = None,
        iter_error: Optional[Exception] = None,
    ) -> None:
        self.rows = list(rows or [])
        self.execute_error = execute_error
        self.fail_at = fail_at
        self.iter_error = iter_error
        self.executed: List[tuple] = []
        self.closed = False

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    def execute(self, sql: str, params: Any = None) -> "FakeCursor":
        self.executed.append((sql, params))
        if self.execute_error is not None:
            raise self.execute_error
        return self

    def fetchone(self) -> Any:
        return self.rows[0] if self.rows else None

    def __iter__(self) -> Iterator[Any]:
        for index, row in enumerate(self.rows):
            if self.fail_at is not None and index == self.fail_at:
                raise self.iter_error or psycopg.OperationalError("connection lost")
            yield row


class FakeConnection:
    """Stand-in for a psycopg connection handing out one prepared cursor."""

    def __init__(self, cursor: FakeCursor, autocommit: bool = True) -> None:
        self._cursor = cursor
        self.autocommit = autocommit
        self.row_factories: List[Any] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, row_factory: Any = None) -> FakeCursor:
        self.row_factories.append(row_factory)
        return self._cursor

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_connection() -> Callable[..., FakeConnection]:
    """
    Factory for fake connections.

    Example
    -------
        conn = make_connection(rows=[{...}], execute_error=None)
        conn.cursor()  # -> the FakeCursor configured with those rows
    """

    def _make(autocommit: bool = True, **cursor_kwargs: Any) -> FakeConnection:
        return FakeConnection(FakeCursor(**cursor_kwargs), autocommit=autocommit)

    return _make


# ---------------------------------------------------------------------------
# Integration fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DBUSER", "postgres"),
        db_password=os.getenv("DBPASS", "postgres"),
        db_name=os.getenv("DB_NAME", "recordings"),
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def test_dsn(test_settings: Settings) -> str:
    """
    Database connection string for tests.
    """
    from recordings.infrastructure.db_factory import build_dsn

    return build_dsn(test_settings)


@pytest.fixture(scope="session")
def db_connection_available(test_dsn: str) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_dsn, connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def db_connection(
    test_dsn: str, db_connection_available: bool
) -> Generator[psycopg.Connection, None, None]:
    """
    Provide a session-scoped autocommit connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = psycopg.connect(test_dsn, autocommit=True)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="session")
def db_schema_initialized(db_connection: psycopg.Connection) -> bool:
    """
    Ensure the album table exists, creating it from db/init.sql if necessary.
    """
    from scripts.seed_albums import _apply_schema

    _apply_schema(db_connection)
    return True


@pytest.fixture(scope="function")
def clean_album_table(db_connection: psycopg.Connection, db_schema_initialized: bool):
    """
    Empty the album table before and after each test function.
    """
    from scripts.seed_albums import _reset_albums

    _reset_albums(db_connection)
    yield
    _reset_albums(db_connection)


@pytest.fixture(scope="function")
def seeded_albums(db_connection: psycopg.Connection, clean_album_table) -> int:
    """
    Load the four sample albums (ids 1-4). Returns the number of rows seeded.
    """
    from scripts.seed_albums import SAMPLE_ALBUMS, _seed_albums

    return _seed_albums(db_connection, SAMPLE_ALBUMS)
