"""
Schema and sample-data loader for the recordings database.

Applies `db/init.sql` and inserts the sample albums used by the demo flow.
Intended for local development and integration tests; the client itself never
creates or migrates the schema.
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import psycopg
import typer

from recordings.domain.models import Album
from recordings.errors import RecordingsError
from recordings.infrastructure.db_factory import build_dsn, open_connection

app = typer.Typer(help="Create the album table and load sample albums.")

INIT_SQL_PATH = Path(__file__).resolve().parent.parent / "db" / "init.sql"

SAMPLE_ALBUMS = [
    Album(title="Blue Train", artist="John Coltrane", price=Decimal("56.99")),
    Album(title="Giant Steps", artist="John Coltrane", price=Decimal("63.99")),
    Album(title="Jeru", artist="Gerry Mulligan", price=Decimal("17.99")),
    Album(title="Sarah Vaughan", artist="Sarah Vaughan", price=Decimal("34.98")),
]


def _build_dsn(dsn_override: str | None) -> str:
    if dsn_override:
        return dsn_override
    return build_dsn()


def _apply_schema(conn: psycopg.Connection, init_sql_path: Path = INIT_SQL_PATH) -> None:
    with conn.cursor() as cur:
        cur.execute(init_sql_path.read_text(encoding="utf-8"))
    conn.commit()


def _reset_albums(conn: psycopg.Connection) -> None:
    with conn.cursor() as cur:
        cur.execute("TRUNCATE TABLE public.album RESTART IDENTITY;")
    conn.commit()


def _seed_albums(conn: psycopg.Connection, albums: list[Album]) -> int:
    with conn.cursor() as cur:
        cur.executemany(
            "INSERT INTO public.album (title, artist, price) VALUES (%s, %s, %s);",
            [(a.title, a.artist, a.price) for a in albums],
        )
    conn.commit()
    return len(albums)


@app.command()
def main(
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
    reset: bool = typer.Option(
        False,
        "--reset",
        help="Truncate the album table (and restart ids) before loading.",
    ),
    schema_only: bool = typer.Option(
        False,
        "--schema-only",
        help="Only apply the schema; skip loading sample albums.",
    ),
) -> None:
    """
    Apply the album schema and optionally load the sample albums.
    """
    try:
        with open_connection(dsn=_build_dsn(dsn)) as conn:
            typer.echo(f"Applying {INIT_SQL_PATH.name}...")
            _apply_schema(conn)
            if reset:
                typer.echo("Truncating album table...")
                _reset_albums(conn)
            if schema_only:
                typer.echo("Skipping sample albums (schema-only flag set).")
                return
            count = _seed_albums(conn, SAMPLE_ALBUMS)
    except RecordingsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Loaded {count} sample albums.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
