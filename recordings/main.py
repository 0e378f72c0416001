from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Generator, NoReturn, Optional

import typer
from pydantic import ValidationError

from recordings.config import get_settings
from recordings.demo import describe_album, describe_albums, run_demo
from recordings.domain.models import Album
from recordings.errors import RecordingsError
from recordings.infrastructure.db_factory import open_connection
from recordings.repository.abstract import AlbumStore
from recordings.repository.albums import AlbumRepository
from recordings.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(help="Recordings album database CLI.")


@contextmanager
def open_store() -> Generator[AlbumStore, None, None]:
    """Connect, verify, and yield a repository bound to the connection."""
    with open_connection() as conn:
        typer.echo("Connected!")
        yield AlbumRepository(conn)


def _fail(exc: Exception) -> NoReturn:
    log.error("Command failed: %s", exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def _setup(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (default from LOG_LEVEL).",
    ),
    json_logs: Optional[bool] = typer.Option(
        None,
        "--json-logs/--plain-logs",
        help="Emit logs as JSON (default from LOG_JSON).",
    ),
) -> None:
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        json_logs=settings.log_json if json_logs is None else json_logs,
    )


@app.command()
def info() -> None:
    """
    Show effective connection settings.
    """
    settings = get_settings()
    user = settings.db_user or "<unset>"
    password = "<unset>" if settings.db_password is None else "***"
    typer.echo(
        f"DB={user}:{password}@{settings.db_host}:{settings.db_port}/{settings.db_name} | "
        f"allow_native_passwords={settings.db_allow_native_passwords} "
        f"connect_timeout={settings.db_connect_timeout}s"
    )


@app.command()
def demo() -> None:
    """
    Connect, then look up albums by artist, look up one album by id, and add one.
    """
    try:
        with open_store() as store:
            run_demo(store, report=typer.echo)
    except RecordingsError as exc:
        _fail(exc)


@app.command("by-artist")
def by_artist(artist: str = typer.Argument(..., help="Artist name to match exactly.")) -> None:
    """
    List the albums recorded by ARTIST.
    """
    try:
        with open_store() as store:
            albums = store.albums_by_artist(artist)
    except RecordingsError as exc:
        _fail(exc)
    typer.echo(f"Albums found: {describe_albums(albums)}")


@app.command("by-id")
def by_id(album_id: int = typer.Argument(..., help="Album id.")) -> None:
    """
    Show the album with ALBUM_ID.
    """
    try:
        with open_store() as store:
            album = store.album_by_id(album_id)
    except RecordingsError as exc:
        _fail(exc)
    typer.echo(f"Album found: {describe_album(album)}")


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", help="Album title."),
    artist: str = typer.Option(..., "--artist", "-a", help="Performing artist."),
    price: str = typer.Option(..., "--price", "-p", help="Price, e.g. 49.99."),
) -> None:
    """
    Add a new album and print its generated id.
    """
    try:
        album = Album(title=title, artist=artist, price=price)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--price") from exc

    try:
        with open_store() as store:
            album_id = store.add_album(album)
    except RecordingsError as exc:
        _fail(exc)
    typer.echo(f"ID of added album: {album_id}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
