"""
Sequential demonstration flow over an album store.

Usage (example from CLI):
    from recordings.demo import run_demo

    with open_store() as store:
        result = run_demo(store, report=typer.echo)

Steps run strictly in order (lookup by artist, lookup by id, insert) and the
first failure propagates to the caller; nothing is retried or skipped.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, List, Optional, TypedDict

from recordings.domain.models import Album
from recordings.repository.abstract import AlbumStore
from recordings.utils.logging import get_logger

log = get_logger(__name__)

DEMO_ARTIST = "John Coltrane"
DEMO_ALBUM_ID = 2
DEMO_NEW_ALBUM = Album(
    title="The Modern Sound of Betty Carter",
    artist="Betty Carter",
    price=Decimal("49.99"),
)


class DemoResult(TypedDict):
    albums: List[Album]
    album: Album
    added_id: int


def describe_album(album: Album) -> str:
    """One-line human-readable rendering of an album."""
    return f"#{album.id} {album.title!r} by {album.artist} ({album.price})"


def describe_albums(albums: List[Album]) -> str:
    """Bracketed, comma-separated rendering of a list of albums."""
    if not albums:
        return "[]"
    return "[" + ", ".join(describe_album(a) for a in albums) + "]"


def run_demo(
    store: AlbumStore,
    report: Optional[Callable[[str], None]] = None,
    artist: str = DEMO_ARTIST,
    album_id: int = DEMO_ALBUM_ID,
    new_album: Album = DEMO_NEW_ALBUM,
) -> DemoResult:
    """
    Run the three album operations in order and report each result.

    Parameters
    ----------
    store : AlbumStore
        Store to run against (PostgreSQL repository or in-memory store).
    report : callable, optional
        Receives one confirmation line per completed step.
    """
    emit = report or (lambda _line: None)

    albums = store.albums_by_artist(artist)
    emit(f"Albums found: {describe_albums(albums)}")

    album = store.album_by_id(album_id)
    emit(f"Album found: {describe_album(album)}")

    added_id = store.add_album(new_album)
    emit(f"ID of added album: {added_id}")

    log.info(
        "Demo completed",
        extra={"artist": artist, "matches": len(albums), "added_id": added_id},
    )
    return DemoResult(albums=albums, album=album, added_id=added_id)


__all__ = [
    "DEMO_ARTIST",
    "DEMO_ALBUM_ID",
    "DEMO_NEW_ALBUM",
    "DemoResult",
    "describe_album",
    "describe_albums",
    "run_demo",
]
