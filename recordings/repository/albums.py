"""
PostgreSQL album repository.

Maps the three album operations to parameterized SQL over a single connection
supplied by the caller. Every cursor is opened in a `with` block so it is
released on success and on error; the connection itself stays open and belongs
to whoever created it. On a transactional (non-autocommit) connection a failed
statement is rolled back before the error is raised.
"""

from __future__ import annotations

from typing import List

import psycopg
from psycopg import Connection
from psycopg.rows import dict_row
from pydantic import ValidationError

from recordings.domain.models import Album
from recordings.errors import AlbumNotFoundError, InsertError, QueryError
from recordings.repository.abstract import AlbumStore
from recordings.utils.logging import get_logger

log = get_logger(__name__)

_SELECT_BY_ARTIST = "SELECT id, title, artist, price FROM album WHERE artist = %s ORDER BY id;"
_SELECT_BY_ID = "SELECT id, title, artist, price FROM album WHERE id = %s;"
_INSERT = "INSERT INTO album (title, artist, price) VALUES (%s, %s, %s) RETURNING id;"


class AlbumRepository(AlbumStore):
    """
    Album queries against the `album` table.

    Parameters
    ----------
    conn : Connection
        An open psycopg connection, typically from `infrastructure.connect`.
    """

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def _rollback(self) -> None:
        """End a failed transaction so the connection stays usable."""
        if self._conn.autocommit:
            return
        try:
            self._conn.rollback()
        except psycopg.Error:
            log.warning("Rollback after failed statement did not succeed", exc_info=True)

    def albums_by_artist(self, artist: str) -> List[Album]:
        """
        Fetch all albums by `artist`.

        Any cursor or decode error discards the rows read so far and raises a
        QueryError tagged with the artist.
        """
        albums: List[Album] = []
        try:
            with self._conn.cursor(row_factory=dict_row) as cur:
                cur.execute(_SELECT_BY_ARTIST, (artist,))
                for row in cur:
                    albums.append(Album.model_validate(row))
        except (psycopg.Error, ValidationError) as exc:
            self._rollback()
            raise QueryError("albums_by_artist", artist, exc) from exc

        log.debug("Albums fetched", extra={"artist": artist, "rows": len(albums)})
        return albums

    def album_by_id(self, album_id: int) -> Album:
        """
        Fetch the album with `album_id`.

        Raises AlbumNotFoundError when no row matches and QueryError for any
        other failure.
        """
        try:
            with self._conn.cursor(row_factory=dict_row) as cur:
                cur.execute(_SELECT_BY_ID, (album_id,))
                row = cur.fetchone()
                album = Album.model_validate(row) if row is not None else None
        except (psycopg.Error, ValidationError) as exc:
            self._rollback()
            raise QueryError("album_by_id", album_id, exc) from exc

        if album is None:
            raise AlbumNotFoundError("album_by_id", album_id)
        return album

    def add_album(self, album: Album) -> int:
        """
        Insert `album` and return the id assigned by the database.

        Raises
        ------
        ValueError
            If the album already carries an id.
        InsertError
            If the insert fails or no id comes back.
        """
        if album.id is not None:
            raise ValueError(f"album already has id {album.id}; ids are assigned on insert")

        try:
            with self._conn.cursor() as cur:
                cur.execute(_INSERT, (album.title, album.artist, album.price))
                row = cur.fetchone()
            if not self._conn.autocommit:
                self._conn.commit()
        except psycopg.Error as exc:
            self._rollback()
            raise InsertError("add_album", exc) from exc

        if row is None:
            raise InsertError("add_album", "no id returned")
        album_id = int(row[0])
        log.info("Album added", extra={"album_id": album_id, "artist": album.artist})
        return album_id


__all__ = ["AlbumRepository"]
