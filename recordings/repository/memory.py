"""
In-memory album store.

Dict-backed stand-in for AlbumRepository with the same ordering and error
semantics. Ids are assigned sequentially from 1, like a SERIAL column.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from recordings.domain.models import Album
from recordings.errors import AlbumNotFoundError
from recordings.repository.abstract import AlbumStore


class InMemoryAlbumStore(AlbumStore):
    """Album store kept in a process-local dict."""

    def __init__(self, albums: Optional[Iterable[Album]] = None) -> None:
        self._rows: Dict[int, Album] = {}
        self._next_id = 1
        for album in albums or ():
            self.add_album(album)

    def __len__(self) -> int:
        return len(self._rows)

    def albums_by_artist(self, artist: str) -> List[Album]:
        return [self._rows[k] for k in sorted(self._rows) if self._rows[k].artist == artist]

    def album_by_id(self, album_id: int) -> Album:
        try:
            return self._rows[album_id]
        except KeyError:
            raise AlbumNotFoundError("album_by_id", album_id) from None

    def add_album(self, album: Album) -> int:
        if album.id is not None:
            raise ValueError(f"album already has id {album.id}; ids are assigned on insert")
        album_id = self._next_id
        self._next_id += 1
        self._rows[album_id] = album.with_id(album_id)
        return album_id


__all__ = ["InMemoryAlbumStore"]
