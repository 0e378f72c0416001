"""
Store interface for album persistence.

Concrete stores (PostgreSQL repository, in-memory store) implement the
AlbumStore protocol so the CLI and tests can swap one for the other.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from recordings.domain.models import Album


@runtime_checkable
class AlbumStore(Protocol):
    """
    Common interface every album store must implement.

    Errors are reported through the `recordings.errors` hierarchy; stores never
    terminate the process themselves.
    """

    def albums_by_artist(self, artist: str) -> List[Album]:
        """
        Return every album whose artist equals `artist`, ordered by id.

        Returns an empty list when nothing matches.
        """
        ...

    def album_by_id(self, album_id: int) -> Album:
        """
        Return the album with the given id.

        Raises
        ------
        AlbumNotFoundError
            If no album has that id.
        """
        ...

    def add_album(self, album: Album) -> int:
        """
        Persist a new album (id unset) and return its generated id.
        """
        ...


__all__ = ["AlbumStore"]
