"""Lookup table of albums by id."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from musicstats.album import Album


class AlbumStore:
    """Albums keyed by their numeric id."""

    def __init__(self) -> None:
        self._albums: dict[int, Album] = {}

    def add(self, album: Album) -> None:
        """Store *album*, replacing any album with the same id."""
        self._albums[album.id] = album

    def remove(self, album_id: int) -> None:
        """Drop the album with *album_id*; unknown ids are ignored."""
        self._albums.pop(album_id, None)

    def get(self, album_id: int) -> Optional[Album]:
        """Return the album with *album_id*, or None."""
        return self._albums.get(album_id)

    def __contains__(self, album_id: object) -> bool:
        return album_id in self._albums

    def __iter__(self) -> Iterator[Album]:
        return iter(self._albums.values())

    def __len__(self) -> int:
        return len(self._albums)

    def validate_ids(self, ids: Iterable[int]) -> bool:
        """Return True if every id in *ids* names a stored album."""
        return all(album_id in self._albums for album_id in ids)