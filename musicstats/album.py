"""Album entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class Album:
    """An album, with the artists that made it and its producers."""

    id: int
    artist_ids: tuple[int, ...] = field(default_factory=tuple)
    year: int = 0
    producers: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.artist_ids = tuple(self.artist_ids)
        self.producers = tuple(self.producers)

    @classmethod
    def create(
        cls,
        album_id: int,
        artist_ids: Iterable[int],
        year: int,
        producers: Iterable[str],
    ) -> "Album":
        return cls(album_id, tuple(artist_ids), year, tuple(producers))

    @property
    def num_artists(self) -> int:
        return len(self.artist_ids)

    @property
    def num_producers(self) -> int:
        return len(self.producers)