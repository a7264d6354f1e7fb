"""Per-user count of plays by genre."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class GenresListened:
    """How many times a user listened to each genre, in first-heard order."""

    username: str
    counts: dict[str, int] = field(default_factory=dict)
    similarity: int = -1

    def __post_init__(self) -> None:
        self.counts = dict(self.counts)

    @classmethod
    def create(
        cls, username: str, genres: Iterable[str], listened: Iterable[int]
    ) -> "GenresListened":
        """Build from parallel sequences of genres and play counts."""
        return cls(username, dict(zip(genres, listened, strict=True)))

    @property
    def genres(self) -> tuple[str, ...]:
        return tuple(self.counts)

    @property
    def listened(self) -> tuple[int, ...]:
        return tuple(self.counts.values())

    def add(self, genre: str) -> None:
        """Record one more play of *genre*."""
        self.counts[genre] = self.counts.get(genre, 0) + 1

    def size(self) -> int:
        """Return the number of distinct genres heard."""
        return len(self.counts)