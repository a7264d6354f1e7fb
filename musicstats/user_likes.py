"""Liked songs per genre, gathered for one age."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Union

LikesInput = Union[Mapping[str, int], Iterable[tuple[str, int]]]


def _pairs(likes: LikesInput) -> Iterable[tuple[str, int]]:
    if isinstance(likes, Mapping):
        return likes.items()
    return likes


@dataclass
class UserLikes:
    """Total likes by genre of every user of a given age."""

    age: int
    likes: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.likes = dict(_pairs(self.likes))

    @property
    def genres(self) -> tuple[str, ...]:
        return tuple(self.likes)

    def merge(self, likes: LikesInput) -> None:
        """Add the counts in *likes*; new genres go at the end."""
        for genre, count in _pairs(likes):
            self.likes[genre] = self.likes.get(genre, 0) + count

    def size(self) -> int:
        """Return the number of distinct genres."""
        return len(self.likes)