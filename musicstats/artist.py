"""Artist entity and per-week artist listening data."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ArtistType(Enum):
    """Whether an artist is a single person or a group."""

    INDIVIDUAL = "individual"
    GROUP = "group"

    def __str__(self) -> str:
        return self.value


def is_valid_artist_type(text: Optional[str]) -> bool:
    """Return True if *text* names an artist type, ignoring case."""
    if text is None:
        return False
    return text.lower() in {t.value for t in ArtistType}


def artist_type_from_string(text: Optional[str]) -> ArtistType:
    """Convert *text* to an :class:`ArtistType`, ignoring case."""
    if text is None:
        raise ValueError("invalid artist type: None")
    try:
        return ArtistType(text.lower())
    except ValueError:
        raise ValueError(f"unknown artist type: {text}") from None


@dataclass
class Artist:
    """An artist or band."""

    id: int
    name: str
    recipe_per_stream: float
    constituents: tuple[int, ...] = field(default_factory=tuple)
    country: str = ""
    type: ArtistType = ArtistType.INDIVIDUAL

    def __post_init__(self) -> None:
        self.constituents = tuple(self.constituents)

    @property
    def num_constituents(self) -> int:
        return len(self.constituents)


@dataclass
class ArtistData:
    """Accumulated listening time of one artist."""

    artist_id: int
    total_reproduction: int = 0
    type: ArtistType = ArtistType.INDIVIDUAL