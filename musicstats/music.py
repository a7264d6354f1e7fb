"""Music entity and duration parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_DURATION = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+):\s*([+-]?\d+)")


def parse_duration(text: str) -> int:
    """Convert an ``hh:mm:ss`` duration to a number of seconds."""
    match = _DURATION.match(text)
    if match is None:
        raise ValueError(f"invalid duration format: {text!r}")
    hours, minutes, seconds = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds


@dataclass
class Music:
    """A song, its artists, album, duration and genre."""

    id: int
    artist_ids: tuple[int, ...] = field(default_factory=tuple)
    album_id: int = 0
    duration: str = "00:00:00"
    genre: str = ""
    year: int = 0

    def __post_init__(self) -> None:
        self.artist_ids = tuple(self.artist_ids)

    @property
    def num_artists(self) -> int:
        return len(self.artist_ids)

    def duration_seconds(self) -> int:
        """Return the song's duration in seconds."""
        return parse_duration(self.duration)