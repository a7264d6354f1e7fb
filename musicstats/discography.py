"""Per-artist total discography duration, used to rank artists."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

from musicstats.artist import ArtistType
from musicstats.music import parse_duration


@dataclass
class DiscographyEntry:
    """One artist with the summed duration of its songs, in seconds."""

    id: int
    name: str
    country: str
    duration: int = 0
    type: ArtistType = ArtistType.INDIVIDUAL


class Discography:
    """A collection of artists and the total duration of their songs."""

    def __init__(self) -> None:
        self._entries: deque[DiscographyEntry] = deque()
        self._by_id: dict[int, DiscographyEntry] = {}

    def add_artist(
        self, artist_id: int, name: str, country: str, artist_type: ArtistType
    ) -> DiscographyEntry:
        """Add an artist at the front, with a duration of zero."""
        entry = DiscographyEntry(artist_id, name, country, 0, artist_type)
        self._entries.appendleft(entry)
        self._by_id[artist_id] = entry
        return entry

    def add_duration(self, duration: str, artist_id: int) -> None:
        """Add an ``hh:mm:ss`` duration to the artist's total.

        Raises ValueError for a malformed duration and KeyError for an
        unknown artist.
        """
        seconds = parse_duration(duration)
        try:
            entry = self._by_id[artist_id]
        except KeyError:
            raise KeyError(f"artist with id {artist_id} not found") from None
        entry.duration += seconds

    def sort_by_duration(self) -> None:
        """Order by duration, longest first, then by ascending id."""
        self._entries = deque(
            sorted(self._entries, key=lambda e: (-e.duration, e.id))
        )

    def __iter__(self) -> Iterator[DiscographyEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)