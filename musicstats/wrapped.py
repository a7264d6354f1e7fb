"""A user's yearly listening summary."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

GENRES: tuple[str, ...] = (
    "Blues",
    "Classical",
    "Country",
    "Electronic",
    "Hip Hop",
    "Jazz",
    "Metal",
    "Pop",
    "Reggae",
    "Rock",
)

UNKNOWN_GENRE = "Genero Desconhecido"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of *text*, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _format_seconds(total: int) -> str:
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass
class ArtistListening:
    """Time spent listening to one set of artists, and the songs heard."""

    artist_ids: tuple[int, ...]
    listen_time: int = 0
    musics: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.artist_ids = tuple(self.artist_ids)
        self.musics = list(self.musics)


@dataclass
class Wrapped:
    """Listening totals of one user over one year."""

    year: str = ""
    user_id: int = 0
    albums: dict[int, int] = field(default_factory=dict)
    hours: list[int] = field(default_factory=lambda: [0] * 24)
    genre_seconds: list[int] = field(default_factory=lambda: [0] * len(GENRES))
    days: list[list[int]] = field(
        default_factory=lambda: [[0] * 31 for _ in range(12)]
    )
    artists: list[ArtistListening] = field(default_factory=list)

    def add_album(self, album_id: int, seconds: int) -> None:
        """Add *seconds* of listening to an album."""
        self.albums[album_id] = self.albums.get(album_id, 0) + seconds

    def add_hour(self, timestamp: str, seconds: int) -> None:
        """Add *seconds* to the hour of day found in a ``date hh:mm:ss`` timestamp."""
        _, _, time_part = timestamp.partition(" ")
        hour = _leading_int(time_part.split(":", 1)[0])
        if not 0 <= hour <= 23:
            raise ValueError(f"invalid hour in timestamp: {timestamp!r}")
        self.hours[hour] += seconds

    def add_genre(self, genre: str, seconds: int) -> bool:
        """Add *seconds* to a known genre; return False if the genre is unknown."""
        try:
            index = GENRES.index(genre)
        except ValueError:
            return False
        self.genre_seconds[index] += seconds
        return True

    def add_day(self, timestamp: str, seconds: int) -> None:
        """Record *seconds* for the day of a ``yyyy/mm/dd ...`` timestamp.

        The day's value is replaced, not added to.
        """
        parts = timestamp.split("/", 2)
        if len(parts) < 3:
            raise ValueError(f"invalid date in timestamp: {timestamp!r}")
        month = _leading_int(parts[1])
        day = _leading_int(parts[2].split(" ", 1)[0])
        if not (1 <= month <= 12 and 1 <= day <= 31):
            raise ValueError(f"invalid date in timestamp: {timestamp!r}")
        self.days[month - 1][day - 1] = seconds

    def add_artist_time(
        self, artist_ids: Iterable[int], music_id: int, seconds: int
    ) -> None:
        """Add listening time for a song by the given artists."""
        ids = tuple(artist_ids)
        for entry in self.artists:
            if entry.artist_ids == ids:
                entry.listen_time += seconds
                if music_id not in entry.musics:
                    entry.musics.append(music_id)
                return
        self.artists.append(ArtistListening(ids, seconds, [music_id]))

    def total_listen_time(self) -> Optional[str]:
        """Return the total time over all known genres as ``hh:mm:ss``, or None if zero."""
        total = sum(self.genre_seconds)
        if total == 0:
            return None
        return _format_seconds(total)

    def favourite_genre(self) -> str:
        """Return the most listened genre; the first one wins a tie."""
        best, best_index = 0, None
        for index, seconds in enumerate(self.genre_seconds):
            if seconds > best:
                best, best_index = seconds, index
        return UNKNOWN_GENRE if best_index is None else GENRES[best_index]

    def total_musics(self) -> int:
        """Return how many songs were heard, counted per artist set."""
        return sum(len(entry.musics) for entry in self.artists)

    def top_artist(self) -> str:
        """Return the first artist of the first artist set, as ``A`` and seven digits."""
        if not self.artists or not self.artists[0].artist_ids:
            raise ValueError("no artists recorded")
        return f"A{self.artists[0].artist_ids[0]:07d}"

    def top_day(self) -> str:
        """Return the most listened day as ``yyyy/mm/dd``."""
        best, month, day = 0, 0, 0
        for m, row in enumerate(self.days, start=1):
            for d, seconds in enumerate(row, start=1):
                if seconds > best:
                    best, month, day = seconds, m, d
        return f"{self.year}/{month:02d}/{day:02d}"

    def top_album(self) -> str:
        """Return the most listened album as ``AL`` and six digits."""
        best, album_id = 0, 0
        for candidate, seconds in self.albums.items():
            if seconds > best:
                best, album_id = seconds, candidate
        return f"AL{album_id:06d}"

    def top_hour(self) -> str:
        """Return the most listened hour of day as two digits."""
        best, hour = 0, 0
        for index, seconds in enumerate(self.hours):
            if seconds > best:
                best, hour = seconds, index
        return f"{hour:02d}"

    def sort_artists(self) -> None:
        """Order artist sets by listening time, longest first, keeping ties in order."""
        self.artists.sort(key=lambda entry: -entry.listen_time)