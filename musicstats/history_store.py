"""Listening history table with weekly artist rankings and per-user genre counts."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from musicstats.artist import ArtistData, ArtistType
from musicstats.genres_listened import GenresListened
from musicstats.history import History

TOP_SIZE = 10


def top10_artists(artists: Iterable[ArtistData]) -> list[ArtistData]:
    """Return the ten most listened artists, longest first, ties by ascending id."""
    ranked = sorted(artists, key=lambda a: (-a.total_reproduction, a.artist_id))
    return ranked[:TOP_SIZE]


class HistoryStore:
    """History entries keyed by id, plus weekly artist totals and genre counts."""

    def __init__(self) -> None:
        self._history: dict[int, History] = {}
        self._week_artists: dict[str, dict[int, ArtistData]] = {}
        self._week_top10: dict[str, list[ArtistData]] = {}
        self._artist_counts: dict[int, int] = {}
        self._genres_listened: dict[str, GenresListened] = {}

    def add(self, history: History) -> None:
        """Store *history*, replacing any entry with the same id."""
        self._history[history.id] = history

    def remove(self, history_id: int) -> None:
        """Drop the entry with *history_id*; unknown ids are ignored."""
        self._history.pop(history_id, None)

    def get(self, history_id: int) -> Optional[History]:
        """Return the entry with *history_id*, or None."""
        return self._history.get(history_id)

    def __contains__(self, history_id: object) -> bool:
        return history_id in self._history

    def __iter__(self) -> Iterator[History]:
        return iter(self._history.values())

    def __len__(self) -> int:
        return len(self._history)

    def validate_ids(self, ids: Iterable[int]) -> bool:
        """Return True if every id in *ids* names a stored entry."""
        return all(history_id in self._history for history_id in ids)

    def add_artist_duration(
        self, week: str, artist_id: int, duration: int, artist_type: ArtistType
    ) -> ArtistData:
        """Add *duration* seconds to an artist's total for *week* and return it."""
        artists = self._week_artists.setdefault(week, {})
        data = artists.get(artist_id)
        if data is None:
            data = ArtistData(artist_id, duration, artist_type)
            artists[artist_id] = data
        else:
            data.total_reproduction += duration
        return data

    def populate_week_top10(self) -> None:
        """Compute the top ten artists of every week."""
        for week, artists in self._week_artists.items():
            self._week_top10[week] = top10_artists(artists.values())

    def week_top10(self, week: str) -> list[ArtistData]:
        """Return the computed top ten of *week*, empty if there is none."""
        return list(self._week_top10.get(week, ()))

    def count_top10_appearances(
        self, start_week: Optional[str], end_week: Optional[str]
    ) -> bool:
        """Count top-ten appearances of each artist over weeks in the interval.

        Either bound may be None to leave that side open. Counts add to any
        earlier ones until :meth:`reset_artist_counts`. Return True if at
        least one week fell in the interval.
        """
        found = False
        for week, top10 in self._week_top10.items():
            if start_week is not None and week < start_week:
                continue
            if end_week is not None and week > end_week:
                continue
            found = True
            for data in top10:
                self._artist_counts[data.artist_id] = (
                    self._artist_counts.get(data.artist_id, 0) + 1
                )
        return found

    def _find_artist_data(self, artist_id: int) -> Optional[ArtistData]:
        for artists in self._week_artists.values():
            data = artists.get(artist_id)
            if data is not None:
                return data
        return None

    def most_frequent_artist(self) -> Optional[tuple[ArtistData, int]]:
        """Return the artist counted most often in the top ten, with its count.

        Ties go to the smaller id. Return None if nothing has been counted.
        """
        best: Optional[ArtistData] = None
        best_count = 0
        for artist_id, count in self._artist_counts.items():
            data = self._find_artist_data(artist_id)
            if data is None:
                continue
            if count > best_count or (
                count == best_count
                and best is not None
                and data.artist_id < best.artist_id
            ):
                best, best_count = data, count
        if best is None:
            return None
        return best, best_count

    def reset_artist_counts(self) -> None:
        """Forget every top-ten appearance count."""
        self._artist_counts.clear()

    def add_genre_listened(self, username: str, genre: str) -> GenresListened:
        """Record one play of *genre* by *username* and return the user's counts."""
        entry = self._genres_listened.get(username)
        if entry is None:
            entry = GenresListened(username)
            self._genres_listened[username] = entry
        entry.add(genre)
        return entry

    def genres_listened(self, username: str) -> Optional[GenresListened]:
        """Return the genre counts of *username*, or None."""
        return self._genres_listened.get(username)

    def all_genres_listened(self) -> list[GenresListened]:
        """Return every user's genre counts, in the order users were first seen."""
        return list(self._genres_listened.values())