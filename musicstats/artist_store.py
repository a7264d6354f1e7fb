"""Lookup table of artists with album counts and play counts."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from musicstats.artist import Artist, ArtistType
from musicstats.discography import Discography


class ArtistStore:
    """Artists keyed by id, plus per-artist album and play counters."""

    def __init__(self) -> None:
        self._artists: dict[int, Artist] = {}
        self._album_counts: dict[int, int] = {}
        self._music_reps: dict[int, int] = {}

    def add(self, artist: Artist) -> None:
        """Store *artist*, replacing any artist with the same id."""
        self._artists[artist.id] = artist

    def remove(self, artist_id: int) -> None:
        """Drop the artist with *artist_id*; unknown ids are ignored."""
        self._artists.pop(artist_id, None)

    def get(self, artist_id: int) -> Optional[Artist]:
        """Return the artist with *artist_id*, or None."""
        return self._artists.get(artist_id)

    def __contains__(self, artist_id: object) -> bool:
        return artist_id in self._artists

    def __iter__(self) -> Iterator[Artist]:
        return iter(self._artists.values())

    def __len__(self) -> int:
        return len(self._artists)

    def validate_ids(self, ids: Iterable[int]) -> bool:
        """Return True if every id in *ids* names a stored artist."""
        return all(artist_id in self._artists for artist_id in ids)

    def set_album_count(self, artist_id: int, count: int) -> None:
        """Set the number of albums credited to an artist."""
        self._album_counts[artist_id] = count

    def album_count(self, artist_id: int) -> int:
        """Return the number of albums credited to an artist, 0 if unknown."""
        return self._album_counts.get(artist_id, 0)

    def remove_album_count(self, artist_id: int) -> None:
        """Forget the album count of an artist."""
        self._album_counts.pop(artist_id, None)

    def add_music_reps(self, artist_id: int) -> None:
        """Start an artist's play counter at zero."""
        self._music_reps[artist_id] = 0

    def set_music_reps(self, artist_id: int, reps: int) -> None:
        """Set an artist's play count.

        An artist without a counter yet gets one started at zero instead.
        """
        if artist_id in self._music_reps:
            self._music_reps[artist_id] = reps
        else:
            self.add_music_reps(artist_id)

    def music_reps(self, artist_id: int) -> int:
        """Return an artist's play count, 0 if unknown."""
        return self._music_reps.get(artist_id, 0)

    def remove_music_reps(self, artist_id: int) -> None:
        """Forget an artist's play counter."""
        self._music_reps.pop(artist_id, None)

    def discography(self) -> Discography:
        """Return a discography holding every artist with zero duration."""
        disco = Discography()
        for artist in self._artists.values():
            disco.add_artist(artist.id, artist.name, artist.country, artist.type)
        return disco

    def collectives_containing(self, artist_id: int) -> list[int]:
        """Return the ids of the groups that list *artist_id* as a member."""
        return [
            artist.id
            for artist in self._artists.values()
            if artist.type is ArtistType.GROUP and artist_id in artist.constituents
        ]