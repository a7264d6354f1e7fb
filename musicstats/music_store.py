"""Lookup table of songs, with discography totals and the yearly summary."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from musicstats.discography import Discography
from musicstats.history import History
from musicstats.music import Music, parse_duration
from musicstats.wrapped import Wrapped


class MusicStore:
    """Songs keyed by id, plus the yearly summary being built for one user."""

    def __init__(self) -> None:
        self._musics: dict[int, Music] = {}
        self.wrapped: Optional[Wrapped] = None

    def add(self, music: Music) -> None:
        """Store *music*, replacing any song with the same id."""
        self._musics[music.id] = music

    def remove(self, music_id: int) -> None:
        """Drop the song with *music_id*; unknown ids are ignored."""
        self._musics.pop(music_id, None)

    def get(self, music_id: int) -> Optional[Music]:
        """Return the song with *music_id*, or None."""
        return self._musics.get(music_id)

    def __contains__(self, music_id: object) -> bool:
        return music_id in self._musics

    def __iter__(self) -> Iterator[Music]:
        return iter(self._musics.values())

    def __len__(self) -> int:
        return len(self._musics)

    def validate_ids(self, ids: Iterable[int]) -> bool:
        """Return True if every id in *ids* names a stored song."""
        return all(music_id in self._musics for music_id in ids)

    def update_discography(self, discography: Discography) -> Discography:
        """Add each song's duration to the total of every one of its artists.

        Artists missing from *discography* are skipped.
        """
        for music in self._musics.values():
            for artist_id in music.artist_ids:
                try:
                    discography.add_duration(music.duration, artist_id)
                except KeyError:
                    continue
        return discography

    def count_liked_genres(self, music_ids: Iterable[int]) -> dict[str, int]:
        """Count the given songs by genre, in first-seen order.

        Ids of unknown songs are skipped.
        """
        counts: dict[str, int] = {}
        for music_id in music_ids:
            music = self._musics.get(music_id)
            if music is None:
                continue
            counts[music.genre] = counts.get(music.genre, 0) + 1
        return counts

    def start_wrapped(self, user_id: int, year: str) -> Wrapped:
        """Begin a fresh yearly summary for *user_id* over *year*."""
        self.wrapped = Wrapped(year=year, user_id=user_id)
        return self.wrapped

    def clear_wrapped(self) -> None:
        """Discard the current yearly summary."""
        self.wrapped = None

    def add_to_wrapped(self, history: History) -> bool:
        """Fold one history entry into the yearly summary.

        Only entries of the summary's user in the summary's year count.
        Return True if the entry was used. Raise RuntimeError if no summary
        was started and KeyError if the entry names an unknown song.
        """
        wrap = self.wrapped
        if wrap is None:
            raise RuntimeError("no yearly summary started")
        if history.user_id != wrap.user_id or history.timestamp[:4] != wrap.year:
            return False
        music = self._musics.get(history.music_id)
        if music is None:
            raise KeyError(f"music with id {history.music_id} not found")
        seconds = parse_duration(history.duration)
        wrap.add_album(music.album_id, seconds)
        wrap.add_hour(history.timestamp, seconds)
        wrap.add_genre(music.genre, seconds)
        wrap.add_day(history.timestamp, seconds)
        wrap.add_artist_time(music.artist_ids, music.id, seconds)
        return True