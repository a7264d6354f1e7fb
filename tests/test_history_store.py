import pytest

from musicstats.artist import ArtistData, ArtistType
from musicstats.history import History, Platform
from musicstats.history_store import HistoryStore, top10_artists


def make_history(history_id, user_id=1, music_id=1):
    return History(
        history_id, user_id, music_id, "2024/01/02 10:00:00", "00:03:00", Platform.MOBILE
    )


def test_top10_orders_by_reproduction_then_id():
    artists = [ArtistData(3, 50), ArtistData(1, 50), ArtistData(2, 90)]
    assert [a.artist_id for a in top10_artists(artists)] == [2, 1, 3]


def test_top10_truncates_to_ten():
    artists = [ArtistData(i, i) for i in range(15)]
    top = top10_artists(artists)
    assert len(top) == 10
    assert [a.artist_id for a in top] == list(range(14, 4, -1))


def test_top10_of_empty_is_empty():
    assert top10_artists([]) == []


def test_add_get_remove_history():
    store = HistoryStore()
    entry = make_history(7)
    store.add(entry)
    assert store.get(7) is entry
    assert 7 in store
    assert len(store) == 1
    assert list(store) == [entry]
    store.remove(7)
    assert store.get(7) is None
    assert 7 not in store
    store.remove(7)
    assert len(store) == 0


def test_validate_ids():
    store = HistoryStore()
    store.add(make_history(1))
    store.add(make_history(2))
    assert store.validate_ids([1, 2])
    assert not store.validate_ids([1, 3])
    assert store.validate_ids([])


def test_add_artist_duration_accumulates_and_keeps_first_type():
    store = HistoryStore()
    store.add_artist_duration("w1", 4, 100, ArtistType.GROUP)
    data = store.add_artist_duration("w1", 4, 50, ArtistType.INDIVIDUAL)
    assert data.total_reproduction == 100 + 50
    assert data.type is ArtistType.GROUP
    other = store.add_artist_duration("w2", 4, 30, ArtistType.GROUP)
    assert other.total_reproduction == 30


def test_populate_week_top10():
    store = HistoryStore()
    store.add_artist_duration("w1", 1, 10, ArtistType.INDIVIDUAL)
    store.add_artist_duration("w1", 2, 20, ArtistType.INDIVIDUAL)
    store.populate_week_top10()
    assert [a.artist_id for a in store.week_top10("w1")] == [2, 1]
    assert store.week_top10("missing") == []


def test_most_frequent_artist_counts_weeks():
    store = HistoryStore()
    store.add_artist_duration("w1", 1, 10, ArtistType.INDIVIDUAL)
    store.add_artist_duration("w1", 2, 5, ArtistType.INDIVIDUAL)
    store.add_artist_duration("w2", 2, 20, ArtistType.GROUP)
    store.populate_week_top10()
    assert store.count_top10_appearances(None, None) is True
    data, count = store.most_frequent_artist()
    assert data.artist_id == 2
    assert count == 2


def test_most_frequent_artist_tie_goes_to_smaller_id():
    store = HistoryStore()
    store.add_artist_duration("w1", 5, 10, ArtistType.INDIVIDUAL)
    store.add_artist_duration("w2", 3, 10, ArtistType.INDIVIDUAL)
    store.populate_week_top10()
    store.count_top10_appearances(None, None)
    data, count = store.most_frequent_artist()
    assert data.artist_id == 3
    assert count == 1


def test_interval_filters_weeks():
    store = HistoryStore()
    store.add_artist_duration("2024/01", 1, 10, ArtistType.INDIVIDUAL)
    store.add_artist_duration("2024/05", 2, 10, ArtistType.INDIVIDUAL)
    store.add_artist_duration("2024/09", 3, 10, ArtistType.INDIVIDUAL)
    store.populate_week_top10()
    assert store.count_top10_appearances("2024/02", "2024/06") is True
    data, _ = store.most_frequent_artist()
    assert data.artist_id == 2


def test_interval_bounds_are_inclusive():
    store = HistoryStore()
    store.add_artist_duration("2024/05", 2, 10, ArtistType.INDIVIDUAL)
    store.populate_week_top10()
    assert store.count_top10_appearances("2024/05", "2024/05") is True


def test_empty_interval_finds_nothing():
    store = HistoryStore()
    store.add_artist_duration("2024/01", 1, 10, ArtistType.INDIVIDUAL)
    store.populate_week_top10()
    assert store.count_top10_appearances("2025/01", None) is False
    assert store.most_frequent_artist() is None


def test_counts_accumulate_until_reset():
    store = HistoryStore()
    store.add_artist_duration("w1", 1, 10, ArtistType.INDIVIDUAL)
    store.populate_week_top10()
    store.count_top10_appearances(None, None)
    _, first = store.most_frequent_artist()
    store.count_top10_appearances(None, None)
    _, second = store.most_frequent_artist()
    assert second == 2 * first
    store.reset_artist_counts()
    assert store.most_frequent_artist() is None


def test_genres_listened():
    store = HistoryStore()
    store.add_genre_listened("U1", "Rock")
    store.add_genre_listened("U1", "Pop")
    store.add_genre_listened("U1", "Rock")
    store.add_genre_listened("U2", "Jazz")
    entry = store.genres_listened("U1")
    assert entry.counts == {"Rock": 2, "Pop": 1}
    assert entry.genres == ("Rock", "Pop")
    assert store.genres_listened("U9") is None
    assert [g.username for g in store.all_genres_listened()] == ["U1", "U2"]


@pytest.mark.parametrize("genre", ["Rock", "Hip Hop"])
def test_add_genre_listened_returns_entry(genre):
    store = HistoryStore()
    entry = store.add_genre_listened("U3", genre)
    assert entry is store.genres_listened("U3")
    assert entry.counts == {genre: 1}