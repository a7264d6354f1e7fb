import pytest

from musicstats.music import Music, parse_duration


def test_parse_zero():
    assert parse_duration("00:00:00") == 0


def test_parse_known_value():
    assert parse_duration("00:03:20") == 200


def test_units_are_consistent():
    assert parse_duration("01:00:00") == parse_duration("00:60:00")
    assert parse_duration("00:01:00") == parse_duration("00:00:60")


def test_parse_is_additive():
    total = parse_duration("02:15:40")
    assert total == parse_duration("02:00:00") + parse_duration("00:15:00") + parse_duration("00:00:40")


@pytest.mark.parametrize("text", ["", "abc", "10:20", "1-2-3", ":1:2"])
def test_bad_duration_raises(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_music_duration_seconds_uses_parse():
    music = Music(1, [2, 3], 4, "00:04:05", "Rock", 2020)
    assert music.duration_seconds() == parse_duration("00:04:05")
    assert music.num_artists == 2
    assert music.genre == "Rock"


def test_music_artist_ids_copied():
    ids = [9]
    music = Music(1, ids, 4, "00:01:00", "Pop", 2000)
    ids.append(10)
    assert music.artist_ids == (9,)


def test_music_bad_duration_raises():
    with pytest.raises(ValueError):
        Music(1, [], 1, "nope", "Pop", 2000).duration_seconds()