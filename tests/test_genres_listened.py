import pytest

from musicstats.genres_listened import GenresListened


def test_new_user_has_no_genres():
    gl = GenresListened("U0000001")
    assert gl.size() == 0
    assert gl.genres == ()
    assert gl.similarity == -1


def test_add_new_genre_counts_one():
    gl = GenresListened("U0000001")
    gl.add("Rock")
    assert gl.counts == {"Rock": 1}


def test_add_repeated_genre_increments():
    gl = GenresListened("U0000001")
    for _ in range(4):
        gl.add("Jazz")
    assert gl.counts["Jazz"] == 4
    assert gl.size() == 1


def test_genres_keep_first_heard_order():
    gl = GenresListened("U0000001")
    for genre in ["Pop", "Rock", "Pop", "Metal", "Rock"]:
        gl.add(genre)
    assert gl.genres == ("Pop", "Rock", "Metal")
    assert gl.listened == (2, 2, 1)


def test_sum_of_listened_equals_plays():
    gl = GenresListened("U0000002")
    plays = ["Blues", "Jazz", "Blues", "Reggae", "Blues", "Jazz"]
    for genre in plays:
        gl.add(genre)
    assert sum(gl.listened) == len(plays)
    assert gl.size() == len(set(plays))


def test_create_from_parallel_arrays():
    gl = GenresListened.create("U0000003", ["Pop", "Rock"], [5, 2])
    assert gl.genres == ("Pop", "Rock")
    assert gl.listened == (5, 2)
    assert gl.username == "U0000003"


def test_create_with_mismatched_lengths():
    with pytest.raises(ValueError):
        GenresListened.create("U0000003", ["Pop", "Rock"], [5])


def test_counts_are_copied():
    source = {"Pop": 1}
    gl = GenresListened("U0000004", source)
    gl.add("Pop")
    assert source == {"Pop": 1}
    assert gl.counts == {"Pop": 2}