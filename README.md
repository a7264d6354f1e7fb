# musicstats

An in-memory model of a music streaming catalogue. It covers artists, albums,
musics, users and their listening history, and the statistics built on them.

## What it provides

- **Entities**: `Album`, `Artist` (with `ArtistType` and `ArtistData`),
  `Music`, `History` (with `Platform`) and `User` (with `SubscriptionType`).
  Helpers include `parse_duration`, `artist_type_from_string`,
  `is_valid_artist_type`, `platform_from_string`, `is_valid_platform` and
  `subscription_from_string`. Each one raises `ValueError` on bad input.
- **Stores** that index the entities by id and keep derived data:
  - `ArtistStore` keeps album counts and play counts per artist. It can also
    build a `Discography` of all its artists and list the groups that have a
    given artist as a member (`collectives_containing`).
  - `AlbumStore` indexes albums by id.
  - `UserStore` indexes users and keeps liked-genre totals per age, held as
    `UserLikes`.
  - `MusicStore` counts liked songs by genre and adds song durations to a
    `Discography`. It also builds a yearly `Wrapped` summary from history
    entries.
  - `HistoryStore` keeps listening time per artist for each week. It computes
    each week's top 10 (`top10_artists`), counts how often each artist appears
    in the top 10 over an interval of weeks, and keeps `GenresListened` play
    counts per user.
- **Discography**: artists with the total duration of their songs. It can be
  sorted by duration, longest first, with ties broken by ascending id.
- **Wrapped**: one user's yearly summary. It gives the total listening time,
  the favourite genre, the number of songs heard (counted per artist set), and
  the top artist, day, album and hour.

## Installation

```
pip install .
```

For development, install the test extra and run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from musicstats.artist import Artist, ArtistType
from musicstats.artist_store import ArtistStore
from musicstats.music import Music
from musicstats.music_store import MusicStore

artists = ArtistStore()
artists.add(Artist(id=1, name="Band", recipe_per_stream=0.01,
                   constituents=[], country="Portugal", type=ArtistType.INDIVIDUAL))

musics = MusicStore()
musics.add(Music(id=10, artist_ids=[1], album_id=5,
                 duration="00:03:30", genre="Rock", year=2020))

discography = musics.update_discography(artists.discography())
discography.sort_by_duration()
for entry in discography:
    print(entry.id, entry.name, entry.duration)   # 1 Band 210
```

## Checking query results

Query answers are stored as one file per line of a queries file. The file for
line N is named `command<N>_output.txt`. The `musicstats-check` command
compares a directory of produced results with a directory of expected ones:

```
musicstats-check <queries-file> <expected-dir> [--results-dir DIR]
```

`--results-dir` defaults to `resultados`. For each query type, 1 to 6, the
command prints how many outputs matched. For each mismatch it prints the first
line that differs, and it reports any output file that is missing. It ends with
the elapsed time.

The same comparison can be used from code through `compare_lines`,
`compare_files`, `check_results` and `format_report` in `musicstats.checker`.

## What it does not do

The package does not read a dataset from CSV files, and it does not validate
raw records. It does not answer the queries or write their
`command<N>_output.txt` files. Loading data into the stores and producing
answers is left to the caller. The only command is the result checker.