from app.models.song import Song
from app.services.catalog import SONGS, search_songs, song_exists


def test_empty_query_returns_catalog_in_order() -> None:
    for query in (None, "", "   "):
        assert [song.id for song in search_songs(query)] == [song.id for song in SONGS]


def test_search_matches_title_artist_and_album_case_insensitively() -> None:
    assert [song.id for song in search_songs("harry styles")] == ["s5", "s9"]
    assert [song.id for song in search_songs("LEVITATING")] == ["s3"]
    assert [song.id for song in search_songs("midnights")] == ["s10"]
    assert [song.id for song in search_songs("  weeknd  ")] == ["s1"]


def test_search_results_contain_query() -> None:
    for query in ("a", "lo", "the", "xyz-no-match"):
        for song in search_songs(query):
            assert query in f"{song.title} {song.artist} {song.album}".lower()


def test_search_with_no_match_is_empty() -> None:
    assert search_songs("definitely not a song") == []


def test_missing_album_matches_as_empty_string() -> None:
    songs = (
        Song(id="x1", title="Untitled", artist="Nobody", album=None, duration_sec=10),
        Song(id="x2", title="Other", artist="Somebody", album="None Left", duration_sec=10),
    )

    assert [song.id for song in search_songs("none", songs)] == ["x2"]
    assert [song.id for song in search_songs("nobody", songs)] == ["x1"]


def test_song_exists_uses_exact_id() -> None:
    assert song_exists("s1")
    assert song_exists("s10")
    assert not song_exists("S1")
    assert not song_exists("s11")
