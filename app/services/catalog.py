from __future__ import annotations

from app.models.song import Song

SONGS: tuple[Song, ...] = (
    Song(id="s1", title="Blinding Lights", artist="The Weeknd", album="After Hours", duration_sec=200),
    Song(id="s2", title="Shape of You", artist="Ed Sheeran", album="÷", duration_sec=233),
    Song(id="s3", title="Levitating", artist="Dua Lipa", album="Future Nostalgia", duration_sec=203),
    Song(id="s4", title="bad guy", artist="Billie Eilish", album="WHEN WE ALL FALL ASLEEP", duration_sec=194),
    Song(id="s5", title="Watermelon Sugar", artist="Harry Styles", album="Fine Line", duration_sec=174),
    Song(id="s6", title="Someone You Loved", artist="Lewis Capaldi", album="Divinely Uninspired", duration_sec=182),
    Song(id="s7", title="Stay", artist="The Kid LAROI, Justin Bieber", album="F*CK LOVE 3", duration_sec=141),
    Song(id="s8", title="Circles", artist="Post Malone", album="Hollywood's Bleeding", duration_sec=215),
    Song(id="s9", title="As It Was", artist="Harry Styles", album="Harry's House", duration_sec=167),
    Song(id="s10", title="Anti-Hero", artist="Taylor Swift", album="Midnights", duration_sec=200),
)

_SONGS_BY_ID = {song.id: song for song in SONGS}


def search_songs(query: str | None, songs: tuple[Song, ...] = SONGS) -> list[Song]:
    q = (query or "").strip().lower()
    if not q:
        return list(songs)
    return [song for song in songs if q in song.search_text()]


def song_exists(song_id: str) -> bool:
    return song_id in _SONGS_BY_ID
