import json

from app.models.playlist import Playlist, StoreState
from scripts.check_playlist_refs import find_stale_references, main


def test_find_stale_references() -> None:
    state = StoreState(
        playlists=[
            Playlist(id="pl_ok", name="Fine", song_ids=["s1", "s2"]),
            Playlist(id="pl_stale", name="Stale", song_ids=["s1", "gone", "s42"]),
        ]
    )

    assert find_stale_references(state) == {"pl_stale": ["gone", "s42"]}


def test_main_exit_codes(tmp_path, capsys) -> None:
    clean = tmp_path / "clean.json"
    clean.write_text(json.dumps({"playlists": [{"id": "a", "name": "A", "songIds": ["s1"]}]}))
    stale = tmp_path / "stale.json"
    stale.write_text(json.dumps({"playlists": [{"id": "b", "name": "B", "songIds": ["x"]}]}))
    broken = tmp_path / "broken.json"
    broken.write_text("not json")

    assert main([str(clean)]) == 0
    assert main([str(stale)]) == 1
    assert "b: unknown songs x" in capsys.readouterr().out
    assert main([str(broken)]) == 2
    assert main([str(tmp_path / "missing.json")]) == 0
