from __future__ import annotations

import argparse
import sys
from pathlib import Path

from app.core.config import PLAYLIST_DATA_PATH
from app.core.errors import StoreError
from app.core.store import JsonFileStore
from app.models.playlist import StoreState
from app.services.catalog import song_exists


def find_stale_references(state: StoreState) -> dict[str, list[str]]:
    stale: dict[str, list[str]] = {}
    for playlist in state.playlists:
        missing = [song_id for song_id in playlist.song_ids if not song_exists(song_id)]
        if missing:
            stale[playlist.id] = missing
    return stale


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Report playlists that reference songs missing from the catalog."
    )
    parser.add_argument("path", nargs="?", default=str(PLAYLIST_DATA_PATH))
    args = parser.parse_args(argv)

    path = Path(args.path)
    if not path.exists():
        print(f"{path} does not exist; nothing to check.")
        return 0

    try:
        state = JsonFileStore(path).load()
    except StoreError as exc:
        print(f"Unable to load {path}: {exc}", file=sys.stderr)
        return 2

    stale = find_stale_references(state)
    if not stale:
        print(f"{len(state.playlists)} playlists checked, no stale song references.")
        return 0

    for playlist_id, song_ids in stale.items():
        print(f"{playlist_id}: unknown songs {', '.join(song_ids)}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
