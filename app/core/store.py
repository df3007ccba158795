"""
Flat-file persistence for playlists.

The whole state lives in one JSON document and is always read and written
as a unit. Writes go to a temporary sibling file that is then swapped into
place, so a reader sees either the previous or the next document.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from app.core.config import PLAYLIST_DATA_PATH
from app.core.errors import StoreError
from app.models.playlist import StoreState

logger = logging.getLogger(__name__)


class JsonFileStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        # Held by callers across a load-mutate-save cycle.
        self.lock = threading.RLock()

    def load(self) -> StoreState:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            state = StoreState()
            logger.info("Initializing empty playlist store at %s", self.path)
            self.save(state)
            return state
        except UnicodeDecodeError as exc:
            raise StoreError(f"Playlist data in {self.path} is not UTF-8: {exc}") from exc
        except OSError as exc:
            raise StoreError(f"Failed to read {self.path}: {exc}") from exc

        try:
            return StoreState.from_dict(json.loads(raw))
        except (json.JSONDecodeError, ValueError) as exc:
            raise StoreError(f"Malformed playlist data in {self.path}: {exc}") from exc

    def save(self, state: StoreState) -> None:
        payload = json.dumps(state.to_dict(), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError(f"Failed to write {self.path}: {exc}") from exc


_store: JsonFileStore | None = None
_store_lock = threading.Lock()


def get_store() -> JsonFileStore:
    global _store
    with _store_lock:
        if _store is None:
            _store = JsonFileStore(PLAYLIST_DATA_PATH)
        return _store
