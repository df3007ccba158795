"""
Playlist business logic.

Every operation reloads the store, mutates the in-memory state and writes
it back while holding the store lock. Persisting is always the last step,
so a failure before it leaves the data file untouched.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable

from app.core.errors import NotFoundError, ValidationError
from app.core.store import JsonFileStore
from app.models.playlist import Playlist
from app.repositories.playlists import append_playlist, get_playlist_by_id, remove_playlist
from app.services.catalog import song_exists
from app.services.playlist_logging import log_playlist_change

logger = logging.getLogger(__name__)

PLAYLIST_NOT_FOUND = "Playlist not found"


def make_playlist_id(prefix: str = "pl") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}_{int(time.time() * 1000):x}"


def list_playlists(store: JsonFileStore) -> list[Playlist]:
    return store.load().playlists


def create_playlist(
    store: JsonFileStore,
    name: str | None,
    *,
    id_factory: Callable[[], str] = make_playlist_id,
) -> Playlist:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Playlist name is required")

    with store.lock:
        state = store.load()
        playlist = append_playlist(state, Playlist(id=id_factory(), name=cleaned))
        store.save(state)

    log_playlist_change("created", playlist.id, name=playlist.name)
    return playlist


def delete_playlist(store: JsonFileStore, playlist_id: str) -> None:
    with store.lock:
        state = store.load()
        if not remove_playlist(state, playlist_id):
            raise NotFoundError(PLAYLIST_NOT_FOUND)
        store.save(state)

    log_playlist_change("deleted", playlist_id)


def add_song(store: JsonFileStore, playlist_id: str, song_id: str | None) -> Playlist:
    song_id = (song_id or "").strip()
    if not song_id:
        raise ValidationError("songId is required")
    if not song_exists(song_id):
        raise ValidationError("Song does not exist")

    with store.lock:
        state = store.load()
        playlist = get_playlist_by_id(state, playlist_id)
        if playlist is None:
            raise NotFoundError(PLAYLIST_NOT_FOUND)
        if song_id in playlist.song_ids:
            logger.debug("Song %s already in playlist %s", song_id, playlist_id)
            return playlist
        playlist.song_ids.append(song_id)
        store.save(state)

    log_playlist_change("song_added", playlist_id, song_id=song_id)
    return playlist


def remove_song(store: JsonFileStore, playlist_id: str, song_id: str) -> Playlist:
    with store.lock:
        state = store.load()
        playlist = get_playlist_by_id(state, playlist_id)
        if playlist is None:
            raise NotFoundError(PLAYLIST_NOT_FOUND)
        before = len(playlist.song_ids)
        playlist.song_ids = [sid for sid in playlist.song_ids if sid != song_id]
        store.save(state)

    if len(playlist.song_ids) != before:
        log_playlist_change("song_removed", playlist_id, song_id=song_id)
    return playlist
