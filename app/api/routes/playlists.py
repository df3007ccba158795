from fastapi import APIRouter, Body, Depends, status

from app.core.store import JsonFileStore, get_store
from app.models.playlist import Playlist
from app.schemas.playlist import (
    OkResponse,
    PlaylistCreate,
    PlaylistListResponse,
    PlaylistOut,
    PlaylistResponse,
    PlaylistSongAdd,
)
from app.services import playlists as playlist_service

router = APIRouter(tags=["playlists"])


def _playlist_payload(playlist: Playlist) -> dict:
    return {"playlist": PlaylistOut.model_validate(playlist)}


@router.get("", response_model=PlaylistListResponse)
def get_playlists(store: JsonFileStore = Depends(get_store)):
    playlists = playlist_service.list_playlists(store)
    return {"playlists": [PlaylistOut.model_validate(p) for p in playlists]}


@router.post("", response_model=PlaylistResponse, status_code=status.HTTP_201_CREATED)
def create_playlist(
    payload: PlaylistCreate | None = Body(default=None),
    store: JsonFileStore = Depends(get_store),
):
    name = payload.name if payload else None
    return _playlist_payload(playlist_service.create_playlist(store, name))


@router.delete("/{playlist_id}", response_model=OkResponse)
def delete_playlist(playlist_id: str, store: JsonFileStore = Depends(get_store)):
    playlist_service.delete_playlist(store, playlist_id)
    return {"ok": True}


@router.post("/{playlist_id}/songs", response_model=PlaylistResponse)
def add_song_to_playlist(
    playlist_id: str,
    payload: PlaylistSongAdd | None = Body(default=None),
    store: JsonFileStore = Depends(get_store),
):
    song_id = payload.song_id if payload else None
    return _playlist_payload(playlist_service.add_song(store, playlist_id, song_id))


@router.delete("/{playlist_id}/songs/{song_id}", response_model=PlaylistResponse)
def remove_song_from_playlist(
    playlist_id: str,
    song_id: str,
    store: JsonFileStore = Depends(get_store),
):
    return _playlist_payload(playlist_service.remove_song(store, playlist_id, song_id))
