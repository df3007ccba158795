from app.models.playlist import Playlist, StoreState


def get_playlist_by_id(state: StoreState, playlist_id: str) -> Playlist | None:
    for playlist in state.playlists:
        if playlist.id == playlist_id:
            return playlist
    return None


def append_playlist(state: StoreState, playlist: Playlist) -> Playlist:
    state.playlists.append(playlist)
    return playlist


def remove_playlist(state: StoreState, playlist_id: str) -> bool:
    before = len(state.playlists)
    state.playlists = [playlist for playlist in state.playlists if playlist.id != playlist_id]
    return len(state.playlists) != before
