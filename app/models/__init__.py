from app.models.playlist import Playlist, StoreState
from app.models.song import Song

__all__ = ["Playlist", "Song", "StoreState"]
