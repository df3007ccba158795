from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Playlist:
    id: str
    name: str
    song_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "songIds": list(self.song_ids)}

    @classmethod
    def from_dict(cls, data: Any) -> Playlist:
        if not isinstance(data, dict):
            raise ValueError("playlist record must be an object")
        playlist_id = data.get("id")
        name = data.get("name")
        song_ids = data.get("songIds")
        if not isinstance(playlist_id, str) or not isinstance(name, str):
            raise ValueError("playlist record needs string id and name")
        if not isinstance(song_ids, list) or not all(isinstance(s, str) for s in song_ids):
            raise ValueError(f"playlist {playlist_id} has invalid songIds")
        return cls(id=playlist_id, name=name, song_ids=list(song_ids))


@dataclass
class StoreState:
    playlists: list[Playlist] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"playlists": [playlist.to_dict() for playlist in self.playlists]}

    @classmethod
    def from_dict(cls, data: Any) -> StoreState:
        if not isinstance(data, dict) or not isinstance(data.get("playlists"), list):
            raise ValueError("data file must be an object with a 'playlists' list")
        return cls(playlists=[Playlist.from_dict(item) for item in data["playlists"]])
