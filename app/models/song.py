from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Song:
    id: str
    title: str
    artist: str
    album: str | None
    duration_sec: int

    def search_text(self) -> str:
        return f"{self.title} {self.artist} {self.album or ''}".lower()
