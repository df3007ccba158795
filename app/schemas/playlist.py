from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _scalar_to_str(value: Any) -> Any:
    # Numbers and booleans are accepted as text; falsy ones count as missing.
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, (int, float)):
        return str(value) if value else None
    return value


class PlaylistCreate(BaseModel):
    name: str | None = Field(default=None, examples=["My Mix"])

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, value: Any) -> Any:
        return _scalar_to_str(value)


class PlaylistSongAdd(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    song_id: str | None = Field(default=None, alias="songId", examples=["s1"])

    @field_validator("song_id", mode="before")
    @classmethod
    def coerce_song_id(cls, value: Any) -> Any:
        return _scalar_to_str(value)


class PlaylistOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    song_ids: list[str] = Field(default_factory=list, alias="songIds")


class PlaylistResponse(BaseModel):
    playlist: PlaylistOut


class PlaylistListResponse(BaseModel):
    playlists: list[PlaylistOut]


class OkResponse(BaseModel):
    ok: bool
