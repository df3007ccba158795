from pydantic import BaseModel, ConfigDict, Field


class SongOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    artist: str
    album: str | None = None
    duration_sec: int = Field(..., alias="durationSec", gt=0)


class SongListResponse(BaseModel):
    songs: list[SongOut]
