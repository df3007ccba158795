from fastapi import APIRouter, Query

from app.schemas.song import SongListResponse, SongOut
from app.services.catalog import search_songs

router = APIRouter(tags=["songs"])


@router.get("", response_model=SongListResponse)
def get_songs(query: str | None = Query(default=None)):
    return {"songs": [SongOut.model_validate(song) for song in search_songs(query)]}
