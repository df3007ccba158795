from app.api.routes.playlists import router as playlists_router
from app.api.routes.songs import router as songs_router

__all__ = ["playlists_router", "songs_router"]
