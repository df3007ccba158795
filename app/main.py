import logging
import time
import uuid

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import playlists_router, songs_router
from app.core.config import CORS_ALLOW_ORIGINS, HOST, PORT
from app.core.errors import PlaylistApiError, StoreError
from app.core.logging_config import configure_logging

app = FastAPI(title="Playlist API")

logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_tracing_middleware(request: Request, call_next):
    request_id = uuid.uuid4().hex[:8]
    method = request.method
    path = request.url.path
    logger.info("REQ_START %s %s %s", request_id, method, path)
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as err:
        logger.error("REQ_ERR %s %s %s %s", request_id, method, path, err)
        raise
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        "REQ_END %s %s %s %s %.2fms",
        request_id,
        method,
        path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(PlaylistApiError)
async def playlist_api_error_handler(_: Request, exc: PlaylistApiError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("Playlist store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Playlist storage is unavailable"})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(_: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


app.include_router(songs_router, prefix="/songs")
app.include_router(playlists_router, prefix="/playlists")


@app.get("/health")
def health():
    return {"ok": True}


def run() -> None:
    configure_logging()
    logger.info("API running on http://localhost:%s", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
