import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

PORT = int(os.getenv("PORT", "4000"))
HOST = os.getenv("HOST", "0.0.0.0")

PLAYLIST_DATA_PATH = Path(os.getenv("PLAYLIST_DATA_PATH", str(BASE_DIR / "data.json")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
