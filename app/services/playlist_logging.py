from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def log_playlist_change(action: str, playlist_id: str, **fields: object) -> None:
    payload = {
        "type": "playlist_change",
        "action": action,
        "playlist_id": playlist_id,
        "ts": _now_iso(),
        **fields,
    }
    logger.info(json.dumps(payload, sort_keys=True, default=str))
