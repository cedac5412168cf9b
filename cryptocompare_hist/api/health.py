# cryptocompare_hist/api/health.py
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from cryptocompare_hist.config.settings import get_settings

router = APIRouter(tags=["health"])

APP_STARTED_AT = time.time()


def _now_meta() -> Dict[str, Any]:
    now_ts = time.time()
    now_dt = datetime.fromtimestamp(now_ts, tz=timezone.utc)
    return {
        "now_unix": int(now_ts),
        "now_iso": now_dt.isoformat().replace("+00:00", "Z"),
        "uptime_s": int(now_ts - APP_STARTED_AT),
    }


@router.get("/live")
async def live():
    return {"status": "ok"}


@router.get("/ready")
async def ready():
    # No upstream ping: readiness must not spend a remote request.
    settings = get_settings()
    return {
        "status": "ok",
        **_now_meta(),
        "upstream": {"histominute_url": settings.CRYPTOCOMPARE_HISTOMINUTE_URL},
    }
