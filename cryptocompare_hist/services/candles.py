from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from cryptocompare_hist.schemas.histo import HistoMinuteRecord


def records_to_candles(payload: Any) -> list[dict[str, Any]]:
    """
    Map the ``Data`` array of a histominute payload to candle dicts.

    Error payloads (no ``Data`` list) give an empty list.
    """
    if not isinstance(payload, dict):
        return []
    data = payload.get("Data")
    if not isinstance(data, list):
        return []

    candles = []
    for raw in data:
        rec = HistoMinuteRecord.model_validate(raw)
        candles.append({
            "timestamp": datetime.fromtimestamp(rec.time, tz=timezone.utc),
            "open": rec.open,
            "high": rec.high,
            "low": rec.low,
            "close": rec.close,
            "volume": rec.volumefrom,
        })

    return candles
