from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from cryptocompare_hist.services.candles import records_to_candles
from cryptocompare_hist.services.histo_minute import HistoMinuteOptions, find

logger = logging.getLogger("cryptocompare_hist.api.histo")

router = APIRouter(prefix="/histo", tags=["histo"])


def _fetch(
    fsym: str,
    tsym: str,
    options: HistoMinuteOptions,
) -> Any:
    try:
        return find(fsym, tsym, options)
    except httpx.HTTPError as exc:
        logger.warning("histominute upstream error | %s/%s | %s", fsym, tsym, exc)
        raise HTTPException(status_code=502, detail="Unable to reach CryptoCompare") from exc
    except ValueError as exc:
        # json.JSONDecodeError and UnicodeDecodeError from Response.json()
        logger.warning("histominute invalid json | %s/%s | %s", fsym, tsym, exc)
        raise HTTPException(status_code=502, detail="Invalid JSON from CryptoCompare") from exc


def _options(
    e: Optional[str],
    limit: Optional[int],
    aggregate: Optional[int],
    to_ts: Optional[int],
    try_conversion: bool,
) -> HistoMinuteOptions:
    return HistoMinuteOptions(
        exchange=e,
        limit=limit,
        aggregate=aggregate,
        to_ts=to_ts,
        try_conversion=try_conversion,
    )


# Plain ``def`` routes: ``find`` blocks, FastAPI runs these in its threadpool.
@router.get("/minute")
def get_histo_minute(
    fsym: str,
    tsym: str,
    e: Optional[str] = None,
    limit: Optional[int] = None,
    aggregate: Optional[int] = None,
    to_ts: Optional[int] = Query(None, alias="toTs"),
    try_conversion: bool = Query(True, alias="tryConversion"),
):
    """
    Raw histominute payload, passed through unchanged.
    Example: /histo/minute?fsym=BTC&tsym=USD&limit=10
    """
    return _fetch(fsym, tsym, _options(e, limit, aggregate, to_ts, try_conversion))


@router.get("/minute/candles")
def get_histo_minute_candles(
    fsym: str,
    tsym: str,
    e: Optional[str] = None,
    limit: Optional[int] = None,
    aggregate: Optional[int] = None,
    to_ts: Optional[int] = Query(None, alias="toTs"),
    try_conversion: bool = Query(True, alias="tryConversion"),
):
    payload = _fetch(fsym, tsym, _options(e, limit, aggregate, to_ts, try_conversion))
    try:
        return records_to_candles(payload)
    except ValidationError as exc:
        logger.warning("histominute invalid record | %s/%s | %s", fsym, tsym, exc)
        raise HTTPException(status_code=502, detail="Invalid data from CryptoCompare") from exc
