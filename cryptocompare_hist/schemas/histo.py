from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class HistoMinuteRecord(BaseModel):
    """One minute (or aggregated) OHLCV point as returned by CryptoCompare."""

    model_config = ConfigDict(extra="allow")

    time: int
    open: float
    high: float
    low: float
    close: float
    volumefrom: float
    volumeto: float


class HistoMinuteConversion(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    conversionSymbol: str = ""


class HistoMinuteResponse(BaseModel):
    """Conventional response envelope. Documentation only, never enforced on fetch."""

    model_config = ConfigDict(extra="allow")

    Response: str
    Type: Optional[int] = None
    Message: Optional[str] = None
    Aggregated: Optional[bool] = None
    Data: List[HistoMinuteRecord] = []
    TimeTo: Optional[int] = None
    TimeFrom: Optional[int] = None
    FirstValueInArray: Optional[bool] = None
    ConversionType: Optional[HistoMinuteConversion] = None
