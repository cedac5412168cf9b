from __future__ import annotations

import pytest

from cryptocompare_hist.config import settings as settings_module


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("CRYPTOCOMPARE_HISTOMINUTE_URL", "CRYPTOCOMPARE_EXCHANGE_ALIASES", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


@pytest.fixture()
def histominute_payload() -> dict:
    return {
        "Response": "Success",
        "Type": 100,
        "Aggregated": False,
        "Data": [
            {
                "time": 1502259120,
                "close": 3396.44,
                "high": 3397.63,
                "low": 3396.34,
                "open": 3397.39,
                "volumefrom": 98.2,
                "volumeto": 335485,
            },
            {
                "time": 1502259180,
                "close": 3396.86,
                "high": 3396.94,
                "low": 3396.44,
                "open": 3396.44,
                "volumefrom": 16.581031,
                "volumeto": 56637.869999999995,
            },
        ],
        "TimeTo": 1502259180,
        "TimeFrom": 1502259120,
        "FirstValueInArray": True,
        "ConversionType": {"type": "direct", "conversionSymbol": ""},
    }
