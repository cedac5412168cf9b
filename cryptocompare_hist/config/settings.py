# cryptocompare_hist/config/settings.py
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Dict

DEFAULT_HISTOMINUTE_URL = "https://min-api.cryptocompare.com/data/histominute"


def parse_str(value: str | None, default: str) -> str:
    if value is None or value.strip() == "":
        return default
    return value.strip()


def parse_aliases(value: str | None) -> Dict[str, str]:
    """
    Supports:
      - JSON: {"gdax":"Coinbase","okx":"OKEX"}
      - CSV map: "gdax=Coinbase,okx=OKEX"

    Keys are lower-cased so lookups can be case-insensitive.
    """
    if not value:
        return {}

    v = value.strip()
    if v.startswith("{"):
        data = json.loads(v)
        if not isinstance(data, dict):
            raise ValueError("CRYPTOCOMPARE_EXCHANGE_ALIASES must be a JSON object")
        return {str(k).strip().lower(): str(val).strip() for k, val in data.items()}

    out: Dict[str, str] = {}
    for part in v.split(","):
        part = part.strip()
        if not part:
            continue
        if "=" not in part:
            raise ValueError(f"Bad CRYPTOCOMPARE_EXCHANGE_ALIASES part: {part}")
        k, val = part.split("=", 1)
        k, val = k.strip(), val.strip()
        if not k or not val:
            raise ValueError(f"Bad CRYPTOCOMPARE_EXCHANGE_ALIASES part: {part}")
        out[k.lower()] = val
    return out


@dataclass(frozen=True)
class Settings:
    CRYPTOCOMPARE_HISTOMINUTE_URL: str = DEFAULT_HISTOMINUTE_URL
    CRYPTOCOMPARE_EXCHANGE_ALIASES: Dict[str, str] = field(default_factory=dict)
    LOG_LEVEL: str = "INFO"

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            CRYPTOCOMPARE_HISTOMINUTE_URL=parse_str(
                os.getenv("CRYPTOCOMPARE_HISTOMINUTE_URL"), DEFAULT_HISTOMINUTE_URL
            ),
            CRYPTOCOMPARE_EXCHANGE_ALIASES=parse_aliases(os.getenv("CRYPTOCOMPARE_EXCHANGE_ALIASES")),
            LOG_LEVEL=parse_str(os.getenv("LOG_LEVEL"), "INFO").upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
