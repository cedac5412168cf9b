from __future__ import annotations

import pytest

from cryptocompare_hist.config.settings import (
    DEFAULT_HISTOMINUTE_URL,
    Settings,
    get_settings,
    parse_aliases,
)


def test_defaults_without_env():
    settings = Settings.from_env()
    assert settings.CRYPTOCOMPARE_HISTOMINUTE_URL == DEFAULT_HISTOMINUTE_URL
    assert settings.CRYPTOCOMPARE_EXCHANGE_ALIASES == {}
    assert settings.LOG_LEVEL == "INFO"


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("CRYPTOCOMPARE_HISTOMINUTE_URL", " https://proxy.local/histominute ")
    monkeypatch.setenv("CRYPTOCOMPARE_EXCHANGE_ALIASES", '{"GDAX": "Coinbase"}')
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.CRYPTOCOMPARE_HISTOMINUTE_URL == "https://proxy.local/histominute"
    assert settings.CRYPTOCOMPARE_EXCHANGE_ALIASES == {"gdax": "Coinbase"}
    assert settings.LOG_LEVEL == "DEBUG"


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert get_settings() is first


def test_parse_aliases_csv():
    assert parse_aliases("gdax=Coinbase, okx = OKEX,") == {"gdax": "Coinbase", "okx": "OKEX"}


@pytest.mark.parametrize("value", ["gdax", "=Coinbase", '["gdax"]'])
def test_parse_aliases_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_aliases(value)
