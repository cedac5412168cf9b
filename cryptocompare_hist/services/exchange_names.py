"""Canonical CryptoCompare exchange names for the ``e`` query parameter."""

from __future__ import annotations

from typing import Any, Mapping


# lower-case lookup key -> spelling CryptoCompare expects
EXCHANGE_NAMES: dict[str, str] = {
    "bitbay": "BitBay",
    "bitfinex": "Bitfinex",
    "bitflyer": "bitFlyer",
    "bithumb": "Bithumb",
    "binance": "Binance",
    "bitsquare": "Bitsquare",
    "bitstamp": "Bitstamp",
    "bittrex": "BitTrex",
    "bleutrade": "Bleutrade",
    "btc38": "BTC38",
    "btcchina": "BTCChina",
    "btce": "BTCE",
    "btcmarkets": "BTCMarkets",
    "btcxindia": "BTCXIndia",
    "cccagg": "CCCAGG",
    "ccedk": "CCEDK",
    "cexio": "Cexio",
    "coinbase": "Coinbase",
    "coinfloor": "Coinfloor",
    "coinone": "Coinone",
    "coinse": "Coinse",
    "cryptopia": "Cryptopia",
    "cryptsy": "Cryptsy",
    "etherdelta": "EtherDelta",
    "exmo": "Exmo",
    "gatecoin": "Gatecoin",
    "gemini": "Gemini",
    "hitbtc": "HitBTC",
    "huobi": "Huobi",
    "itbit": "itBit",
    "korbit": "Korbit",
    "kraken": "Kraken",
    "kucoin": "Kucoin",
    "lakebtc": "LakeBTC",
    "liqui": "Liqui",
    "livecoin": "LiveCoin",
    "localbitcoins": "LocalBitcoins",
    "lykke": "Lykke",
    "okcoin": "OKCoin",
    "okex": "OKEX",
    "poloniex": "Poloniex",
    "quoine": "Quoine",
    "remitano": "Remitano",
    "tidex": "Tidex",
    "tuxexchange": "TuxExchange",
    "yacuna": "Yacuna",
    "yobit": "Yobit",
    "yunbi": "Yunbi",
}


def normalize_exchange_name(name: Any, aliases: Mapping[str, str] | None = None) -> str:
    """
    Return the canonical spelling of an exchange name.

    ``aliases`` (lower-case keys) win over the built-in table. Unknown names are
    returned stripped but otherwise as given, so newly listed exchanges still work.
    Non-string names are converted with ``str()`` first.
    """
    cleaned = str(name).strip()
    key = cleaned.lower()
    if aliases and key in aliases:
        return aliases[key]
    return EXCHANGE_NAMES.get(key, cleaned)
