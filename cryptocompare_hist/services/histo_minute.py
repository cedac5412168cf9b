"""Client for the CryptoCompare ``histominute`` endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from cryptocompare_hist.config.settings import DEFAULT_HISTOMINUTE_URL, get_settings
from cryptocompare_hist.services.exchange_names import normalize_exchange_name

logger = logging.getLogger("cryptocompare_hist.histo_minute")

API_URL = DEFAULT_HISTOMINUTE_URL


@dataclass(frozen=True)
class HistoMinuteOptions:
    """
    Optional query settings. ``None`` means "not sent".

    exchange:        exchange name, normalized before it is sent as ``e``
                     (remote default: CCCAGG)
    limit:           number of points, sent verbatim (remote default 1440, max 2000)
    aggregate:       minutes combined into one point (remote default 1)
    to_ts:           unix seconds of the last point (remote default: now)
    try_conversion:  only ``False`` is sent, as ``tryConversion=false``
    """

    exchange: Optional[str] = None
    limit: Optional[int] = None
    aggregate: Optional[int] = None
    to_ts: Optional[int] = None
    try_conversion: bool = True

    @classmethod
    def from_mapping(cls, opts: Mapping[str, Any]) -> "HistoMinuteOptions":
        """Build options from a dict using the short keys (e, agg, tc) or field names."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if opts.get(key) is not None:
                    return opts[key]
            return None

        tc = pick("tc", "try_conversion")
        return cls(
            exchange=pick("e", "exchange"),
            limit=pick("limit"),
            aggregate=pick("agg", "aggregate"),
            to_ts=pick("to_ts", "toTs"),
            try_conversion=tc is not False,
        )


OptionsLike = Union[HistoMinuteOptions, Mapping[str, Any], None]


def _coerce_options(opts: OptionsLike) -> HistoMinuteOptions:
    if opts is None:
        return HistoMinuteOptions()
    if isinstance(opts, HistoMinuteOptions):
        return opts
    return HistoMinuteOptions.from_mapping(opts)


def build_params(
    from_sym: str,
    to_sym: str,
    opts: OptionsLike = None,
    *,
    aliases: Mapping[str, str] | None = None,
) -> Dict[str, str]:
    """Return the ordered query parameters for one histominute request."""
    options = _coerce_options(opts)

    params: Dict[str, str] = {"fsym": str(from_sym), "tsym": str(to_sym)}

    if options.exchange is not None:
        params["e"] = normalize_exchange_name(options.exchange, aliases)
    if options.limit is not None:
        params["limit"] = str(options.limit)
    if options.aggregate is not None:
        params["aggregate"] = str(options.aggregate)
    if options.to_ts is not None:
        params["toTs"] = str(options.to_ts)
    if options.try_conversion is False:
        params["tryConversion"] = "false"

    return params


def build_url(
    from_sym: str,
    to_sym: str,
    opts: OptionsLike = None,
    *,
    base_url: str = API_URL,
    aliases: Mapping[str, str] | None = None,
) -> str:
    params = build_params(from_sym, to_sym, opts, aliases=aliases)
    return str(httpx.URL(base_url, params=params))


def find(
    from_sym: str,
    to_sym: str,
    opts: OptionsLike = None,
    *,
    client: httpx.Client | None = None,
    base_url: str | None = None,
    aliases: Mapping[str, str] | None = None,
) -> Any:
    """
    Fetch minute OHLCV history for ``from_sym`` priced in ``to_sym``.

    The remote keeps minute data for about 7 days and falls back to BTC
    conversion when the pair does not trade directly (unless
    ``try_conversion=False``). The decoded JSON body is returned as sent.

    Network errors (``httpx.HTTPError``) and undecodable bodies
    (``json.JSONDecodeError`` or ``UnicodeDecodeError``) propagate. Non-2xx
    responses are not treated specially: their body is decoded and returned
    like any other.
    """
    url = base_url or get_settings().CRYPTOCOMPARE_HISTOMINUTE_URL
    if aliases is None:
        aliases = get_settings().CRYPTOCOMPARE_EXCHANGE_ALIASES

    params = build_params(from_sym, to_sym, opts, aliases=aliases)
    logger.debug("histominute request | %s | params=%s", url, params)

    if client is None:
        response = httpx.get(url, params=params)
    else:
        response = client.get(url, params=params)

    payload = response.json()

    records = payload.get("Data") if isinstance(payload, dict) else None
    logger.debug(
        "histominute response | status=%s | records=%s",
        response.status_code,
        len(records) if isinstance(records, list) else "n/a",
    )
    return payload
