# cryptocompare_hist/scripts/histominute.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, List, Optional

from cryptocompare_hist.config.settings import get_settings
from cryptocompare_hist.services.candles import records_to_candles
from cryptocompare_hist.services.histo_minute import HistoMinuteOptions, find
from cryptocompare_hist.utils.time import parse_unix_ts, to_iso_z

logger = logging.getLogger("cryptocompare_hist.scripts.histominute")


def _candles_to_json(candles: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{**c, "timestamp": to_iso_z(c["timestamp"])} for c in candles]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch CryptoCompare minute history")
    parser.add_argument("--fsym", required=True, help="from symbol, e.g. BTC")
    parser.add_argument("--tsym", required=True, help="to symbol, e.g. USD")
    parser.add_argument("--exchange", default=None)
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--aggregate", type=int, default=None)
    parser.add_argument("--to-ts", type=parse_unix_ts, default=None, help="unix seconds or ISO-8601")
    parser.add_argument("--no-try-conversion", action="store_true")
    parser.add_argument("--candles", action="store_true", help="print candles instead of the raw payload")
    return parser


def run(args: argparse.Namespace, find_fn: Callable[..., Any] = find) -> Any:
    options = HistoMinuteOptions(
        exchange=args.exchange,
        limit=args.limit,
        aggregate=args.aggregate,
        to_ts=args.to_ts,
        try_conversion=not args.no_try_conversion,
    )
    payload = find_fn(args.fsym, args.tsym, options)
    if args.candles:
        return _candles_to_json(records_to_candles(payload))
    return payload


def main(argv: Optional[List[str]] = None, find_fn: Callable[..., Any] = find) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_settings().LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = run(args, find_fn=find_fn)
    except Exception as exc:
        logger.error("histominute fetch failed | %s/%s | %s", args.fsym, args.tsym, exc)
        print(json.dumps({"error": str(exc)}))
        raise SystemExit(1)

    print(json.dumps(result))
    raise SystemExit(0)


if __name__ == "__main__":
    main()
