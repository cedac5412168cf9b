from __future__ import annotations

import json

import httpx
import pytest

from cryptocompare_hist.scripts import histominute
from cryptocompare_hist.services.histo_minute import HistoMinuteOptions


def test_main_prints_payload(capsys, histominute_payload):
    calls = []

    def fake_find(fsym, tsym, options):
        calls.append((fsym, tsym, options))
        return histominute_payload

    with pytest.raises(SystemExit) as excinfo:
        histominute.main(
            [
                "--fsym", "BTC",
                "--tsym", "USD",
                "--exchange", "coinbase",
                "--limit", "10",
                "--to-ts", "2017-08-09T06:16:00Z",
                "--no-try-conversion",
            ],
            find_fn=fake_find,
        )

    assert excinfo.value.code == 0
    assert json.loads(capsys.readouterr().out) == histominute_payload
    assert calls == [
        ("BTC", "USD", HistoMinuteOptions(exchange="coinbase", limit=10, to_ts=1502259360, try_conversion=False)),
    ]


def test_main_prints_candles(capsys, histominute_payload):
    with pytest.raises(SystemExit) as excinfo:
        histominute.main(
            ["--fsym", "BTC", "--tsym", "USD", "--candles"],
            find_fn=lambda fsym, tsym, options: histominute_payload,
        )

    assert excinfo.value.code == 0
    out = json.loads(capsys.readouterr().out)
    assert out[0]["timestamp"] == "2017-08-09T06:12:00Z"
    assert out[1]["volume"] == 16.581031


def test_main_reports_failure(capsys):
    def failing_find(fsym, tsym, options):
        raise httpx.ConnectError("connection refused")

    with pytest.raises(SystemExit) as excinfo:
        histominute.main(["--fsym", "BTC", "--tsym", "USD"], find_fn=failing_find)

    assert excinfo.value.code == 1
    assert json.loads(capsys.readouterr().out) == {"error": "connection refused"}


def test_to_ts_accepts_unix_seconds():
    args = histominute.build_parser().parse_args(["--fsym", "BTC", "--tsym", "USD", "--to-ts", "1502259360"])
    assert args.to_ts == 1502259360
    assert args.no_try_conversion is False
