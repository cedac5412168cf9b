from __future__ import annotations

from datetime import datetime, timezone


def ensure_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso_z(dt: datetime) -> str:
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")


def parse_unix_ts(value: str) -> int:
    """
    Accepts unix seconds ("1502259360") or ISO-8601 ("2017-08-09T06:16:00Z").
    Naive ISO values are read as UTC.
    """
    v = value.strip()
    if v.lstrip("-").isdigit():
        return int(v)
    dt = datetime.fromisoformat(v.replace("Z", "+00:00"))
    return int(ensure_utc(dt).timestamp())
