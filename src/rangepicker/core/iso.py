from __future__ import annotations

import re
from datetime import datetime, time, timedelta, timezone

_ISO_PREFIX = re.compile(r"^\d{4}-?\d{2}-?\d{2}(?:[T ]\d{2}|$)")


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def end_of_utc_day(value: datetime) -> datetime:
    day = to_utc(value).date()
    return datetime.combine(day, time(23, 59, 59, 999000), tzinfo=timezone.utc)


def start_of_utc_day(value: datetime) -> datetime:
    day = to_utc(value).date()
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def to_millis(value: datetime) -> int:
    return (to_utc(value) - _EPOCH) // timedelta(milliseconds=1)


def parse_instant(text: str) -> datetime:
    if not _ISO_PREFIX.match(text):
        raise ValueError(f"Not an ISO-8601 timestamp: {text!r}")
    try:
        return to_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Not an ISO-8601 timestamp: {text!r}") from exc


def format_instant(value: datetime) -> str:
    utc = to_utc(value)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
