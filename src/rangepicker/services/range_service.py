from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..core.calendar import default_calendar, resolve_zone
from ..core.date_range import (
    Range,
    RangeDecodeError,
    between,
    create,
    days,
    decode,
    encode,
    format_range,
    format_utc,
    from_string,
    to_string,
)
from ..core.iso import parse_instant
from ..core.presets import Preset, default_presets

LOGGER = logging.getLogger(__name__)


def create_from_text(first: str, second: str) -> Range:
    date_range = create(parse_instant(first), parse_instant(second))
    LOGGER.debug("Created range %s from %s and %s", to_string(date_range), first, second)
    return date_range


def parse_delimited(value: str) -> Range:
    date_range = from_string(value)
    if date_range is None:
        LOGGER.info("Rejected delimited range %r", value)
        raise ValueError(f"Not a delimited ISO-8601 range: {value!r}")
    return date_range


def decode_payload(payload: Mapping[str, Any]) -> Range:
    try:
        return decode(payload)
    except RangeDecodeError as exc:
        LOGGER.info("Rejected range payload: %s", exc.errors)
        raise


def contains(payload: Mapping[str, Any], instant: str) -> bool:
    return between(parse_instant(instant), decode_payload(payload))


def format_payload(
    payload: Mapping[str, Any], zone_name: str, pattern: str
) -> tuple[str, list[str]]:
    zone = resolve_zone(zone_name)
    calendar = default_calendar(pattern)
    date_range = decode_payload(payload)
    return format_range(zone, date_range, calendar), format_utc(zone, date_range, calendar)


def presets_at(now: datetime, past_days: int) -> list[Preset]:
    presets = default_presets(now, past_days)
    LOGGER.debug("Evaluated %d presets at %s", len(presets), now.isoformat())
    return presets


def summarize(date_range: Range) -> dict[str, Any]:
    return {
        "range": encode(date_range),
        "value": to_string(date_range),
        "days": days(date_range),
    }
