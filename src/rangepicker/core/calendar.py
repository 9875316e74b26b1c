from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .iso import to_utc

DEFAULT_DATE_FORMAT = "%b %d, %Y"

SameDay = Callable[[tzinfo, datetime, datetime], bool]
FormatDate = Callable[[tzinfo, datetime], str]


@dataclass(frozen=True)
class Calendar:
    same_day: SameDay
    format_date: FormatDate


def same_day(zone: tzinfo, first: datetime, second: datetime) -> bool:
    return _local(zone, first).date() == _local(zone, second).date()


def date_formatter(pattern: str = DEFAULT_DATE_FORMAT) -> FormatDate:
    def format_date(zone: tzinfo, instant: datetime) -> str:
        return _local(zone, instant).strftime(pattern)

    return format_date


def default_calendar(pattern: str = DEFAULT_DATE_FORMAT) -> Calendar:
    return Calendar(same_day=same_day, format_date=date_formatter(pattern))


def resolve_zone(name: str) -> tzinfo:
    if name.upper() in {"UTC", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"Unknown time zone: {name}") from exc


def _local(zone: tzinfo, instant: datetime) -> datetime:
    return to_utc(instant).astimezone(zone)
