from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import datetime, timedelta

from .date_range import Range, create
from .iso import start_of_utc_day


@dataclass(frozen=True)
class Preset:
    name: str
    date_range: Range


def today(now: datetime) -> Range:
    return create(start_of_utc_day(now), now)


def yesterday(now: datetime) -> Range:
    day = start_of_utc_day(now) - timedelta(days=1)
    return create(day, day)


def past_week(now: datetime) -> Range:
    return create(start_of_utc_day(now) - timedelta(days=7), now)


def past_month(now: datetime) -> Range:
    return create(_shift_months(start_of_utc_day(now), -1), now)


def past_year(now: datetime) -> Range:
    return create(_shift_months(start_of_utc_day(now), -12), now)


def last_days(now: datetime, count: int) -> Range:
    if count < 1:
        raise ValueError(f"last_days requires a positive day count, got {count}")
    return create(start_of_utc_day(now) - timedelta(days=count - 1), now)


def default_presets(now: datetime, past_days: int = 30) -> list[Preset]:
    return [
        Preset(name="today", date_range=today(now)),
        Preset(name="yesterday", date_range=yesterday(now)),
        Preset(name="past_week", date_range=past_week(now)),
        Preset(name="past_month", date_range=past_month(now)),
        Preset(name="past_year", date_range=past_year(now)),
        Preset(name=f"last_{past_days}_days", date_range=last_days(now, past_days)),
    ]


def _shift_months(value: datetime, months: int) -> datetime:
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
