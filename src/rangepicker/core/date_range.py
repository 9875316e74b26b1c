from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from .calendar import Calendar, default_calendar
from .iso import end_of_utc_day, format_instant, parse_instant, to_millis, to_utc

DELIMITER = ";"
RANGE_SEPARATOR = " - "

DEFAULT_CALENDAR = default_calendar()


@dataclass(frozen=True, repr=False)
class Range:
    _begin: datetime
    _end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "_begin", to_utc(self._begin))
        object.__setattr__(self, "_end", to_utc(self._end))

    @property
    def begin(self) -> datetime:
        return self._begin

    @property
    def end(self) -> datetime:
        return self._end

    def __repr__(self) -> str:
        return f"Range({format_instant(self._begin)}, {format_instant(self._end)})"


class RangePayload(BaseModel):
    begin: datetime
    end: datetime

    @field_validator("begin", "end", mode="before")
    @classmethod
    def _parse_iso(cls, value: object) -> datetime:
        if not isinstance(value, str):
            raise ValueError("Expected an ISO-8601 string")
        return parse_instant(value)


class RangeDecodeError(ValueError):
    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        summary = "; ".join(f"{error['field']}: {error['message']}" for error in errors)
        super().__init__(f"Invalid range payload ({summary})")


def create(first: datetime, second: datetime) -> Range:
    first = to_utc(first)
    second = to_utc(second)
    if first > second:
        first, second = second, first
    return Range(first, end_of_utc_day(second))


def _raw(begin: datetime, end: datetime) -> Range:
    # Stored pairs are trusted as-is: no ordering, no end-of-day extension.
    return Range(begin, end)


def begins_at(date_range: Range) -> datetime:
    return date_range.begin


def ends_at(date_range: Range) -> datetime:
    return date_range.end


def between(instant: datetime, date_range: Range) -> bool:
    instant = to_utc(instant)
    return date_range.begin <= instant < date_range.end


def days(date_range: Range) -> int:
    elapsed = to_millis(date_range.end) - to_millis(date_range.begin)
    return _truncate(_truncate(elapsed, 1000), 86400)


def format_range(
    zone: tzinfo, date_range: Range, calendar: Calendar = DEFAULT_CALENDAR
) -> str:
    if calendar.same_day(zone, date_range.begin, date_range.end):
        return calendar.format_date(zone, date_range.begin)
    return RANGE_SEPARATOR.join(format_utc(zone, date_range, calendar))


def format_utc(
    zone: tzinfo, date_range: Range, calendar: Calendar = DEFAULT_CALENDAR
) -> list[str]:
    return [
        format_utc_begin(zone, date_range, calendar),
        format_utc_end(zone, date_range, calendar),
    ]


def format_utc_begin(
    zone: tzinfo, date_range: Range, calendar: Calendar = DEFAULT_CALENDAR
) -> str:
    return calendar.format_date(zone, date_range.begin)


def format_utc_end(
    zone: tzinfo, date_range: Range, calendar: Calendar = DEFAULT_CALENDAR
) -> str:
    return calendar.format_date(zone, date_range.end)


def encode(date_range: Range) -> dict[str, str]:
    return {
        "begin": format_instant(date_range.begin),
        "end": format_instant(date_range.end),
    }


def decode(value: Mapping[str, Any] | str | bytes) -> Range:
    try:
        if isinstance(value, (str, bytes)):
            payload = RangePayload.model_validate_json(value)
        else:
            payload = RangePayload.model_validate(value)
    except ValidationError as exc:
        raise RangeDecodeError(_decode_errors(exc)) from exc
    return _raw(payload.begin, payload.end)


def from_string(text: str) -> Range | None:
    parts = text.split(DELIMITER)
    if len(parts) != 2:
        return None
    try:
        begin, end = (parse_instant(part) for part in parts)
    except ValueError:
        return None
    return _raw(begin, end)


def to_string(date_range: Range) -> str:
    return DELIMITER.join(
        (format_instant(date_range.begin), format_instant(date_range.end))
    )


def to_tuple(date_range: Range) -> tuple[datetime, datetime]:
    return date_range.begin, date_range.end


def _truncate(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _decode_errors(exc: ValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__root__",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
