from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from rangepicker.core import iso


def test_parse_instant_reads_zulu_timestamp() -> None:
    parsed = iso.parse_instant("2024-01-15T08:00:00.123Z")

    assert parsed == datetime(2024, 1, 15, 8, 0, 0, 123000, tzinfo=timezone.utc)


def test_parse_instant_assumes_utc_without_offset() -> None:
    parsed = iso.parse_instant("2024-01-15T08:00:00")

    assert parsed.tzinfo is timezone.utc
    assert parsed.hour == 8


def test_parse_instant_accepts_date_only() -> None:
    assert iso.parse_instant("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)


def test_parse_instant_truncates_sub_millisecond_digits() -> None:
    parsed = iso.parse_instant("2024-01-15T08:00:00.123456Z")

    assert parsed.microsecond == 123000


def test_parse_instant_rejects_offsets_past_year_limits() -> None:
    with pytest.raises(ValueError):
        iso.parse_instant("9999-12-31T23:00:00-05:00")


@pytest.mark.parametrize(
    "text", ["", "not-a-date", "1705305600", "2024-13-01T00:00:00Z", "15/01/2024"]
)
def test_parse_instant_rejects_non_iso_text(text: str) -> None:
    with pytest.raises(ValueError):
        iso.parse_instant(text)


def test_format_instant_pads_milliseconds() -> None:
    value = datetime(2024, 1, 5, 3, 4, 5, 7000, tzinfo=timezone.utc)

    assert iso.format_instant(value) == "2024-01-05T03:04:05.007Z"


def test_format_instant_converts_to_utc() -> None:
    value = datetime(2024, 7, 1, 9, 30, tzinfo=ZoneInfo("Europe/Paris"))

    assert iso.format_instant(value) == "2024-07-01T07:30:00.000Z"


def test_end_of_utc_day_uses_utc_calendar_date() -> None:
    evening = datetime(2024, 1, 15, 22, 0, tzinfo=ZoneInfo("America/New_York"))

    assert iso.end_of_utc_day(evening) == datetime(
        2024, 1, 16, 23, 59, 59, 999000, tzinfo=timezone.utc
    )


def test_start_of_utc_day_drops_time_of_day() -> None:
    value = datetime(2024, 1, 15, 13, 45, tzinfo=timezone.utc)

    assert iso.start_of_utc_day(value) == datetime(2024, 1, 15, tzinfo=timezone.utc)


def test_to_millis_counts_from_epoch() -> None:
    assert iso.to_millis(datetime(1970, 1, 1, 0, 0, 1, 500000)) == 1500
