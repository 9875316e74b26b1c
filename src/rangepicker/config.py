from __future__ import annotations

import os

from .core.calendar import DEFAULT_DATE_FORMAT


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def default_zone() -> str:
    return _get_env("RANGEPICKER_DEFAULT_ZONE", "UTC")


def date_format() -> str:
    return _get_env("RANGEPICKER_DATE_FORMAT", DEFAULT_DATE_FORMAT)


def cors_origins() -> list[str]:
    raw = _get_env(
        "RANGEPICKER_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    )
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _get_env("RANGEPICKER_LOG_LEVEL", "INFO").upper()


def past_days() -> int:
    raw = _get_env("RANGEPICKER_PAST_DAYS", "30")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"RANGEPICKER_PAST_DAYS must be an integer: {raw}") from exc
    if value < 1:
        raise ValueError(f"RANGEPICKER_PAST_DAYS must be positive: {value}")
    return value
