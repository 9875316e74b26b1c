from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from ... import config
from ...core.date_range import RangeDecodeError, encode
from ...services import range_service
from ..schemas.ranges import (
    ContainsRequest,
    ContainsResponse,
    CreateRangeRequest,
    EncodedRange,
    FormatResponse,
    PresetItem,
    RangeSummary,
)

router = APIRouter(prefix="/ranges")


@router.post("")
def post_range(request: CreateRangeRequest) -> RangeSummary:
    try:
        date_range = range_service.create_from_text(request.a, request.b)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return RangeSummary(**range_service.summarize(date_range))


@router.get("/parse")
def get_parsed(value: str) -> RangeSummary:
    try:
        date_range = range_service.parse_delimited(value)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return RangeSummary(**range_service.summarize(date_range))


@router.post("/decode")
def post_decode(payload: dict[str, Any] = Body(...)) -> RangeSummary:
    try:
        date_range = range_service.decode_payload(payload)
    except RangeDecodeError as exc:
        raise HTTPException(status_code=422, detail=exc.errors) from exc
    return RangeSummary(**range_service.summarize(date_range))


@router.post("/contains")
def post_contains(request: ContainsRequest) -> ContainsResponse:
    try:
        result = range_service.contains(request.range, request.instant)
    except RangeDecodeError as exc:
        raise HTTPException(status_code=422, detail=exc.errors) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ContainsResponse(contains=result)


@router.post("/format")
def post_format(
    payload: dict[str, Any] = Body(...), zone: str | None = None
) -> FormatResponse:
    zone_name = zone or config.default_zone()
    try:
        label, (begin, end) = range_service.format_payload(
            payload, zone_name, config.date_format()
        )
    except RangeDecodeError as exc:
        raise HTTPException(status_code=422, detail=exc.errors) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return FormatResponse(zone=zone_name, label=label, begin=begin, end=end)


@router.get("/presets")
def get_presets() -> list[PresetItem]:
    now = datetime.now(tz=timezone.utc)
    return [
        PresetItem(name=preset.name, range=EncodedRange(**encode(preset.date_range)))
        for preset in range_service.presets_at(now, config.past_days())
    ]
