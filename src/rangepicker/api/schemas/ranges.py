from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class EncodedRange(BaseModel):
    begin: str
    end: str


class RangeSummary(BaseModel):
    range: EncodedRange
    value: str
    days: int


class CreateRangeRequest(BaseModel):
    a: str
    b: str


class ContainsRequest(BaseModel):
    range: dict[str, Any]
    instant: str


class ContainsResponse(BaseModel):
    contains: bool


class FormatResponse(BaseModel):
    zone: str
    label: str
    begin: str
    end: str


class PresetItem(BaseModel):
    name: str
    range: EncodedRange
