"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``items`` vs ``results``)
fail fast in tests and during development.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python", exclude_none=True)


class ItemError(BaseModel):
    """Why a single target could not be converted."""

    code: str
    message: str


class ConvertItem(BaseModel):
    """One target row of a conversion.

    Successful rows carry the civil reading; failed rows carry ``error``.
    """

    model_config = ConfigDict(extra="forbid")

    zone: str
    ok: bool
    time: str | None = None
    date: str | None = None
    offset: str | None = None
    offset_minutes: int | None = None
    delta: str | None = None
    delta_minutes: int | None = None
    error: ItemError | None = None


class ConvertResultData(BaseModel):
    """Payload contract for ``ConvertService.convert``."""

    source: str
    input: str
    instant: str
    source_offset: str
    source_offset_minutes: int
    count: int
    failed: int
    items: list[ConvertItem]


class ZoneItem(BaseModel):
    """One catalog row with its offset at the queried instant."""

    zone: str
    offset: str | None = None
    offset_minutes: int | None = None
    time: str | None = None
    date: str | None = None
    error: ItemError | None = None


class ZoneListResultData(BaseModel):
    """Payload contract for ``ZoneService.list_zones``."""

    instant: str
    count: int
    items: list[ZoneItem]


class OffsetResultData(BaseModel):
    """Payload contract for ``ZoneService.resolve_offset``."""

    zone: str
    instant: str
    offset: str
    offset_minutes: int
    time: str
    date: str


class BoardStateData(BaseModel):
    """Payload contract for board mutations (add/remove/source/at)."""

    model_config = ConfigDict(extra="allow")

    source: str
    input: str
    tracked: list[str]
    count: int
