"""ZoneService — catalog listing and single-zone offset lookup."""

from __future__ import annotations

from typing import Any

from tzctl.domain.civil import CivilTimestamp, Instant, format_offset, instant_to_iso
from tzctl.domain.errors import InvalidInputError, UnknownZoneError
from tzctl.services._helpers import item_error
from tzctl.services.base import BaseService
from tzctl.services.contracts import OffsetResultData, ZoneListResultData, dump_validated
from tzctl.services.result import ServiceResult
from tzctl.services.telemetry import traced


class ZoneService(BaseService):
    """Read-only queries over the supported-zone catalog."""

    @traced
    def list_zones(self, *, at: str | None = None) -> ServiceResult:
        """Every catalog zone with its offset and local time at *at* (UTC; default now)."""
        op = "list_zones"
        try:
            instant = self._instant(at)
        except InvalidInputError as exc:
            return self._failure(op, exc)

        resolver = self._runtime.resolver
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for zone in self._runtime.catalog:
            try:
                offset = resolver.resolve_offset(zone, instant)
                local = resolver.render(zone, instant)
            except (UnknownZoneError, InvalidInputError) as exc:
                items.append({"zone": zone, "error": item_error(exc)})
                warnings.append(f"{zone}: {exc}")
                continue
            items.append(
                {
                    "zone": zone,
                    "offset": format_offset(offset),
                    "offset_minutes": offset,
                    "time": local.format_time(),
                    "date": local.format_date(),
                }
            )

        data = dump_validated(
            ZoneListResultData,
            {"instant": instant_to_iso(instant), "count": len(items), "items": items},
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @traced
    def resolve_offset(self, zone: str, *, at: str | None = None) -> ServiceResult:
        """UTC offset of *zone* at *at* (UTC civil text; default now)."""
        op = "resolve_offset"
        try:
            instant = self._instant(at)
            offset = self._runtime.resolver.resolve_offset(zone, instant)
            local = self._runtime.resolver.render(zone, instant)
        except (InvalidInputError, UnknownZoneError) as exc:
            return self._failure(op, exc)

        data = dump_validated(
            OffsetResultData,
            {
                "zone": zone,
                "instant": instant_to_iso(instant),
                "offset": format_offset(offset),
                "offset_minutes": offset,
                "time": local.format_time(),
                "date": local.format_date(),
            },
        )
        return ServiceResult(ok=True, op=op, data=data)

    def _instant(self, at: str | None) -> Instant:
        if at is None:
            return self._runtime.now()
        return CivilTimestamp.parse(at).as_utc_instant()
