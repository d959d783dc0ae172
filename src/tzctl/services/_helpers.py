"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tzctl.domain.civil import format_delta, format_offset, instant_to_iso

if TYPE_CHECKING:
    from tzctl.domain.conversion import Conversion, TargetTime
    from tzctl.domain.errors import TzError


def item_error(exc: TzError) -> dict[str, str]:
    """Per-row error payload for a failed target."""
    return {"code": exc.code, "message": str(exc)}


def target_row(result: TargetTime) -> dict[str, Any]:
    """Flatten one :class:`TargetTime` into a payload row."""
    if result.error is not None:
        return {"zone": result.zone, "ok": False, "error": item_error(result.error)}
    assert result.local is not None and result.offset is not None
    delta = result.delta or 0
    return {
        "zone": result.zone,
        "ok": True,
        "time": result.local.format_time(),
        "date": result.local.format_date(),
        "offset": format_offset(result.offset),
        "offset_minutes": result.offset,
        "delta": format_delta(delta),
        "delta_minutes": delta,
    }


def conversion_payload(conversion: Conversion) -> dict[str, Any]:
    """Flatten a :class:`Conversion` into plain data for a ServiceResult."""
    items = [target_row(r) for r in conversion.results.values()]
    return {
        "source": conversion.source,
        "input": conversion.civil.isoformat(),
        "instant": instant_to_iso(conversion.instant),
        "source_offset": format_offset(conversion.source_offset),
        "source_offset_minutes": conversion.source_offset,
        "count": len(items),
        "failed": len(conversion.failures),
        "items": items,
    }


def conversion_warnings(conversion: Conversion) -> list[str]:
    """Human-readable warnings: DST advisories first, then failed targets."""
    warnings = [str(w) for w in conversion.warnings]
    warnings.extend(f"{r.zone}: {r.error}" for r in conversion.failures)
    return warnings
