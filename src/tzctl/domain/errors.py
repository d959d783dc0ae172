"""Domain errors and advisories.

Errors carry a stable ``code`` so the service layer can map them onto
``ServiceError`` without string matching.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tzctl.domain.types import TransitionKind

if TYPE_CHECKING:
    from tzctl.domain.civil import CivilTimestamp


class TzError(Exception):
    """Base class for all tzctl domain errors."""

    code = "TZ_ERROR"


class UnknownZoneError(TzError):
    """Zone identifier is not in the supported catalog (or the rule source lacks it)."""

    code = "UNKNOWN_ZONE"

    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown timezone: {zone!r}")
        self.zone = zone


class InvalidInputError(TzError):
    """Malformed civil timestamp or other unparseable input."""

    code = "INVALID_INPUT"

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Invalid date/time {value!r}: {reason}")
        self.value = value
        self.reason = reason


class AmbiguousOrInvalidCivilTimeWarning(UserWarning):
    """Civil time falls in a DST gap (nonexistent) or overlap (ambiguous).

    Never raised by the engine; attached to the conversion result so callers
    can surface it. ``offset`` is the source offset that was chosen.
    """

    def __init__(
        self,
        zone: str,
        civil: CivilTimestamp,
        kind: TransitionKind,
        offset: int,
    ) -> None:
        from tzctl.domain.civil import format_offset

        if kind == TransitionKind.GAP:
            detail = "does not exist (skipped by a DST transition)"
        else:
            detail = "is ambiguous (repeated by a DST transition)"
        super().__init__(
            f"{civil.isoformat()} {detail} in {zone}; "
            f"using the pre-transition offset {format_offset(offset)}"
        )
        self.zone = zone
        self.civil = civil
        self.kind = TransitionKind(kind)
        self.offset = offset
