"""Test doubles and helpers shared across test modules."""

from __future__ import annotations

from tzctl.domain.civil import MS_PER_MINUTE, CivilTimestamp, Instant
from tzctl.domain.errors import UnknownZoneError

# 2024-06-01T12:00:00Z — no DST transition anywhere near it in the catalog.
JUNE_NOON = CivilTimestamp(2024, 6, 1, 12, 0).as_utc_instant()


def utc(text: str) -> Instant:
    """Instant for a UTC wall-clock string."""
    return CivilTimestamp.parse(text).as_utc_instant()


class FixedOffsetRules:
    """Rule source where every zone has one constant offset."""

    def __init__(self, offsets: dict[str, int]) -> None:
        self.offsets = offsets
        self.calls: list[tuple[str, Instant]] = []

    def render_civil(self, zone: str, at: Instant) -> CivilTimestamp:
        self.calls.append((zone, at))
        if zone not in self.offsets:
            raise UnknownZoneError(zone)
        return CivilTimestamp.from_utc_instant(Instant(at + self.offsets[zone] * MS_PER_MINUTE))


class SteppedRules:
    """Rule source with a single offset change in one zone.

    ``Test/Step`` uses *before* until *transition* and *after* from then
    on. ``UTC`` is always +00:00.
    """

    def __init__(self, before: int, after: int, transition: Instant) -> None:
        self.before = before
        self.after = after
        self.transition = transition

    def render_civil(self, zone: str, at: Instant) -> CivilTimestamp:
        if zone == "UTC":
            offset = 0
        elif zone == "Test/Step":
            offset = self.before if at < self.transition else self.after
        else:
            raise UnknownZoneError(zone)
        return CivilTimestamp.from_utc_instant(Instant(at + offset * MS_PER_MINUTE))
