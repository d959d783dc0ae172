"""OffsetResolver — a zone's UTC offset at an exact instant.

The offset is a step function of time (DST, rule changes), so it is
never looked up from a table here. Instead the instant is rendered as
civil fields in the zone by the injected :class:`RuleSource`, and the
offset is the difference between that civil reading (taken as if it
were UTC) and the instant itself.
"""

from __future__ import annotations

from typing import Protocol

from tzctl.domain.catalog import ZoneCatalog
from tzctl.domain.civil import MS_PER_MINUTE, MS_PER_SECOND, CivilTimestamp, Instant


class RuleSource(Protocol):
    """Renders an instant as civil fields in a zone.

    The only component allowed to encode DST and offset rules.
    Implementations raise :class:`~tzctl.domain.errors.UnknownZoneError`
    for zones they cannot load.
    """

    def render_civil(self, zone: str, at: Instant) -> CivilTimestamp: ...


class OffsetResolver:
    """Resolve UTC offsets (in minutes) for catalog zones."""

    def __init__(self, rules: RuleSource, catalog: ZoneCatalog) -> None:
        self._rules = rules
        self._catalog = catalog

    @property
    def catalog(self) -> ZoneCatalog:
        return self._catalog

    @property
    def rules(self) -> RuleSource:
        return self._rules

    def resolve_offset(self, zone: str, at: Instant) -> int:
        """Offset of *zone* from UTC, in minutes, in force at *at*.

        Raises:
            UnknownZoneError: *zone* is not in the catalog or the rule
                source cannot load it.
        """
        self._catalog.require(zone)
        # Rendering has second resolution; diff against the same precision.
        whole = Instant(at - at % MS_PER_SECOND)
        civil = self._rules.render_civil(zone, whole)
        return round((civil.as_utc_instant() - whole) / MS_PER_MINUTE)

    def render(self, zone: str, at: Instant) -> CivilTimestamp:
        """Civil reading of *at* in *zone* (catalog-checked)."""
        self._catalog.require(zone)
        return self._rules.render_civil(zone, at)
