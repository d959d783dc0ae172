"""Supported-zone catalog.

The catalog is a fixed, ordered list of canonical region identifiers.
Every zone id is validated against it before use; an id outside the
catalog is rejected, never mapped to UTC.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from tzctl.domain.errors import UnknownZoneError

DEFAULT_ZONES: tuple[str, ...] = (
    "UTC",
    "America/New_York",
    "America/Chicago",
    "America/Denver",
    "America/Los_Angeles",
    "America/Anchorage",
    "Pacific/Honolulu",
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Europe/Moscow",
    "Asia/Dubai",
    "Asia/Kolkata",
    "Asia/Bangkok",
    "Asia/Hong_Kong",
    "Asia/Shanghai",
    "Asia/Tokyo",
    "Asia/Seoul",
    "Australia/Sydney",
    "Australia/Melbourne",
    "Australia/Brisbane",
    "Pacific/Auckland",
    "Pacific/Fiji",
    "America/Toronto",
    "America/Mexico_City",
    "America/Sao_Paulo",
    "America/Buenos_Aires",
    "Africa/Cairo",
    "Africa/Johannesburg",
    "Africa/Lagos",
    "Asia/Singapore",
    "Asia/Manila",
)

# "UTC", or Area/Location[/Sublocation] as used by the IANA database.
ZONE_ID_PATTERN = re.compile(r"^(?:UTC|[A-Z][A-Za-z_]*(?:/[A-Za-z0-9_+\-]+)+)$")


def is_well_formed(zone: str) -> bool:
    """Check whether *zone* looks like an IANA identifier (no lookup)."""
    return ZONE_ID_PATTERN.match(zone) is not None


class ZoneCatalog:
    """Ordered, duplicate-free set of supported zone identifiers."""

    def __init__(self, zones: Iterable[str] = DEFAULT_ZONES) -> None:
        self._zones: tuple[str, ...] = tuple(dict.fromkeys(zones))

    @property
    def zones(self) -> tuple[str, ...]:
        return self._zones

    def __contains__(self, zone: object) -> bool:
        return zone in self._zones

    def __iter__(self) -> Iterator[str]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def require(self, zone: str) -> str:
        """Return *zone* if supported, else raise :class:`UnknownZoneError`."""
        if zone not in self._zones:
            raise UnknownZoneError(zone)
        return zone
