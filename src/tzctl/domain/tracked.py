"""TrackedZoneSet — the zones a board session is currently watching.

Owned by the shell's state container. The conversion core never holds
onto it; it receives the zones as a plain argument on every call.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class TrackedZoneSet:
    """Insertion-ordered set of zone ids with idempotent add."""

    def __init__(self, zones: Iterable[str] = ()) -> None:
        self._zones: dict[str, None] = {}
        for zone in zones:
            self.add(zone)

    def add(self, zone: str) -> bool:
        """Track *zone*. Returns False (and changes nothing) if already tracked."""
        if zone in self._zones:
            return False
        self._zones[zone] = None
        return True

    def remove(self, zone: str) -> bool:
        """Stop tracking *zone*. Returns False if it was not tracked."""
        if zone not in self._zones:
            return False
        del self._zones[zone]
        return True

    def snapshot(self) -> tuple[str, ...]:
        """Immutable copy in insertion order, safe to hand to the core."""
        return tuple(self._zones)

    def __contains__(self, zone: object) -> bool:
        return zone in self._zones

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._zones))

    def __len__(self) -> int:
        return len(self._zones)

    def __repr__(self) -> str:
        return f"TrackedZoneSet({list(self._zones)!r})"
