"""ConversionEngine — one civil time in a source zone, read in many target zones.

Pipeline:
  1. read the civil input as if it were UTC (provisional instant)
  2. resolve the source offset at the provisional instant
  3. subtract it to get the true instant
  3a. verify the instant renders back to the civil input in the source;
      classify DST gaps/overlaps and correct a provisional offset that
      straddled a transition
  4. resolve each target's offset at the true instant and shift the civil
     input by the offset difference
  5. collect per-target results; an unknown target fails alone

The engine is stateless. Target zones are a per-call argument.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from tzctl.domain.civil import MS_PER_MINUTE, CivilTimestamp, Instant, format_offset
from tzctl.domain.errors import (
    AmbiguousOrInvalidCivilTimeWarning,
    InvalidInputError,
    TzError,
    UnknownZoneError,
)
from tzctl.domain.offsets import OffsetResolver
from tzctl.domain.types import TransitionKind

logger = logging.getLogger(__name__)

# Distance to the offsets on either side of a nearby transition.
_NEIGHBOR_MS = 24 * 60 * MS_PER_MINUTE


@dataclass(frozen=True)
class TargetTime:
    """One target zone's reading of the converted instant."""

    zone: str
    local: CivilTimestamp | None = None
    offset: int | None = None
    delta: int | None = None
    error: TzError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, str]:
        if self.error is not None or self.local is None or self.offset is None:
            return {"error": str(self.error)}
        return {"time": self.local.format_time(), "offset": format_offset(self.offset)}


@dataclass(frozen=True)
class SourceResolution:
    """The instant a source civil time denotes, and the offset used to get there."""

    instant: Instant
    offset: int
    warning: AmbiguousOrInvalidCivilTimeWarning | None = None


@dataclass(frozen=True)
class Conversion:
    """Result of :meth:`ConversionEngine.convert`."""

    source: str
    civil: CivilTimestamp
    instant: Instant
    source_offset: int
    results: dict[str, TargetTime]
    warnings: list[AmbiguousOrInvalidCivilTimeWarning] = field(default_factory=list)

    @property
    def failures(self) -> list[TargetTime]:
        return [r for r in self.results.values() if not r.ok]

    def as_mapping(self) -> dict[str, dict[str, str]]:
        """``{zone: {"time": "HH:MM:SS", "offset": "UTC ±HH:MM"}}``; failures carry ``error``."""
        return {zone: result.as_dict() for zone, result in self.results.items()}


class ConversionEngine:
    """Convert a civil time in one zone to civil times in other zones."""

    def __init__(self, resolver: OffsetResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> OffsetResolver:
        return self._resolver

    def convert(
        self,
        source: str,
        civil: CivilTimestamp,
        targets: Iterable[str],
    ) -> Conversion:
        """Convert *civil* (wall-clock time in *source*) for every target.

        Raises:
            UnknownZoneError: *source* is not supported.
            InvalidInputError: the source instant cannot be represented
                (at the very edge of years 1-9999).

        Unsupported or unrepresentable targets do not raise; they come
        back as failed entries.
        """
        resolution = self.resolve_source(source, civil)
        results: dict[str, TargetTime] = {}
        for target in dict.fromkeys(targets):
            results[target] = self._convert_one(source, civil, resolution, target)
        warnings = [resolution.warning] if resolution.warning is not None else []
        return Conversion(
            source=source,
            civil=civil,
            instant=resolution.instant,
            source_offset=resolution.offset,
            results=results,
            warnings=warnings,
        )

    def resolve_source(self, source: str, civil: CivilTimestamp) -> SourceResolution:
        """Find the instant *civil* denotes in *source* (steps 1–3a).

        Gap and overlap tie-break: the offset in effect before the
        transition.
        """
        base = civil.as_utc_instant()
        provisional = self._resolver.resolve_offset(source, base)

        candidates = self._candidate_offsets(source, base, provisional)
        matches = [o for o in candidates if self._reproduces(source, civil, base, o)]

        if len(matches) == 1:
            offset = matches[0]
            if offset != provisional:
                logger.debug(
                    "Corrected provisional offset for %s at %s: %d -> %d",
                    source,
                    civil,
                    provisional,
                    offset,
                )
            return SourceResolution(_shift(base, -offset), offset)

        before = candidates[0]
        warning = AmbiguousOrInvalidCivilTimeWarning(
            source, civil, TransitionKind.OVERLAP if matches else TransitionKind.GAP, before
        )
        logger.info("Civil time resolved by tie-break: %s", warning)
        return SourceResolution(_shift(base, -before), before, warning)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _candidate_offsets(self, source: str, base: Instant, provisional: int) -> list[int]:
        """Distinct offsets near *base*, pre-transition side first."""
        before = self._neighbor_offset(source, Instant(base - _NEIGHBOR_MS), provisional)
        after = self._neighbor_offset(source, Instant(base + _NEIGHBOR_MS), provisional)
        return list(dict.fromkeys([before, provisional, after]))

    def _neighbor_offset(self, source: str, at: Instant, fallback: int) -> int:
        try:
            return self._resolver.resolve_offset(source, at)
        except InvalidInputError:
            # Lookup fell outside the representable range.
            return fallback

    def _reproduces(self, source: str, civil: CivilTimestamp, base: Instant, offset: int) -> bool:
        return self._resolver.render(source, _shift(base, -offset)) == civil

    def _convert_one(
        self,
        source: str,
        civil: CivilTimestamp,
        resolution: SourceResolution,
        target: str,
    ) -> TargetTime:
        if target == source:
            return TargetTime(target, civil, resolution.offset, 0)
        try:
            offset = self._resolver.resolve_offset(target, resolution.instant)
            delta = offset - resolution.offset
            local = civil.shifted(delta)
        except (UnknownZoneError, InvalidInputError) as exc:
            logger.debug("Target %s failed: %s", target, exc)
            return TargetTime(target, error=exc)
        return TargetTime(target, local, offset, delta)


def _shift(at: Instant, minutes: int) -> Instant:
    return Instant(at + minutes * MS_PER_MINUTE)
