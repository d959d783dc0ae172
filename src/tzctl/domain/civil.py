"""Civil (wall-clock) timestamps, instants, and offset formatting.

A :class:`CivilTimestamp` has no zone attached. It only acquires meaning
when paired with a timezone identifier, so the only arithmetic it exposes
goes through the :data:`Instant` representation.

INVARIANT: offsets are applied additively to instants, never to raw
civil fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import NewType

from tzctl.domain.errors import InvalidInputError

Instant = NewType("Instant", int)
"""Milliseconds since 1970-01-01T00:00:00 UTC."""

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND

_EPOCH = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)

OUT_OF_RANGE = "outside the supported date range"

# YYYY-MM-DD[T ]HH:MM[:SS] — no zone suffix, no fractional seconds.
_CIVIL_RE = re.compile(
    r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[T ](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?$"
)


@dataclass(frozen=True)
class CivilTimestamp:
    """Wall-clock date and time fields with no zone."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        try:
            self.to_datetime()
        except ValueError as exc:
            raise InvalidInputError(self._raw(), str(exc)) from exc

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> CivilTimestamp:
        """Parse ``YYYY-MM-DDTHH:MM[:SS]`` (``T`` or a space separator).

        Raises:
            InvalidInputError: empty text, a zone/offset suffix, or
                out-of-range fields.
        """
        value = text.strip()
        if not value:
            raise InvalidInputError(text, "empty value")
        match = _CIVIL_RE.match(value)
        if match is None:
            raise InvalidInputError(text, "expected YYYY-MM-DDTHH:MM[:SS] with no timezone")
        fields = {k: int(v) for k, v in match.groupdict(default="0").items()}
        try:
            return cls(**fields)
        except InvalidInputError as exc:
            raise InvalidInputError(text, exc.reason) from exc

    @classmethod
    def from_datetime(cls, dt: datetime) -> CivilTimestamp:
        """Take the wall-clock fields of *dt*; any tzinfo and microseconds are dropped."""
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    @classmethod
    def from_utc_instant(cls, at: Instant) -> CivilTimestamp:
        """Civil fields of *at* as read on a UTC clock.

        Raises:
            InvalidInputError: *at* falls outside years 1-9999.
        """
        try:
            moment = _EPOCH + timedelta(milliseconds=at)
        except OverflowError as exc:
            raise InvalidInputError(f"{at} ms", OUT_OF_RANGE) from exc
        return cls.from_datetime(moment)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_datetime(self) -> datetime:
        """Naive :class:`datetime` with the same fields."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def as_utc_instant(self) -> Instant:
        """Interpret these fields as if they were UTC."""
        return Instant((self.to_datetime() - _EPOCH) // _ONE_MS)

    def shifted(self, minutes: int) -> CivilTimestamp:
        """Return the civil reading *minutes* later (earlier if negative)."""
        return CivilTimestamp.from_utc_instant(
            Instant(self.as_utc_instant() + minutes * MS_PER_MINUTE)
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_time(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"

    def format_date(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def isoformat(self) -> str:
        return f"{self.format_date()}T{self.format_time()}"

    def __str__(self) -> str:
        return self.isoformat()

    def _raw(self) -> str:
        return (
            f"{self.year}-{self.month}-{self.day}T"
            f"{self.hour}:{self.minute}:{self.second}"
        )


def format_offset(minutes: int) -> str:
    """Format an offset in minutes as ``UTC ±HH:MM``.

    Examples:
        >>> format_offset(-300)
        'UTC -05:00'
        >>> format_offset(345)
        'UTC +05:45'
        >>> format_offset(0)
        'UTC +00:00'
    """
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"UTC {sign}{hours:02d}:{mins:02d}"


def format_delta(minutes: int) -> str:
    """Format a relative shift, e.g. ``+5:30`` or ``-4:00``; zero is ``±0:00``."""
    if minutes == 0:
        return "±0:00"
    sign = "+" if minutes > 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours}:{mins:02d}"


def instant_to_iso(at: Instant) -> str:
    """ISO 8601 UTC rendering of an instant, e.g. ``2024-06-01T12:00:00Z``."""
    return f"{CivilTimestamp.from_utc_instant(at).isoformat()}Z"
