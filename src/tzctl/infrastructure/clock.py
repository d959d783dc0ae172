"""Clocks that supply the current instant."""

from __future__ import annotations

import time
from typing import Protocol

from tzctl.domain.civil import Instant


class Clock(Protocol):
    def now(self) -> Instant: ...


class SystemClock:
    """Wall clock of the host, in epoch milliseconds."""

    def now(self) -> Instant:
        return Instant(time.time_ns() // 1_000_000)


class FixedClock:
    """Clock frozen at one instant."""

    def __init__(self, at: Instant) -> None:
        self._at = at

    def now(self) -> Instant:
        return self._at
