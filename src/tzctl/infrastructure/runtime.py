"""ZoneRuntime — the single dependency injected into every service.

Owns the supported-zone catalog, the rule source, and the clock, and
wires them into an :class:`OffsetResolver` and a
:class:`ConversionEngine`. Tests inject a fake rule source or a fixed
clock through the keyword arguments.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tzctl.domain.catalog import ZoneCatalog
from tzctl.domain.civil import MS_PER_MINUTE, CivilTimestamp, Instant
from tzctl.domain.conversion import ConversionEngine
from tzctl.domain.offsets import OffsetResolver
from tzctl.infrastructure.clock import SystemClock
from tzctl.infrastructure.rules import ZoneInfoRuleSource

if TYPE_CHECKING:
    from tzctl.config.settings import TzSettings
    from tzctl.domain.offsets import RuleSource
    from tzctl.infrastructure.clock import Clock

logger = logging.getLogger(__name__)


class ZoneRuntime:
    """Catalog + rule source + clock, and the core built on top of them."""

    def __init__(
        self,
        settings: TzSettings,
        *,
        rules: RuleSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings
        self.catalog = ZoneCatalog(settings.zones.catalog)
        self.rules: RuleSource = rules if rules is not None else ZoneInfoRuleSource()
        self.clock: Clock = clock if clock is not None else SystemClock()
        self.resolver = OffsetResolver(self.rules, self.catalog)
        self.engine = ConversionEngine(self.resolver)
        logger.debug("Runtime ready with %d catalog zones", len(self.catalog))

    def now(self) -> Instant:
        return self.clock.now()

    def now_civil(self, zone: str) -> CivilTimestamp:
        """Current wall-clock time in *zone*, truncated to the minute."""
        now = self.clock.now()
        return self.resolver.render(zone, Instant(now - now % MS_PER_MINUTE))

