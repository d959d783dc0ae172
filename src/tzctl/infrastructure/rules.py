"""ZoneInfoRuleSource — civil rendering backed by the IANA database.

``zoneinfo`` reads the host's tz database and falls back to the
``tzdata`` package when the host has none, so conversions behave the
same on slim containers and Windows.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzctl.domain.civil import OUT_OF_RANGE, CivilTimestamp, Instant
from tzctl.domain.errors import InvalidInputError, UnknownZoneError

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@lru_cache(maxsize=256)
def load_zone(zone: str) -> ZoneInfo:
    """Load *zone* from the tz database.

    Raises:
        UnknownZoneError: the key is malformed or not in the database.
    """
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.debug("tz database has no zone %r: %s", zone, exc)
        raise UnknownZoneError(zone) from exc


class ZoneInfoRuleSource:
    """:class:`~tzctl.domain.offsets.RuleSource` over :mod:`zoneinfo`."""

    def render_civil(self, zone: str, at: Instant) -> CivilTimestamp:
        tz = load_zone(zone)
        try:
            local = (_EPOCH + timedelta(milliseconds=at)).astimezone(tz)
        except OverflowError as exc:
            # Instants near year 1 or 9999 can render outside datetime's range.
            raise InvalidInputError(f"{at} ms", OUT_OF_RANGE) from exc
        return CivilTimestamp.from_datetime(local)
