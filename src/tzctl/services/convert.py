"""ConvertService — one civil time, many target zones.

Pipeline: RESOLVE INPUT → CONVERT → VALIDATE PAYLOAD → RESPOND
"""

from __future__ import annotations

from collections.abc import Iterable

from tzctl.config.logging import zone_context
from tzctl.domain.civil import CivilTimestamp
from tzctl.domain.errors import InvalidInputError, UnknownZoneError
from tzctl.services._helpers import conversion_payload, conversion_warnings
from tzctl.services.base import BaseService
from tzctl.services.contracts import ConvertResultData, dump_validated
from tzctl.services.result import ServiceResult
from tzctl.services.telemetry import trace_span, traced


class ConvertService(BaseService):
    """Converts wall-clock input from a source zone into target zones."""

    @traced
    def convert(
        self,
        *,
        source: str | None = None,
        at: str | CivilTimestamp | None = None,
        targets: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Convert *at* (wall-clock time in *source*) for every target.

        Args:
            source: Source zone; defaults to ``[zones] source``.
            at: Civil input as text or a CivilTimestamp; defaults to the
                current time in *source*, truncated to the minute.
            targets: Target zones; defaults to ``[zones] tracked``.

        An invalid input or unknown source fails the whole call. Unknown
        targets come back as failed rows plus a warning each.
        """
        op = "convert"
        zones = self._runtime.settings.zones
        source = source or zones.source
        target_list = list(targets) if targets is not None else list(zones.tracked)

        try:
            if at is None:
                civil = self._runtime.now_civil(source)
            elif isinstance(at, CivilTimestamp):
                civil = at
            else:
                civil = CivilTimestamp.parse(at)

            with zone_context(source), trace_span("engine.convert") as span:
                conversion = self._runtime.engine.convert(source, civil, target_list)
                if span is not None:
                    span.annotate("targets", len(conversion.results))
                    span.annotate("failed", len(conversion.failures))
        except (InvalidInputError, UnknownZoneError) as exc:
            return self._failure(op, exc)

        data = dump_validated(ConvertResultData, conversion_payload(conversion))
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=conversion_warnings(conversion),
        )
