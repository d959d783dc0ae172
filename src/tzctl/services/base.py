"""BaseService — abstract foundation for all tzctl services.

Every service receives a :class:`ZoneRuntime` at construction time. The
runtime provides the catalog, the rule source, the clock, and the
conversion core.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tzctl.domain.errors import TzError
from tzctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tzctl.infrastructure.runtime import ZoneRuntime

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ConvertService(BaseService):
            def convert(self, ...) -> ServiceResult:
                conversion = self._runtime.engine.convert(...)
                ...
    """

    def __init__(self, runtime: ZoneRuntime) -> None:
        self._runtime = runtime

    @staticmethod
    def _failure(op: str, exc: TzError) -> ServiceResult:
        """Map a domain error onto a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        detail = {k: v for k, v in vars(exc).items() if isinstance(v, str)}
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
