"""BoardService — state container for the interactive conversion board.

The board owns the session's :class:`TrackedZoneSet`, the source zone,
and the civil input. Every call into the conversion core passes a
snapshot of the tracked zones; the core never keeps a reference.
Nothing is persisted between sessions.
"""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tzctl.domain.civil import CivilTimestamp
from tzctl.domain.errors import InvalidInputError, UnknownZoneError
from tzctl.domain.tracked import TrackedZoneSet
from tzctl.domain.types import BoardAction
from tzctl.services.base import BaseService
from tzctl.services.contracts import BoardStateData, dump_validated
from tzctl.services.convert import ConvertService
from tzctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tzctl.infrastructure.runtime import ZoneRuntime

logger = logging.getLogger(__name__)

BOARD_HELP: dict[BoardAction, str] = {
    BoardAction.ADD: "add ZONE        track a zone",
    BoardAction.REMOVE: "remove ZONE     stop tracking a zone",
    BoardAction.SOURCE: "source ZONE     change the source zone",
    BoardAction.AT: "at DATETIME     set the wall-clock input (YYYY-MM-DDTHH:MM)",
    BoardAction.NOW: "now             use the current time in the source zone",
    BoardAction.LIST: "list            show the tracked zones",
    BoardAction.SHOW: "show            show the conversion board",
    BoardAction.HELP: "help            show this help",
    BoardAction.QUIT: "quit            leave the board",
}

# Actions that take exactly one argument.
_UNARY = {BoardAction.ADD, BoardAction.REMOVE, BoardAction.SOURCE, BoardAction.AT}


@dataclass
class BoardState:
    """Mutable board state; lives only as long as the session."""

    source: str
    civil: CivilTimestamp
    tracked: TrackedZoneSet = field(default_factory=TrackedZoneSet)


class BoardService(BaseService):
    """Applies board actions to a :class:`BoardState`."""

    def __init__(self, runtime: ZoneRuntime, state: BoardState | None = None) -> None:
        super().__init__(runtime)
        if state is None:
            zones = runtime.settings.zones
            state = BoardState(
                source=zones.source,
                civil=runtime.now_civil(zones.source),
                tracked=TrackedZoneSet(zones.tracked),
            )
        self.state = state

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, line: str) -> ServiceResult:
        """Parse and apply one board command line."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            return _error("board", "BAD_COMMAND", f"Cannot parse command: {exc}")
        if not words:
            return self.show()

        verb, args = words[0].lower(), words[1:]
        try:
            action = BoardAction(verb)
        except ValueError:
            return _error("board", "UNKNOWN_ACTION", f"Unknown command: {verb!r} (try 'help')")

        if action is BoardAction.AT and len(args) == 2:
            # "at 2024-06-01 12:00": date and time given as two words
            args = [" ".join(args)]
        if action in _UNARY and len(args) != 1:
            return _error(action.value, "BAD_COMMAND", f"Usage: {BOARD_HELP[action]}")
        if action not in _UNARY and args:
            return _error(action.value, "BAD_COMMAND", f"'{action.value}' takes no arguments")

        match action:
            case BoardAction.ADD:
                return self.add(args[0])
            case BoardAction.REMOVE:
                return self.remove(args[0])
            case BoardAction.SOURCE:
                return self.set_source(args[0])
            case BoardAction.AT:
                return self.set_time(args[0])
            case BoardAction.NOW:
                return self.use_now()
            case BoardAction.LIST:
                return self.list_tracked()
            case BoardAction.SHOW:
                return self.show()
            case BoardAction.HELP:
                return ServiceResult(
                    ok=True, op="help", data={"commands": list(BOARD_HELP.values())}
                )
            case BoardAction.QUIT:
                return ServiceResult(ok=True, op="quit")

    def add(self, zone: str) -> ServiceResult:
        """Track *zone*. Unknown zones are rejected; duplicates are reported."""
        op = "add"
        try:
            self._runtime.catalog.require(zone)
        except UnknownZoneError as exc:
            return self._failure(op, exc)
        if not self.state.tracked.add(zone):
            return _error(op, "ALREADY_TRACKED", f"{zone} is already tracked", zone=zone)
        logger.debug("Board now tracks %s", zone)
        return self._state_result(op, zone=zone)

    def remove(self, zone: str) -> ServiceResult:
        op = "remove"
        if not self.state.tracked.remove(zone):
            return _error(op, "NOT_TRACKED", f"{zone} is not tracked", zone=zone)
        return self._state_result(op, zone=zone)

    def set_source(self, zone: str) -> ServiceResult:
        op = "source"
        try:
            self._runtime.catalog.require(zone)
        except UnknownZoneError as exc:
            return self._failure(op, exc)
        self.state.source = zone
        return self._state_result(op)

    def set_time(self, text: str) -> ServiceResult:
        op = "at"
        try:
            self.state.civil = CivilTimestamp.parse(text)
        except InvalidInputError as exc:
            return self._failure(op, exc)
        return self._state_result(op)

    def use_now(self) -> ServiceResult:
        self.state.civil = self._runtime.now_civil(self.state.source)
        return self._state_result("now")

    def list_tracked(self) -> ServiceResult:
        return self._state_result("list")

    def show(self) -> ServiceResult:
        """Convert the current input for every tracked zone."""
        return ConvertService(self._runtime).convert(
            source=self.state.source,
            at=self.state.civil,
            targets=self.state.tracked.snapshot(),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _state_result(self, op: str, **extra: Any) -> ServiceResult:
        tracked = list(self.state.tracked.snapshot())
        data = dump_validated(
            BoardStateData,
            {
                "source": self.state.source,
                "input": self.state.civil.isoformat(),
                "tracked": tracked,
                "count": len(tracked),
                **extra,
            },
        )
        return ServiceResult(ok=True, op=op, data=data)


def _error(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
