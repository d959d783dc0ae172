"""Classification enums shared across the domain and shell."""

from __future__ import annotations

from enum import StrEnum


class TransitionKind(StrEnum):
    """How a civil time relates to a DST transition in its zone."""

    GAP = "gap"
    OVERLAP = "overlap"


class BoardAction(StrEnum):
    """Verbs understood by the interactive board."""

    ADD = "add"
    REMOVE = "remove"
    SOURCE = "source"
    AT = "at"
    NOW = "now"
    LIST = "list"
    SHOW = "show"
    HELP = "help"
    QUIT = "quit"
