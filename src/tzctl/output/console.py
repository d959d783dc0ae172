"""Rich Console factory and theme for tzctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZ_THEME = Theme(
    {
        "tz.ok": "bold green",
        "tz.error": "bold red",
        "tz.warning": "bold yellow",
        "tz.op": "bold cyan",
        "tz.key": "dim",
        "tz.zone": "bold blue",
        "tz.time": "bold",
        "tz.date": "dim",
        "tz.offset.ahead": "green",
        "tz.offset.behind": "magenta",
        "tz.offset.utc": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_offset(minutes: int | None) -> str:
    """Rich style for an offset: ahead of, behind, or at UTC."""
    if minutes is None:
        return "tz.error"
    if minutes > 0:
        return "tz.offset.ahead"
    if minutes < 0:
        return "tz.offset.behind"
    return "tz.offset.utc"
