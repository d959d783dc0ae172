"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich tables and colors),
for scripts (``--quiet``: one line per zone), or for machines
(``--json``). The formatter picks the mode from :class:`OutputSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tzctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from global flags and ``[display]``."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_date: bool = True
    show_delta: bool = True


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)

    from tzctl.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        show_date=settings.show_date,
        show_delta=settings.show_delta,
    )
