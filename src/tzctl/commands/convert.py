"""Command: convert a wall-clock time from one zone into others."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzctl.commands._base import ZONE, TzCommand

if TYPE_CHECKING:
    from tzctl.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzctl convert
  tzctl convert --at 2024-06-01T12:00 -t America/New_York -t Asia/Tokyo
  tzctl convert --from Asia/Kolkata --at "2024-06-01 09:30" -t Europe/London
  tzctl convert --from America/New_York --now -t UTC
  tzctl --json convert --at 2024-03-10T02:30 --from America/New_York -t UTC""",
)
@click.option(
    "--from", "source", type=ZONE, default=None, help="Source zone (default: [zones] source)."
)
@click.option(
    "--at",
    "at",
    default=None,
    help="Wall-clock time in the source zone: YYYY-MM-DDTHH:MM[:SS].",
)
@click.option("--now", "use_now", is_flag=True, help="Use the current time (the default).")
@click.option(
    "-t",
    "--to",
    "targets",
    type=ZONE,
    multiple=True,
    help="Target zone; repeatable (default: [zones] tracked).",
)
@click.pass_obj
def convert(
    app: AppContext,
    source: str | None,
    at: str | None,
    use_now: bool,
    targets: tuple[str, ...],
) -> None:
    """Show what a wall-clock time in one zone reads in other zones."""
    if at is not None and use_now:
        raise click.UsageError("--at and --now are mutually exclusive.")

    from tzctl.services.convert import ConvertService

    result = ConvertService(app.runtime).convert(
        source=source,
        at=at,
        targets=targets or None,
    )
    app.emit(result)
