"""Command: interactive conversion board.

The board keeps a set of tracked zones for the life of the session and
re-renders the conversion after every change. Nothing is saved when the
session ends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzctl.commands._base import ZONE, TzCommand

if TYPE_CHECKING:
    from tzctl.commands._context import AppContext

# Ops whose success changes what the board shows.
_REDRAW_OPS = frozenset({"add", "remove", "source", "at", "now"})


@click.command(
    cls=TzCommand,
    examples="""\
  tzctl board
  tzctl board --from America/New_York --at 2024-06-01T09:00
  tzctl board -t Asia/Tokyo -t Europe/Paris""",
)
@click.option("--from", "source", type=ZONE, default=None, help="Initial source zone.")
@click.option("--at", default=None, help="Initial wall-clock input (default: now).")
@click.option(
    "-t",
    "--track",
    "tracked",
    type=ZONE,
    multiple=True,
    help="Initially tracked zone; repeatable (default: [zones] tracked).",
)
@click.pass_obj
def board(
    app: AppContext,
    source: str | None,
    at: str | None,
    tracked: tuple[str, ...],
) -> None:
    """Interactive board: add and remove zones, change the time, watch conversions."""
    if app.settings.no_interact:
        raise click.UsageError("board is interactive; it cannot run with --no-interact.")

    from tzctl.services.board import BoardService

    svc = BoardService(app.runtime)
    for step in _initial_steps(source, at, tracked, svc.state.tracked.snapshot()):
        result = svc.execute(step)
        if not result.ok:
            app.emit(result)

    redraw = app.settings.board.show_on_change
    app.echo(svc.show())
    while True:
        try:
            line = click.prompt(app.settings.board.prompt, default="", show_default=False)
        except click.Abort:
            break
        result = svc.execute(line)
        app.echo(result)
        if result.op == "quit":
            break
        if redraw and result.ok and result.op in _REDRAW_OPS:
            app.echo(svc.show())


def _initial_steps(
    source: str | None,
    at: str | None,
    tracked: tuple[str, ...],
    current: tuple[str, ...],
) -> list[str]:
    """Board commands that apply the command-line options to a fresh board."""
    steps: list[str] = []
    if source:
        steps.append(f"source {source}")
        if at is None:
            steps.append("now")
    if at:
        steps.append(f'at "{at}"')
    if tracked:
        steps.extend(f"remove {zone}" for zone in current if zone not in tracked)
        steps.extend(f"add {zone}" for zone in dict.fromkeys(tracked) if zone not in current)
    return steps
