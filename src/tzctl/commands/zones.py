"""Command group: the supported-zone catalog and offset lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzctl.commands._base import ZONE, TzGroup

if TYPE_CHECKING:
    from tzctl.commands._context import AppContext

_ZONES_EXAMPLES = """\
  tzctl zones list
  tzctl zones list --at 2024-07-15T00:00
  tzctl zones offset America/New_York --at 2024-01-15T00:00
  tzctl --quiet zones offset Asia/Kolkata"""

_AT_HELP = "UTC instant as YYYY-MM-DDTHH:MM[:SS] (default: now)."


@click.group(cls=TzGroup, examples=_ZONES_EXAMPLES)
@click.pass_obj
def zones(app: AppContext) -> None:
    """List supported zones and look up UTC offsets."""


@zones.command(
    "list",
    examples="""\
  tzctl zones list
  tzctl zones list --at 2024-01-15T00:00
  tzctl --json zones list""",
)
@click.option("--at", default=None, help=_AT_HELP)
@click.pass_obj
def list_cmd(app: AppContext, at: str | None) -> None:
    """List every supported zone with its current offset."""
    from tzctl.services.zones import ZoneService

    app.emit(ZoneService(app.runtime).list_zones(at=at))


@zones.command(
    examples="""\
  tzctl zones offset Europe/London
  tzctl zones offset America/New_York --at 2024-07-15T00:00
  tzctl --json zones offset Asia/Kolkata"""
)
@click.argument("zone", type=ZONE)
@click.option("--at", default=None, help=_AT_HELP)
@click.pass_obj
def offset(app: AppContext, zone: str, at: str | None) -> None:
    """Show the UTC offset of ZONE at an instant."""
    from tzctl.services.zones import ZoneService

    app.emit(ZoneService(app.runtime).resolve_offset(zone, at=at))
