"""Subcommand modules for tzctl.

Provides register_commands() which uses deferred imports to keep
``tzctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``zones`` group and the standalone commands on the root group."""
    from tzctl.commands.board import board
    from tzctl.commands.convert import convert
    from tzctl.commands.zones import zones

    cli.add_command(zones)
    cli.add_command(convert)
    cli.add_command(board)
