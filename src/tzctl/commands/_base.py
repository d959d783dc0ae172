"""Custom Click base classes with --examples support.

Provides TzCommand and TzGroup that accept an ``examples`` parameter,
and the ZONE parameter type used by every command that takes a zone id.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click
import click.shell_completion


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TzCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class TzGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = TzCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = TzCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ZoneParamType(click.ParamType):
    """Zone id parameter with shell completion from the supported catalog.

    Values are passed through unchanged; validation against the catalog
    happens in the service layer so failures share the ServiceResult
    error contract (and ``--json`` output).
    """

    name = "zone"

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[click.shell_completion.CompletionItem]:
        from click.shell_completion import CompletionItem

        from tzctl.domain.catalog import DEFAULT_ZONES

        root = ctx.find_root()
        settings = getattr(root.obj, "settings", None)
        zones = settings.zones.catalog if settings is not None else DEFAULT_ZONES
        needle = incomplete.lower()
        return [CompletionItem(z) for z in zones if z.lower().startswith(needle)]


ZONE = ZoneParamType()
