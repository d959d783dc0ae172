"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy runtime initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tzctl.config.settings import TzSettings
    from tzctl.infrastructure.runtime import ZoneRuntime
    from tzctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The runtime is created on first use so ``--help`` and ``--version``
    never touch the tz database.
    """

    def __init__(self, settings: TzSettings) -> None:
        self.settings = settings
        self._runtime: ZoneRuntime | None = None

        from tzctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

        if settings.verbose:
            from tzctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def runtime(self) -> ZoneRuntime:
        """The zone runtime (created lazily on first access)."""
        if self._runtime is None:
            from tzctl.infrastructure.runtime import ZoneRuntime

            self._runtime = ZoneRuntime(self.settings)
        return self._runtime

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_date=self.settings.display.show_date,
            show_delta=self.settings.display.show_delta,
        )

    def render(self, result: ServiceResult) -> str:
        return format_result(result, settings=self.output_settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings (unknown targets, DST gaps/overlaps) go to stderr so
          they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        if result.ok:
            self.echo(result)
        else:
            click.echo(self.render(result), err=True)
            raise SystemExit(1)

    def echo(self, result: ServiceResult) -> None:
        """Write *result* without exit semantics (the board keeps running on errors)."""
        output = self.render(result)
        click.echo(output, err=not result.ok)
        # In JSON mode, warnings are already in the serialized payload.
        if result.ok and not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
