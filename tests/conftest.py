"""Shared pytest fixtures for tzctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from tests.doubles import JUNE_NOON
from tzctl.config.settings import TzSettings
from tzctl.domain.catalog import ZoneCatalog
from tzctl.domain.conversion import ConversionEngine
from tzctl.domain.offsets import OffsetResolver
from tzctl.infrastructure.clock import FixedClock
from tzctl.infrastructure.rules import ZoneInfoRuleSource
from tzctl.infrastructure.runtime import ZoneRuntime
from tzctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _telemetry_off() -> Iterator[None]:
    """Verbose CLI runs enable telemetry in the test's context; reset it."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no tzctl env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command
    test classes.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("TZCTL_CONFIG", "TZCTL_ZONES__SOURCE", "TZCTL_ZONES__TRACKED"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def settings(tmp_path: Path, _isolated_config: None) -> TzSettings:
    return TzSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def runtime(settings: TzSettings) -> ZoneRuntime:
    """Runtime on the real tz database with the clock frozen at JUNE_NOON."""
    return ZoneRuntime(settings, clock=FixedClock(JUNE_NOON))


@pytest.fixture
def resolver() -> OffsetResolver:
    """Resolver on the real tz database over the default catalog."""
    return OffsetResolver(ZoneInfoRuleSource(), ZoneCatalog())


@pytest.fixture
def engine(resolver: OffsetResolver) -> ConversionEngine:
    return ConversionEngine(resolver)
