"""Tests for the zones command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tzctl.cli import cli
from tzctl.domain.catalog import DEFAULT_ZONES


@pytest.mark.usefixtures("_isolated_config")
class TestZonesList:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "zones", "list", "--at", "2024-01-15T00:00"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["count"] == len(DEFAULT_ZONES)
        rows = {item["zone"]: item for item in data["items"]}
        assert rows["America/New_York"]["offset"] == "UTC -05:00"

    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "list", "--at", "2024-07-15T00:00"])
        assert result.exit_code == 0
        assert "Pacific/Auckland" in result.stdout
        assert "UTC +12:00" in result.stdout

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zones", "list", "--at", "2024-07-15T00:00"])
        lines = result.stdout.splitlines()
        assert len(lines) == len(DEFAULT_ZONES)
        assert "Asia/Kolkata\tUTC +05:30" in lines

    def test_bad_instant(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "list", "--at", "2024-02-30T00:00"])
        assert result.exit_code == 1
        assert "Invalid date/time" in result.stderr


@pytest.mark.usefixtures("_isolated_config")
class TestZonesOffset:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "zones", "offset", "Asia/Kolkata", "--at", "2024-06-01T00:00"]
        )
        assert result.exit_code == 0
        assert result.stdout == "UTC +05:30\n"

    @pytest.mark.parametrize(
        ("at", "expected"),
        [("2024-01-15T00:00", "UTC -05:00"), ("2024-07-15T00:00", "UTC -04:00")],
    )
    def test_dst(self, cli_runner: CliRunner, at: str, expected: str) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "zones", "offset", "America/New_York", "--at", at]
        )
        assert json.loads(result.stdout)["data"]["offset"] == expected

    def test_unknown_zone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "offset", "Mars/Phobos"])
        assert result.exit_code == 1
        assert "Unknown timezone: 'Mars/Phobos'" in result.stderr

    def test_missing_zone_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "offset"])
        assert result.exit_code == 2
