"""Tests for the interactive board command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tzctl.cli import cli
from tzctl.commands.board import _initial_steps

AT = ["--at", "2024-06-01T12:00"]


@pytest.mark.usefixtures("_isolated_config")
class TestBoardCommand:
    def test_refuses_no_interact(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--no-interact", "board"])
        assert result.exit_code == 2
        assert "interactive" in result.output

    def test_shows_initial_board(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", *AT], input="quit\n")
        assert result.exit_code == 0
        assert "Europe/London" in result.stdout
        assert "13:00:00" in result.stdout
        assert "bye" in result.stdout

    def test_eof_ends_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", *AT], input="")
        assert result.exit_code == 0

    def test_add_redraws(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", *AT], input="add Asia/Tokyo\nquit\n")
        assert result.exit_code == 0
        assert "21:00:00" in result.stdout

    def test_errors_do_not_end_session(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["board", *AT], input="add Mars/Phobos\nremove Asia/Tokyo\nlist\nquit\n"
        )
        assert result.exit_code == 0
        assert "Unknown timezone: 'Mars/Phobos'" in result.stderr
        assert "Asia/Tokyo is not tracked" in result.stderr
        assert "bye" in result.stdout

    def test_initial_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "board",
                "--from",
                "America/New_York",
                *AT,
                "-t",
                "UTC",
                "-t",
                "Asia/Tokyo",
            ],
            input="quit\n",
        )
        assert result.exit_code == 0
        first = result.stdout.split("\n}\n")[0] + "\n}"
        board = json.loads(first[first.index("{") :])
        assert board["data"]["source"] == "America/New_York"
        assert [item["zone"] for item in board["data"]["items"]] == ["UTC", "Asia/Tokyo"]
        assert board["data"]["items"][0]["time"] == "16:00:00"

    def test_bad_initial_option_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["board", "--at", "whenever"], input="quit\n")
        assert result.exit_code == 1
        assert "Invalid date/time" in result.stderr

    def test_no_redraw_when_disabled(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "tzctl.toml").write_text("[board]\nshow_on_change = false\n")
        result = cli_runner.invoke(cli, ["board", *AT], input="add Asia/Tokyo\nquit\n")
        assert result.exit_code == 0
        assert "21:00:00" not in result.stdout
        assert "tracked: Europe/London, Asia/Tokyo" in result.stdout


class TestInitialSteps:
    def test_nothing_given(self) -> None:
        assert _initial_steps(None, None, (), ("Europe/London",)) == []

    def test_source_without_time_uses_now(self) -> None:
        assert _initial_steps("Asia/Tokyo", None, (), ()) == ["source Asia/Tokyo", "now"]

    def test_time_is_quoted(self) -> None:
        assert _initial_steps(None, "2024-06-01 09:30", (), ()) == ['at "2024-06-01 09:30"']

    def test_tracked_replaces_defaults(self) -> None:
        steps = _initial_steps(None, None, ("UTC", "Europe/London", "UTC"), ("Europe/London",))
        assert steps == ["add UTC"]

    def test_tracked_removes_unlisted(self) -> None:
        steps = _initial_steps(None, None, ("UTC",), ("Europe/London",))
        assert steps == ["remove Europe/London", "add UTC"]
