"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from tzctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["convert", "zones", "board", "--json", "--quiet", "--config"]),
    (["convert", "--help"], ["--from", "--at", "--now", "--to", "--examples"]),
    (["zones", "--help"], ["list", "offset"]),
    (["zones", "list", "--help"], ["--at"]),
    (["zones", "offset", "--help"], ["ZONE", "--at"]),
    (["board", "--help"], ["--from", "--at", "--track"]),
]

EXAMPLE_COMMANDS: list[list[str]] = [
    ["convert"],
    ["zones"],
    ["zones", "list"],
    ["zones", "offset"],
    ["board"],
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize("args", EXAMPLE_COMMANDS)
def test_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"tzctl {' '.join(args)}" in result.output
