"""Tests for the root gildedrose CLI."""

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from gildedrose import __version__
from gildedrose.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "gildedrose" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_verbose_logs_updates(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "-q", "update"])
    assert result.exit_code == 0
    assert "Updated 'Aged Brie'" in result.output


# --- Commands registered ---

EXPECTED_COMMANDS = ["update", "rules"]


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_invalid_env_setting_is_click_error(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GILDEDROSE_QUIET", "maybe")
    result = cli_runner.invoke(cli, ["update"])
    assert result.exit_code == 1
    assert "Invalid settings" in result.output
    assert not isinstance(result.exception, ValidationError)
