"""Tests for the root relwatch CLI."""

from click.testing import CliRunner

from relwatch import __version__
from relwatch.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "relwatch" in result.output
    assert "resolve" in result.output
    assert "check" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flag in ("--json", "-q", "-v", "--log-json"):
        result = cli_runner.invoke(cli, [flag, "--version"])
        assert result.exit_code == 0, flag
