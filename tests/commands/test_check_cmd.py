"""Tests for the check CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from relwatch.cli import cli


class TestCheckCommand:
    def test_all_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "alpha=10m", "beta=90"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["checked"] == 2
        assert data["data"]["normalized"] == {"beta": "90s"}

    def test_normalization_warning(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "alpha=10m", "beta=90"])
        assert result.exit_code == 0
        warnings = json.loads(result.output)["warnings"]
        assert len(warnings) == 1
        assert warnings[0].startswith("beta:")

    def test_out_of_range_interval(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "alpha=99999999999999h"])
        assert result.exit_code == 1
        assert "alpha:" in result.output
        assert "<invalid>" in result.output

    def test_invalid_reported_as_batch(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "alpha=10x", "beta=1h", "gamma=later"])
        assert result.exit_code == 1
        assert "alpha:" in result.output
        assert "gamma:" in result.output
        assert "beta:" not in result.output

    def test_bad_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "alpha"])
        assert result.exit_code == 2
        assert "SERVICE=INTERVAL" in result.output

    def test_requires_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 2
