"""Tests for the thresholds CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from pkgsort.cli import cli


class TestThresholdsCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["thresholds"])
        assert result.exit_code == 0
        assert "dimension_cm" in result.stdout
        assert "1,000,000" in result.stdout

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "thresholds"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["mass_kg"] == 20

    def test_verbose_json_includes_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "thresholds"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["meta"]["telemetry"]["name"] == "SortService.thresholds"

    def test_no_examples_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["thresholds", "--examples"])
        assert result.exit_code == 2
