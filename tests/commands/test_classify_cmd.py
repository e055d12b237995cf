"""Tests for the classify CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pkgsort.cli import cli


class TestClassifyCommand:
    @pytest.mark.parametrize(
        "args,expected",
        [
            (["10", "10", "10", "5"], "STANDARD"),
            (["200", "10", "10", "5"], "SPECIAL"),
            (["100", "100", "100", "5"], "SPECIAL"),
            (["10", "10", "10", "25"], "SPECIAL"),
            (["200", "10", "10", "25"], "REJECTED"),
            (["149.99", "10", "10", "19.99"], "STANDARD"),
        ],
    )
    def test_quiet_prints_stack(
        self, cli_runner: CliRunner, args: list[str], expected: str
    ) -> None:
        result = cli_runner.invoke(cli, ["-q", "classify", *args])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == expected

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "200", "10", "10", "25"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "classification: REJECTED" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "classify", "100", "100", "100", "5"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "classify"
        assert data["data"]["classification"] == "SPECIAL"
        assert data["data"]["reasons"] == ["volume"]

    def test_verbose_includes_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-v", "classify", "10", "10", "10", "5"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["meta"]["telemetry"]["name"] == "SortService.classify"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "--examples"])
        assert result.exit_code == 0
        assert "pkgsort classify 10 10 10 5" in result.output


class TestClassifyErrors:
    @pytest.mark.parametrize(
        "args,code",
        [
            (["--", "-10", "20", "30", "5"], "NegativeValue"),
            (["0", "20", "30", "5"], "NonPositiveDimension"),
            (["nan", "20", "30", "5"], "InvalidNumber"),
            (["inf", "20", "30", "5"], "InvalidNumber"),
        ],
    )
    def test_validation_failure(self, cli_runner: CliRunner, args: list[str], code: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "classify", *args])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == code

    def test_human_error_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "0", "20", "30", "5"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert "greater than zero" in result.stderr

    def test_non_numeric_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "ten", "20", "30", "5"])
        assert result.exit_code == 2
        assert "not a valid float" in result.output

    def test_missing_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["classify", "10", "20", "30"])
        assert result.exit_code == 2
        assert "MASS" in result.output
