"""Tests for the check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cusiptool.cli import cli

MIXED = "037833100\n037833108\n0378331\n17275r102\n"


@pytest.mark.usefixtures("_isolated_config")
class TestCheckCommand:
    def test_all_valid_exits_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"], input="037833100\n17275R102\n")
        assert result.exit_code == 0
        assert result.stdout == ""
        assert "Read 2 values; 2 were valid CUSIPs and 0 were not." in result.stderr

    def test_empty_input_exits_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"], input="")
        assert result.exit_code == 0
        assert "Read 0 values" in result.stderr

    def test_bad_input_exits_one(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"], input=MIXED)
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Read 4 values; 1 were valid CUSIPs and 3 were not." in result.stderr
        assert "Input: 0378331; Error: invalid length 7 when expecting 9" in result.stderr
        assert "Input: 17275r102; Error: invalid character 'r' at position 6" in result.stderr

    def test_no_report(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--no-report"], input=MIXED)
        assert result.exit_code == 1
        assert "Input:" not in result.stderr

    def test_reads_file_argument(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "cusips.txt"
        path.write_text("594918104\n38259P508\n")
        result = cli_runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 0
        assert "Read 2 values; 2 were valid CUSIPs and 0 were not." in result.stderr

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_config")
class TestCheckFix:
    def test_fix_prints_good_and_fixed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--fix"], input=MIXED)
        assert result.stdout == "037833100\n037833100\n"
        assert "Fixed 1; Omitted 2." in result.stderr
        assert result.exit_code == 1

    def test_fix_all_repairable_exits_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--fix"], input="037833100\n594918105\n")
        assert result.exit_code == 0
        assert result.stdout == "037833100\n594918104\n"
        assert (
            "Read 2 values; 1 were valid CUSIPs and 1 were not. Fixed 1; Omitted 0."
            in result.stderr
        )

    def test_fix_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "cusiptool.toml").write_text("[check]\nfix = true\n")
        result = cli_runner.invoke(cli, ["check"], input="594918105\n")
        assert result.exit_code == 0
        assert result.stdout == "594918104\n"

    def test_no_fix_overrides_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "cusiptool.toml").write_text("[check]\nfix = true\n")
        result = cli_runner.invoke(cli, ["check", "--no-fix"], input="594918105\n")
        assert result.exit_code == 1
        assert result.stdout == ""


@pytest.mark.usefixtures("_isolated_config")
class TestCheckJson:
    def test_json_summary_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "--fix"], input="037833108\n")
        assert result.exit_code == 0
        assert result.stdout == "037833100\n"
        payload = json.loads(result.stderr)
        assert payload["ok"] is True
        assert payload["op"] == "check"
        assert payload["data"]["fixed"] == 1

    def test_json_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "--no-report"], input="x\n")
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "INVALID_INPUT"
        assert payload["data"]["bad"] == 1


class TestCheckEnvIsolation:
    @pytest.fixture
    def _stray_env(self, monkeypatch: pytest.MonkeyPatch, request: pytest.FixtureRequest) -> None:
        monkeypatch.setenv("CUSIPTOOL_JSON_OUTPUT", "true")
        monkeypatch.setenv("CUSIPTOOL_CHECK__SKIP_BLANK", "true")
        monkeypatch.setenv("CUSIPTOOL_CHECK__STRIP_WHITESPACE", "true")
        request.getfixturevalue("_isolated_config")

    @pytest.mark.usefixtures("_stray_env")
    def test_env_overrides_do_not_leak(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--no-report"], input=" 037833100\n\n")
        assert result.exit_code == 1
        assert "Read 2 values; 0 were valid CUSIPs and 2 were not." in result.stderr
