"""Tests for the to-string and to-timestamp commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tsctl.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")

NEW_YEAR = "1609459200"


class TestToString:
    def test_default_rfc3339(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "to-string", NEW_YEAR])
        assert result.exit_code == 0
        assert result.output.strip() == "2021-01-01T00:00:00Z"

    def test_timezone_and_format(self, cli_runner: CliRunner) -> None:
        args = ["-q", "--tz", "Asia/Shanghai", "-f", "DateTime", "to-string", NEW_YEAR]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert result.output.strip() == "2021-01-01 08:00:00"

    def test_millis_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "-f", "DateTime", "to-string", "--ms", "1609459200999"])
        assert result.exit_code == 0
        assert result.output.strip() == "2021-01-01 00:00:00"

    def test_unit_option(self, cli_runner: CliRunner) -> None:
        args = ["--json", "-f", "Date", "to-string", "--unit", "ms", "1609459200000"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["time"] == "2021-01-01"
        assert data["data"]["unit"] == "ms"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-f", "Date", "to-string", NEW_YEAR])
        assert result.exit_code == 0
        assert "OK: to_string" in result.output
        assert "time: 2021-01-01" in result.output

    def test_custom_layout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "-f", "%d/%m/%Y", "to-string", NEW_YEAR])
        assert result.exit_code == 0
        assert result.output.strip() == "01/01/2021"

    def test_invalid_layout_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-f", "%Q", "to-string", NEW_YEAR])
        assert result.exit_code == 1
        assert "ERROR: to_string" in result.output

    def test_unknown_timezone_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-f", "Date", "--tz", "Mars/Base", "to-string", NEW_YEAR])
        assert result.exit_code == 0
        assert "WARNING: Unknown timezone 'Mars/Base', using UTC" in result.output

    def test_non_integer_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["to-string", "soon"])
        assert result.exit_code == 2


class TestToTimestamp:
    def test_rfc3339(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "to-timestamp", "2021-01-01T08:00:00+08:00"])
        assert result.exit_code == 0
        assert result.output.strip() == NEW_YEAR

    def test_wall_clock_in_timezone(self, cli_runner: CliRunner) -> None:
        args = ["-q", "--tz", "Asia/Shanghai", "-f", "DateTime", "to-timestamp", "2021-06-15 12:00:00"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert result.output.strip() == "1623729600"

    def test_millis(self, cli_runner: CliRunner) -> None:
        args = ["-q", "-f", "RFC3339Nano", "to-timestamp", "--ms", "2021-01-01T00:00:00.5Z"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert result.output.strip() == "1609459200000"

    def test_parse_failure_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "-f", "Date", "to-timestamp", "tomorrow"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "PARSE_FAILED"
        assert data["error"]["detail"]["value"] == "tomorrow"

    def test_parse_failure_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["to-timestamp", "tomorrow"])
        assert result.exit_code == 1
        assert "ERROR: to_timestamp" in result.output
        assert "tomorrow" in result.output

    def test_config_defaults(self, cli_runner: CliRunner, tmp_path) -> None:
        (tmp_path / "tsctl.toml").write_text(
            '[defaults]\nformat = "DateTime"\ntimezone = "Asia/Shanghai"\n'
        )
        result = cli_runner.invoke(cli, ["-q", "to-timestamp", "2021-01-01 08:00:00"])
        assert result.exit_code == 0
        assert result.output.strip() == NEW_YEAR

    def test_verbose_shows_candidates(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "to-timestamp", "2021-01-01T00:00:00Z"])
        assert result.exit_code == 0
        assert "candidates" in result.output


class TestPreEpoch:
    def test_negative_timestamp_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "-f", "Date", "to-string", "-86400"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "1969-12-31"

    def test_negative_millis(self, cli_runner: CliRunner) -> None:
        args = ["-q", "-f", "DateTime", "to-string", "--ms", "-1500"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "1969-12-31 23:59:58"
