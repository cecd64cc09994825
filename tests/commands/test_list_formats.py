"""Tests for the formats command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tsctl.cli import cli
from tsctl.domain.formats import FormatToken

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


class TestFormats:
    def test_json_lists_every_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "formats"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert [item["token"] for item in data["formats"]] == [t.value for t in FormatToken]
        bearing = {item["token"] for item in data["formats"] if item["requires_timezone"]}
        assert bearing == {"RFC3339", "RFC3339Nano", "RFC822", "RFC822Z", "RFC1123", "RFC1123Z"}

    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["formats"])
        assert result.exit_code == 0
        assert "Named formats" in result.output
        assert "StampNano" in result.output
