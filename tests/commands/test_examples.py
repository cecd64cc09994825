"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from tsctl.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["to-string", "--examples"], ["tsctl to-string 1609459200", "--ms"]),
    (["to-timestamp", "--examples"], ["--tz Asia/Shanghai"]),
    (["now", "--examples"], ["tsctl now"]),
    (["formats", "--examples"], ["tsctl --json formats"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"), EXAMPLES_COMMANDS, ids=[a[0] for a, _ in EXAMPLES_COMMANDS]
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_not_in_required_args(cli_runner: CliRunner) -> None:
    """--examples is eager, so the missing TIMESTAMP argument is not reported."""
    result = cli_runner.invoke(cli, ["to-string", "--examples"])
    assert "Missing argument" not in result.output
