"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from tsctl.config.logging import configure_logging, resolve_level


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ts = logging.getLogger("tsctl")
    ts_level = ts.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ts.setLevel(ts_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("tsctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("tsctl").level == logging.WARNING

    def test_quiet_is_error(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger("tsctl").level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger("tsctl").level == logging.DEBUG

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("tsctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tsctl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_shares_handler(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("tsctl.domain.zones").debug("Unknown timezone %r", "Mars/Base")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Unknown timezone 'Mars/Base'"
        assert parsed["level"] == "debug"

    def test_parse_candidates_logged_when_verbose(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        from tsctl.domain.converter import TimeConverter

        configure_logging(verbose=True, log_json=True)
        TimeConverter().string_to_timestamp("2021-01-01T00:00:00", "RFC3339", "UTC")
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines() if line]
        assert any("rejected" in line["event"] for line in lines)


class TestResolveLevel:
    def test_config_level_applies(self) -> None:
        configure_logging(level="info")
        assert logging.getLogger("tsctl").level == logging.INFO

    def test_verbose_beats_config_level(self) -> None:
        assert resolve_level(verbose=True, level="error") == logging.DEBUG

    def test_quiet_beats_config_level(self) -> None:
        assert resolve_level(quiet=True, level="debug") == logging.ERROR

    def test_default(self) -> None:
        assert resolve_level() == logging.WARNING
