"""Tests for the module-level conversion functions."""

import pytest

import tsctl

NEW_YEAR = 1609459200


def test_defaults_are_rfc3339_utc() -> None:
    assert tsctl.timestamp_to_string(NEW_YEAR) == "2021-01-01T00:00:00Z"
    assert tsctl.string_to_timestamp("2021-01-01T00:00:00Z") == NEW_YEAR


def test_milli_functions() -> None:
    assert tsctl.timestamp_to_string_milli(NEW_YEAR * 1000 + 250, "Date") == "2021-01-01"
    assert tsctl.string_to_timestamp_milli("2021-01-01", "Date") == NEW_YEAR * 1000


def test_clock_functions() -> None:
    assert abs(tsctl.current_timestamp_milli() // 1000 - tsctl.current_timestamp()) <= 1
    assert tsctl.format_now("Date", "UTC").count("-") == 2


def test_format_token_enum_accepted() -> None:
    assert tsctl.timestamp_to_string(NEW_YEAR, tsctl.FormatToken.DATE) == "2021-01-01"


def test_requires_timezone_exported() -> None:
    assert tsctl.requires_timezone("RFC1123") is True
    assert tsctl.requires_timezone("Kitchen") is False
    assert tsctl.resolve_layout("Kitchen") == "%-I:%M%p"


def test_errors_exported() -> None:
    with pytest.raises(tsctl.TimeParseError):
        tsctl.string_to_timestamp("garbage")
    with pytest.raises(tsctl.TimestampRangeError):
        tsctl.timestamp_to_string(2**63)
