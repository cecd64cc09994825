"""Tests for Instant construction and range checks."""

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from tsctl.domain.errors import TimestampRangeError
from tsctl.domain.instant import INT64_MAX, Instant, check_int64


class TestInstant:
    def test_rejects_out_of_range_nanos(self) -> None:
        with pytest.raises(ValueError):
            Instant(0, 1_000_000_000)
        with pytest.raises(ValueError):
            Instant(0, -1)

    def test_from_datetime(self) -> None:
        dt = datetime(2021, 1, 1, 8, 0, 0, tzinfo=ZoneInfo("Asia/Shanghai"))
        assert Instant.from_datetime(dt) == Instant(1609459200)

    def test_from_datetime_keeps_microseconds(self) -> None:
        dt = datetime(2021, 1, 1, 0, 0, 0, 250_000, tzinfo=UTC)
        assert Instant.from_datetime(dt) == Instant(1609459200, 250_000_000)

    def test_from_datetime_nanosecond_override(self) -> None:
        dt = datetime(2021, 1, 1, tzinfo=UTC)
        assert Instant.from_datetime(dt, nanosecond=123_456_789).nanosecond == 123_456_789

    def test_from_datetime_rejects_naive(self) -> None:
        with pytest.raises(ValueError):
            Instant.from_datetime(datetime(2021, 1, 1))

    def test_before_epoch_floors(self) -> None:
        assert Instant.from_nanos(-1) == Instant(-1, 999_999_999)

    def test_epoch_millis(self) -> None:
        assert Instant(1609459200, 123_999_999).epoch_millis == 1609459200123

    def test_to_datetime(self) -> None:
        dt = Instant(0, 5_000).to_datetime(timezone(timedelta(hours=1)))
        assert dt.hour == 1
        assert dt.microsecond == 5

    def test_to_datetime_out_of_range(self) -> None:
        with pytest.raises(TimestampRangeError):
            Instant(253402300800).to_datetime(UTC)  # 10000-01-01

    def test_now_is_recent(self) -> None:
        assert Instant.now().epoch_seconds > 1609459200


class TestCheckInt64:
    def test_accepts_bounds(self) -> None:
        assert check_int64(INT64_MAX) == INT64_MAX

    def test_rejects_overflow(self) -> None:
        with pytest.raises(TimestampRangeError):
            check_int64(INT64_MAX + 1)
