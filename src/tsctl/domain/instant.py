"""Instant — an absolute point in time with nanosecond precision.

``datetime`` stops at microseconds, so the sub-second part is carried
separately as an integer nanosecond count.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

from tsctl.domain.errors import TimestampRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_ONE_SECOND = timedelta(seconds=1)
_NANOS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, order=True)
class Instant:
    """Seconds since the Unix epoch plus a nanosecond remainder.

    INVARIANT: ``0 <= nanosecond < 1_000_000_000``. Negative instants
    carry a non-negative remainder, so ``epoch_seconds`` is the floor.
    """

    epoch_seconds: int
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanosecond < _NANOS_PER_SECOND:
            msg = f"nanosecond must be in [0, 1e9), got {self.nanosecond}"
            raise ValueError(msg)

    @classmethod
    def from_datetime(cls, value: datetime, nanosecond: int | None = None) -> Instant:
        """Build from an aware datetime.

        *nanosecond* overrides the datetime's microsecond field when given.
        """
        if value.tzinfo is None:
            msg = "naive datetime has no absolute position in time"
            raise ValueError(msg)
        whole = value.replace(microsecond=0)
        seconds = (whole - EPOCH) // _ONE_SECOND
        if nanosecond is None:
            nanosecond = value.microsecond * 1000
        return cls(seconds, nanosecond)

    @classmethod
    def from_nanos(cls, nanos: int) -> Instant:
        seconds, remainder = divmod(nanos, _NANOS_PER_SECOND)
        return cls(seconds, remainder)

    @classmethod
    def now(cls) -> Instant:
        return cls.from_nanos(time.time_ns())

    @property
    def epoch_millis(self) -> int:
        return self.epoch_seconds * 1000 + self.nanosecond // 1_000_000

    def to_datetime(self, tz: tzinfo) -> datetime:
        """The wall-clock datetime in *tz*, truncated to microseconds.

        Raises:
            TimestampRangeError: If the instant falls outside years 1-9999.
        """
        try:
            utc = EPOCH + timedelta(
                seconds=self.epoch_seconds, microseconds=self.nanosecond // 1000
            )
            return utc.astimezone(tz)
        except (OverflowError, ValueError) as exc:
            raise TimestampRangeError(self.epoch_seconds, str(exc)) from exc


def check_int64(value: int) -> int:
    """Reject values that do not fit a signed 64-bit timestamp."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise TimestampRangeError(value, "does not fit in a signed 64-bit integer")
    return value
