"""tsctl - Convert Unix timestamps to and from formatted time strings."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("tsctl")
except PackageNotFoundError:  # running from a source tree
    __version__ = "0.0.0.dev0"

from tsctl.domain.converter import ParseCandidate, TimeConverter, build_candidates
from tsctl.domain.errors import (
    LayoutError,
    TimeConversionError,
    TimeParseError,
    TimestampRangeError,
)
from tsctl.domain.formats import (
    CustomFormat,
    FormatToken,
    requires_timezone,
    resolve_layout,
)
from tsctl.domain.instant import Instant

__all__ = [
    "timestamp_to_string",
    "string_to_timestamp",
    "timestamp_to_string_milli",
    "string_to_timestamp_milli",
    "format_now",
    "current_timestamp",
    "current_timestamp_milli",
    "build_candidates",
    "requires_timezone",
    "resolve_layout",
    "CustomFormat",
    "FormatToken",
    "Instant",
    "ParseCandidate",
    "TimeConverter",
    "LayoutError",
    "TimeConversionError",
    "TimeParseError",
    "TimestampRangeError",
]

_converter = TimeConverter()


def timestamp_to_string(
    timestamp: int, format_token: str = "RFC3339", timezone: str = "UTC"
) -> str:
    """Render a Unix timestamp in seconds.

    Args:
        timestamp: Seconds since the epoch.
        format_token: A named format (``"DateTime"``, ``"RFC3339"``, ...) or a
            strftime-style layout.
        timezone: IANA zone to render in. Unknown names fall back to UTC.

    Raises:
        TimestampRangeError: If the timestamp cannot be rendered.
        LayoutError: If a custom layout is malformed.
    """
    return _converter.timestamp_to_string(timestamp, format_token, timezone)


def string_to_timestamp(
    value: str, format_token: str = "RFC3339", timezone: str = "UTC"
) -> int:
    """Parse a time string into a Unix timestamp in seconds.

    For timezone-bearing formats an offset embedded in *value* wins over
    *timezone*; otherwise the wall-clock fields are read in *timezone*.

    Raises:
        TimeParseError: If no candidate layout matches *value*.
        LayoutError: If a custom layout is malformed.
    """
    return _converter.string_to_timestamp(value, format_token, timezone)


def timestamp_to_string_milli(
    timestamp_ms: int, format_token: str = "RFC3339", timezone: str = "UTC"
) -> str:
    """Render a millisecond timestamp; the sub-second part is dropped."""
    return _converter.timestamp_to_string_milli(timestamp_ms, format_token, timezone)


def string_to_timestamp_milli(
    value: str, format_token: str = "RFC3339", timezone: str = "UTC"
) -> int:
    """Parse a time string into whole seconds, expressed in milliseconds."""
    return _converter.string_to_timestamp_milli(value, format_token, timezone)


def format_now(format_token: str = "RFC3339", timezone: str = "UTC") -> str:
    """Render the current wall-clock time."""
    return _converter.format_now(format_token, timezone)


def current_timestamp() -> int:
    return _converter.current_timestamp()


def current_timestamp_milli() -> int:
    return _converter.current_timestamp_milli()
