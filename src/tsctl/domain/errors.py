"""Exception hierarchy for timestamp conversion.

Every error is a ``ValueError`` so callers that only care about bad input
can catch that. Timezone resolution never raises: unknown zones fall back
to UTC (see :mod:`tsctl.domain.zones`).
"""

from __future__ import annotations


class TimeConversionError(ValueError):
    """Base class for conversion failures."""


class LayoutError(TimeConversionError):
    """Raised when a layout string cannot be compiled."""

    def __init__(self, layout: str, reason: str) -> None:
        super().__init__(f"invalid layout {layout!r}: {reason}")
        self.layout = layout
        self.reason = reason


class LayoutMismatchError(TimeConversionError):
    """Raised when text does not match a single compiled layout."""

    def __init__(self, layout: str, text: str, reason: str) -> None:
        super().__init__(f"parsing {text!r} as {layout!r}: {reason}")
        self.layout = layout
        self.text = text
        self.reason = reason


class TimeParseError(TimeConversionError):
    """Raised when no candidate layout matches the input.

    Carries the offending input, the format token the caller asked for,
    the last layout attempted and the underlying error from that attempt.
    """

    def __init__(
        self,
        value: str,
        format_token: str,
        layout: str,
        cause: Exception,
    ) -> None:
        super().__init__(
            f"failed to parse time {value!r} with format {format_token!r}"
            f" (last layout {layout!r}): {cause}"
        )
        self.value = value
        self.format_token = format_token
        self.layout = layout
        self.cause = cause


class TimestampRangeError(TimeConversionError):
    """Raised when a timestamp cannot be represented."""

    def __init__(self, value: int, reason: str) -> None:
        super().__init__(f"timestamp {value} out of range: {reason}")
        self.value = value
        self.reason = reason
