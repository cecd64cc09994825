"""Named format tokens and their layouts.

Sixteen well-known tokens map to fixed layouts. Anything else is a
:class:`CustomFormat` whose layout is the token text itself, so callers can
pass raw strftime-style layouts through unchanged.

INVARIANT: Resolution never fails. Unknown tokens pass through.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FormatToken(StrEnum):
    """The well-known format names."""

    RFC3339 = "RFC3339"
    RFC3339_NANO = "RFC3339Nano"
    RFC822 = "RFC822"
    RFC822Z = "RFC822Z"
    RFC1123 = "RFC1123"
    RFC1123Z = "RFC1123Z"
    UNIX_DATE = "UnixDate"
    RUBY_DATE = "RubyDate"
    KITCHEN = "Kitchen"
    STAMP = "Stamp"
    STAMP_MILLI = "StampMilli"
    STAMP_MICRO = "StampMicro"
    STAMP_NANO = "StampNano"
    DATE_TIME = "DateTime"
    DATE = "Date"
    TIME = "Time"


@dataclass(frozen=True)
class CustomFormat:
    """A caller-supplied layout that is not one of the named tokens."""

    layout: str

    def __str__(self) -> str:
        return self.layout


Format = FormatToken | CustomFormat

DEFAULT_FORMAT = FormatToken.RFC3339

LAYOUTS: dict[FormatToken, str] = {
    FormatToken.RFC3339: "%Y-%m-%dT%H:%M:%S%#z",
    FormatToken.RFC3339_NANO: "%Y-%m-%dT%H:%M:%S%.f%#z",
    FormatToken.RFC822: "%d %b %y %H:%M %Z",
    FormatToken.RFC822Z: "%d %b %y %H:%M %z",
    FormatToken.RFC1123: "%a, %d %b %Y %H:%M:%S %Z",
    FormatToken.RFC1123Z: "%a, %d %b %Y %H:%M:%S %z",
    FormatToken.UNIX_DATE: "%a %b %e %H:%M:%S %Z %Y",
    FormatToken.RUBY_DATE: "%a %b %d %H:%M:%S %z %Y",
    FormatToken.KITCHEN: "%-I:%M%p",
    FormatToken.STAMP: "%b %e %H:%M:%S",
    FormatToken.STAMP_MILLI: "%b %e %H:%M:%S%.3f",
    FormatToken.STAMP_MICRO: "%b %e %H:%M:%S%.6f",
    FormatToken.STAMP_NANO: "%b %e %H:%M:%S%.9f",
    FormatToken.DATE_TIME: "%Y-%m-%d %H:%M:%S",
    FormatToken.DATE: "%Y-%m-%d",
    FormatToken.TIME: "%H:%M:%S",
}

TIMEZONE_BEARING: frozenset[FormatToken] = frozenset(
    {
        FormatToken.RFC3339,
        FormatToken.RFC3339_NANO,
        FormatToken.RFC822,
        FormatToken.RFC822Z,
        FormatToken.RFC1123,
        FormatToken.RFC1123Z,
    }
)


def parse_format(token: str | Format) -> Format:
    """Classify *token* as a named format or a custom layout.

    An empty token means :data:`DEFAULT_FORMAT`.
    """
    if isinstance(token, (FormatToken, CustomFormat)):
        return token
    if not token:
        return DEFAULT_FORMAT
    try:
        return FormatToken(token)
    except ValueError:
        return CustomFormat(token)


def resolve_layout(token: str | Format) -> str:
    """Return the concrete layout for *token*."""
    fmt = parse_format(token)
    if isinstance(fmt, CustomFormat):
        return fmt.layout
    return LAYOUTS[fmt]


def requires_timezone(token: str | Format) -> bool:
    """Whether text in this format is expected to carry zone information.

    Custom layouts are assumed timezone-naive.
    """
    fmt = parse_format(token)
    return isinstance(fmt, FormatToken) and fmt in TIMEZONE_BEARING


def known_formats() -> list[dict[str, str | bool]]:
    """Describe every named format, in declaration order."""
    return [
        {
            "token": token.value,
            "layout": LAYOUTS[token],
            "requires_timezone": token in TIMEZONE_BEARING,
        }
        for token in FormatToken
    ]
