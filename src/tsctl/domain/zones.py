"""Timezone lookup with silent UTC fallback, and zone-abbreviation resolution.

The IANA database is read through :mod:`zoneinfo`, whose per-key cache is
process-wide and safe for concurrent reads.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"

_UTC_ABBREVIATIONS = frozenset({"UTC", "GMT", "UT", "Z"})

# North American zones named by RFC 822 section 5.1.
RFC822_ZONES: dict[str, int] = {
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

_NUMERIC_ABBREVIATION = re.compile(r"^([+-])(\d{2})(\d{2})?$")


def resolve_timezone(name: str | None) -> tzinfo:
    """Look up an IANA zone by name, falling back to UTC on any failure."""
    if not name:
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.debug("Unknown timezone %r, using UTC", name)
        return UTC


def is_known_timezone(name: str | None) -> bool:
    """Whether *name* resolves without falling back to UTC."""
    if not name:
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def fixed_offset(seconds: int, name: str | None = None) -> tzinfo:
    """A constant-offset tzinfo; zero maps to UTC."""
    if seconds == 0 and name is None:
        return UTC
    if name is None:
        return timezone(timedelta(seconds=seconds))
    return timezone(timedelta(seconds=seconds), name)


def resolve_abbreviation(abbreviation: str, wall: datetime, tz: tzinfo) -> tzinfo | None:
    """Map a zone abbreviation found in parsed text to a tzinfo.

    Order: UTC aliases, the caller's own zone when its abbreviation at
    *wall* matches, numeric abbreviations such as ``+08``, then the RFC 822
    North American zones. Returns None when nothing matches.
    """
    if abbreviation.upper() in _UTC_ABBREVIATIONS:
        return UTC
    if wall.replace(tzinfo=tz).tzname() == abbreviation:
        return tz
    m = _NUMERIC_ABBREVIATION.match(abbreviation)
    if m:
        sign = -1 if m.group(1) == "-" else 1
        minutes = int(m.group(2)) * 60 + int(m.group(3) or 0)
        return fixed_offset(sign * minutes * 60, abbreviation)
    hours = RFC822_ZONES.get(abbreviation.upper())
    if hours is not None:
        return fixed_offset(hours * 3600, abbreviation.upper())
    return None
