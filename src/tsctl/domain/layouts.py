"""Layout engine — strftime-style patterns compiled for both directions.

``datetime.strftime``/``strptime`` top out at microseconds and cannot emit
an RFC 3339 ``Z``, so layouts are compiled here into a token list that can
render an :class:`Instant` and a regex that parses text back into fields.

Directives beyond the usual strftime set:

- ``%e``: day of month, space padded (``Jan  2``)
- ``%-d`` and friends: unpadded numeric fields
- ``%.3f`` / ``%.6f`` / ``%.9f``: a dot plus a fixed-width fraction
- ``%.f``: a dot plus a trimmed fraction, omitted when zero
- ``%:z``: ``+HH:MM``; ``%#z``: ``Z`` for UTC, otherwise ``+HH:MM``

Fields a layout does not capture default to 1900-01-01 00:00:00, so
``Time``, ``Kitchen`` and the ``Stamp`` family parse to a day in 1900.
``datetime`` cannot hold year 0, so results for yearless text differ from
libraries that anchor at year 0 (Go's ``time`` package, for one).
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from tsctl.domain.errors import LayoutError, LayoutMismatchError
from tsctl.domain.instant import Instant

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DEFAULT_YEAR = 1900

_DIRECTIVE = re.compile(r"%(?:(-)([mdHIMS])|([YymdHIMSeBbAapfZz%])|(:z|#z|\.[369]?f))")

ZONE_CODES = frozenset({"z", ":z", "#z", "Z"})
FRACTION_CODES = frozenset({"f", ".f", ".3f", ".6f", ".9f"})

_OFFSET_PATTERN = r"[Zz]|[+-]\d{2}:?\d{2}"


def _names_pattern(names: tuple[str, ...]) -> str:
    return "(?i:" + "|".join(re.escape(n) for n in names) + ")"


_PATTERNS: dict[str, str] = {
    "Y": r"\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "d": r"\d{2}",
    "H": r"\d{2}",
    "I": r"\d{2}",
    "M": r"\d{2}",
    "S": r"\d{2}",
    "e": r" ?\d{1,2}",
    "B": _names_pattern(MONTHS),
    "b": _names_pattern(tuple(m[:3] for m in MONTHS)),
    "A": _names_pattern(WEEKDAYS),
    "a": _names_pattern(tuple(w[:3] for w in WEEKDAYS)),
    "p": r"(?i:AM|PM)",
    "f": r"\d{1,6}",
    ".f": r"(?:\.\d{1,9})?",
    ".3f": r"\.\d{1,3}",
    ".6f": r"\.\d{1,6}",
    ".9f": r"\.\d{1,9}",
    "z": _OFFSET_PATTERN,
    ":z": _OFFSET_PATTERN,
    "#z": _OFFSET_PATTERN,
    "Z": r"[A-Za-z]{1,5}|[+-]\d{2}(?:\d{2})?",
}


@dataclass(frozen=True)
class Directive:
    """One ``%`` directive inside a layout."""

    code: str
    unpadded: bool = False

    def __str__(self) -> str:
        return "%" + ("-" if self.unpadded else "") + self.code


Token = str | Directive


@dataclass
class ParsedFields:
    """Raw components captured from text by :meth:`Layout.parse`."""

    year: int = DEFAULT_YEAR
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    hour12: int | None = None
    pm: bool | None = None
    offset: int | None = None
    abbreviation: str | None = None

    @property
    def has_zone(self) -> bool:
        return self.offset is not None or self.abbreviation is not None

    def wall(self) -> datetime:
        """The naive wall-clock datetime described by the fields.

        Raises:
            ValueError: If a field is out of range (e.g. February 30).
        """
        hour = self.hour
        if self.hour12 is not None:
            if not 1 <= self.hour12 <= 12:
                msg = f"hour {self.hour12} out of range for a 12-hour clock"
                raise ValueError(msg)
            hour = self.hour12 % 12 + (12 if self.pm else 0)
        return datetime(self.year, self.month, self.day, hour, self.minute, self.second)


def tokenize(layout: str) -> tuple[Token, ...]:
    """Split *layout* into literal strings and directives.

    Raises:
        LayoutError: On a dangling ``%`` or an unknown directive.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    pos = 0
    while pos < len(layout):
        ch = layout[pos]
        if ch != "%":
            literal.append(ch)
            pos += 1
            continue
        m = _DIRECTIVE.match(layout, pos)
        if m is None:
            snippet = layout[pos : pos + 3]
            raise LayoutError(layout, f"unknown directive {snippet!r} at offset {pos}")
        pos = m.end()
        if m.group(3) == "%":
            literal.append("%")
            continue
        if literal:
            tokens.append("".join(literal))
            literal = []
        if m.group(2):
            tokens.append(Directive(m.group(2), unpadded=True))
        else:
            tokens.append(Directive(m.group(3) or m.group(4)))
    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


def _source(tokens: tuple[Token, ...]) -> str:
    return "".join(t.replace("%", "%%") if isinstance(t, str) else str(t) for t in tokens)


def _format_offset(seconds: int, *, colon: bool, utc_as_z: bool) -> str:
    if utc_as_z and seconds == 0:
        return "Z"
    sign = "-" if seconds < 0 else "+"
    hours, minutes = divmod(abs(seconds) // 60, 60)
    sep = ":" if colon else ""
    return f"{sign}{hours:02d}{sep}{minutes:02d}"


def _parse_offset(text: str) -> int:
    if text in ("Z", "z"):
        return 0
    digits = text[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        msg = f"offset {text!r} out of range"
        raise ValueError(msg)
    seconds = hours * 3600 + minutes * 60
    return -seconds if text[0] == "-" else seconds


def _fraction_nanos(digits: str) -> int:
    return int(digits.ljust(9, "0"))


def _render_directive(d: Directive, moment: datetime, nanosecond: int) -> str:
    code = d.code
    if code in ("m", "d", "H", "M", "S"):
        value = {
            "m": moment.month,
            "d": moment.day,
            "H": moment.hour,
            "M": moment.minute,
            "S": moment.second,
        }[code]
        return str(value) if d.unpadded else f"{value:02d}"
    if code == "I":
        hour12 = moment.hour % 12 or 12
        return str(hour12) if d.unpadded else f"{hour12:02d}"
    if code == "Y":
        return f"{moment.year:04d}"
    if code == "y":
        return f"{moment.year % 100:02d}"
    if code == "e":
        return f"{moment.day:2d}"
    if code == "B":
        return MONTHS[moment.month - 1]
    if code == "b":
        return MONTHS[moment.month - 1][:3]
    if code == "A":
        return WEEKDAYS[moment.weekday()]
    if code == "a":
        return WEEKDAYS[moment.weekday()][:3]
    if code == "p":
        return "AM" if moment.hour < 12 else "PM"
    if code == "f":
        return f"{nanosecond // 1000:06d}"
    if code == ".f":
        if nanosecond == 0:
            return ""
        return "." + f"{nanosecond:09d}".rstrip("0")
    if code in (".3f", ".6f", ".9f"):
        return "." + f"{nanosecond:09d}"[: int(code[1])]
    if code == "Z":
        return moment.tzname() or _format_offset(_utcoffset(moment), colon=False, utc_as_z=False)
    # Remaining codes are the numeric offsets.
    return _format_offset(
        _utcoffset(moment),
        colon=code != "z",
        utc_as_z=code == "#z",
    )


def _utcoffset(moment: datetime) -> int:
    offset = moment.utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


@dataclass(frozen=True)
class Layout:
    """A compiled layout string."""

    source: str
    tokens: tuple[Token, ...]
    _regex: re.Pattern[str] = field(compare=False, repr=False)
    _groups: tuple[Directive, ...] = field(compare=False, repr=False)

    @classmethod
    def from_tokens(cls, tokens: tuple[Token, ...], source: str | None = None) -> Layout:
        parts: list[str] = []
        groups: list[Directive] = []
        for token in tokens:
            if isinstance(token, str):
                parts.append(re.escape(token))
                continue
            pattern = _PATTERNS[token.code]
            if token.unpadded:
                pattern = r"\d{1,2}"
            parts.append(f"(?P<g{len(groups)}>{pattern})")
            groups.append(token)
        return cls(
            source=source if source is not None else _source(tokens),
            tokens=tokens,
            _regex=re.compile("".join(parts)),
            _groups=tuple(groups),
        )

    def __str__(self) -> str:
        return self.source

    @property
    def directives(self) -> tuple[Directive, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Directive))

    @property
    def has_zone(self) -> bool:
        return any(d.code in ZONE_CODES for d in self.directives)

    @property
    def has_seconds(self) -> bool:
        return any(d.code == "S" for d in self.directives)

    @property
    def has_fraction(self) -> bool:
        return any(d.code in FRACTION_CODES for d in self.directives)

    # ── Derived layouts ──────────────────────────────────────────────

    def zoneless(self) -> Layout:
        """This layout with zone directives and their leading separator removed."""
        kept: list[Token] = []
        for token in self.tokens:
            if isinstance(token, Directive) and token.code in ZONE_CODES:
                if kept and isinstance(kept[-1], str):
                    stripped = kept[-1].rstrip()
                    if stripped:
                        kept[-1] = stripped
                    else:
                        kept.pop()
                continue
            if isinstance(token, str) and kept and isinstance(kept[-1], str):
                kept[-1] += token
                continue
            kept.append(token)
        return Layout.from_tokens(tuple(kept))

    def without_fraction(self) -> Layout:
        tokens = tuple(
            t for t in self.tokens if not (isinstance(t, Directive) and t.code in FRACTION_CODES)
        )
        return Layout.from_tokens(_merge_literals(tokens))

    def with_fraction(self, digits: int) -> Layout:
        """Use a fixed *digits*-wide fraction right after the seconds field.

        Returns the layout unchanged when it has no seconds field.
        """
        if digits not in (3, 6, 9):
            msg = f"fraction width must be 3, 6 or 9, got {digits}"
            raise ValueError(msg)
        if not self.has_seconds:
            return self
        fraction = Directive(f".{digits}f")
        base = self.without_fraction()
        tokens: list[Token] = []
        inserted = False
        for token in base.tokens:
            tokens.append(token)
            if not inserted and isinstance(token, Directive) and token.code == "S":
                tokens.append(fraction)
                inserted = True
        return Layout.from_tokens(tuple(tokens))

    # ── Render / parse ───────────────────────────────────────────────

    def render(self, instant: Instant, tz: tzinfo) -> str:
        """Render *instant* as seen from *tz*."""
        moment = instant.to_datetime(tz)
        out: list[str] = []
        for token in self.tokens:
            if isinstance(token, str):
                out.append(token)
            else:
                out.append(_render_directive(token, moment, instant.nanosecond))
        return "".join(out)

    def parse(self, text: str) -> ParsedFields:
        """Match *text* against the whole layout and collect its fields.

        Raises:
            LayoutMismatchError: If the text does not match or a captured
                value is out of range.
        """
        m = self._regex.fullmatch(text)
        if m is None:
            raise LayoutMismatchError(self.source, text, "text does not match layout")
        fields = ParsedFields()
        try:
            for index, directive in enumerate(self._groups):
                raw = m.group(f"g{index}")
                _apply(fields, directive, raw)
            # Range-check now so a bad day/month surfaces as a mismatch.
            fields.wall()
        except ValueError as exc:
            raise LayoutMismatchError(self.source, text, str(exc)) from exc
        return fields


def _merge_literals(tokens: tuple[Token, ...]) -> tuple[Token, ...]:
    merged: list[Token] = []
    for token in tokens:
        if isinstance(token, str) and merged and isinstance(merged[-1], str):
            merged[-1] += token
        else:
            merged.append(token)
    return tuple(merged)


def _apply(fields: ParsedFields, directive: Directive, raw: str) -> None:
    code = directive.code
    if code == "Y":
        fields.year = int(raw)
    elif code == "y":
        two = int(raw)
        fields.year = two + (1900 if two >= 69 else 2000)
    elif code == "m":
        fields.month = int(raw)
    elif code in ("d", "e"):
        fields.day = int(raw)
    elif code == "H":
        fields.hour = int(raw)
    elif code == "I":
        fields.hour12 = int(raw)
    elif code == "M":
        fields.minute = int(raw)
    elif code == "S":
        fields.second = int(raw)
    elif code == "B":
        fields.month = [m.lower() for m in MONTHS].index(raw.lower()) + 1
    elif code == "b":
        fields.month = [m[:3].lower() for m in MONTHS].index(raw.lower()) + 1
    elif code == "p":
        fields.pm = raw.upper() == "PM"
    elif code == "f":
        fields.nanosecond = _fraction_nanos(raw)
    elif code in FRACTION_CODES:
        if raw:
            fields.nanosecond = _fraction_nanos(raw[1:])
    elif code in ("z", ":z", "#z"):
        fields.offset = _parse_offset(raw)
    elif code == "Z":
        fields.abbreviation = raw
    # %a / %A are matched but not checked against the date.


@functools.lru_cache(maxsize=256)
def compile_layout(layout: str) -> Layout:
    """Compile *layout*; results are cached per layout string."""
    return Layout.from_tokens(tokenize(layout), source=layout)


_PRECISION = re.compile(r":\d{2}\.(\d+)")


def sniff_precision(text: str) -> int:
    """Count the fractional-second digits following the seconds field.

    Returns 0 when the text carries no fraction.
    """
    m = _PRECISION.search(text)
    return len(m.group(1)) if m else 0
