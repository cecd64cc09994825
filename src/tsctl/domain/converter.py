"""TimeConverter — timestamps to formatted strings and back.

Formatting always renders in the caller's timezone (UTC when the name does
not resolve). Timezone-bearing layouts then embed that zone's offset, so the
output is unambiguous.

Parsing walks an ordered candidate ladder of ``(layout, interpretation)``
pairs and stops at the first match:

- timezone-bearing formats first try the canonical layout and keep whatever
  offset the text carries (the embedded offset wins over the supplied zone);
- a fraction the canonical layout lacks is retried with fixed-width fraction
  variants that keep the zone;
- if the text has no zone, zoneless variants are tried in the supplied zone,
  finest fraction width that fits the sniffed precision first;
- every other format gets a single attempt in the supplied zone.

Whatever the rung, a zone the text does carry (``%z``, ``%Z``) is honoured.
Abbreviations that cannot be resolved are kept at a zero offset.

INVARIANT: No process-wide mutable state. Every call is a pure function of
its arguments, the clock (``*_now``/``current_*`` only) and the zone database.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from enum import StrEnum

from tsctl.domain.errors import LayoutMismatchError, TimeParseError
from tsctl.domain.formats import Format, parse_format, requires_timezone, resolve_layout
from tsctl.domain.instant import Instant, check_int64
from tsctl.domain.layouts import Layout, ParsedFields, compile_layout, sniff_precision
from tsctl.domain.zones import fixed_offset, resolve_abbreviation, resolve_timezone

logger = logging.getLogger(__name__)

FRACTION_WIDTHS = (3, 6, 9)


class Interpretation(StrEnum):
    """How wall-clock fields become an absolute instant."""

    EMBEDDED = "embedded"
    """Use the offset or zone abbreviation carried by the text."""

    LOCATION = "location"
    """Read zoneless fields as wall-clock time in the supplied timezone."""


@dataclass(frozen=True)
class ParseCandidate:
    """One rung of the candidate ladder."""

    layout: Layout
    interpretation: Interpretation

    def resolve(self, text: str, tz: tzinfo) -> Instant:
        """Parse *text* and anchor it in time.

        Raises:
            LayoutMismatchError: If the text does not fit this candidate.
        """
        fields = self.layout.parse(text)
        if fields.has_zone:
            # An offset or abbreviation in the text wins over the supplied zone.
            zone = _embedded_zone(fields, tz)
        elif self.interpretation is Interpretation.EMBEDDED:
            reason = "text carries no zone information"
            raise LayoutMismatchError(self.layout.source, text, reason)
        else:
            zone = tz
        # fold=0: ambiguous or skipped wall times take the earlier offset.
        moment = fields.wall().replace(tzinfo=zone)
        return Instant.from_datetime(moment, nanosecond=fields.nanosecond)


def _embedded_zone(fields: ParsedFields, tz: tzinfo) -> tzinfo:
    if fields.offset is not None:
        return fixed_offset(fields.offset)
    assert fields.abbreviation is not None
    zone = resolve_abbreviation(fields.abbreviation, fields.wall(), tz)
    if zone is None:
        # Unknown abbreviations are kept by name at a zero offset.
        logger.debug("Unknown zone abbreviation %r, using offset 0", fields.abbreviation)
        return fixed_offset(0, fields.abbreviation)
    return zone


def fraction_order(precision: int) -> tuple[int, ...]:
    """Fraction widths to try for input with *precision* fractional digits.

    Widths that can hold the digits come first (narrowest first), then the
    coarser widths, widest first.
    """
    if precision <= 0:
        return ()
    fitting = tuple(w for w in FRACTION_WIDTHS if w >= precision)
    coarser = tuple(w for w in reversed(FRACTION_WIDTHS) if w < precision)
    return fitting + coarser


def build_candidates(text: str, format_token: str | Format) -> tuple[ParseCandidate, ...]:
    """The ordered candidate ladder for parsing *text* as *format_token*."""
    layout = compile_layout(resolve_layout(format_token))
    if not requires_timezone(format_token):
        return (ParseCandidate(layout, Interpretation.LOCATION),)

    widths = fraction_order(sniff_precision(text)) if layout.has_seconds else ()
    candidates = [ParseCandidate(layout, Interpretation.EMBEDDED)]
    if not layout.has_fraction:
        # A fraction after the seconds field is accepted even when the layout
        # has none, as long as the zone is still there.
        candidates += [
            ParseCandidate(layout.with_fraction(w), Interpretation.EMBEDDED) for w in widths
        ]
    base = layout.zoneless().without_fraction()
    candidates += [ParseCandidate(base.with_fraction(w), Interpretation.LOCATION) for w in widths]
    candidates.append(ParseCandidate(base, Interpretation.LOCATION))
    return tuple(candidates)


class TimeConverter:
    """Bidirectional conversion between integer timestamps and strings.

    Stateless; one instance can be shared freely.
    """

    def format_instant(self, instant: Instant, format_token: str | Format, timezone: str) -> str:
        """Render *instant* in *format_token* as seen from *timezone*."""
        layout = compile_layout(resolve_layout(format_token))
        return layout.render(instant, resolve_timezone(timezone))

    def parse_instant(self, value: str, format_token: str | Format, timezone: str) -> Instant:
        """Parse *value* into an :class:`Instant`.

        Raises:
            TimeParseError: If no candidate layout matches. Carries the
                last candidate's layout and error.
        """
        tz = resolve_timezone(timezone)
        fmt = parse_format(format_token)
        candidates = build_candidates(value, fmt)
        last_error: LayoutMismatchError | None = None
        for candidate in candidates:
            try:
                return candidate.resolve(value, tz)
            except LayoutMismatchError as exc:
                logger.debug(
                    "Candidate %r (%s) rejected %r: %s",
                    candidate.layout.source,
                    candidate.interpretation,
                    value,
                    exc.reason,
                )
                last_error = exc
        assert last_error is not None
        raise TimeParseError(value, str(fmt), candidates[-1].layout.source, last_error)

    # ── Seconds ──────────────────────────────────────────────────────

    def timestamp_to_string(self, timestamp: int, format_token: str, timezone: str) -> str:
        instant = Instant(check_int64(timestamp))
        return self.format_instant(instant, format_token, timezone)

    def string_to_timestamp(self, value: str, format_token: str, timezone: str) -> int:
        return check_int64(self.parse_instant(value, format_token, timezone).epoch_seconds)

    # ── Milliseconds ─────────────────────────────────────────────────

    def timestamp_to_string_milli(
        self, timestamp_ms: int, format_token: str, timezone: str
    ) -> str:
        """Render a millisecond timestamp at whole-second precision.

        The sub-second part is dropped (floor division), so this is lossy:
        ``1609459200999`` renders the same as ``1609459200000``.
        """
        check_int64(timestamp_ms)
        return self.timestamp_to_string(timestamp_ms // 1000, format_token, timezone)

    def string_to_timestamp_milli(self, value: str, format_token: str, timezone: str) -> int:
        """Parse at whole-second precision and scale to milliseconds."""
        return check_int64(self.string_to_timestamp(value, format_token, timezone) * 1000)

    # ── Clock ────────────────────────────────────────────────────────

    def format_now(self, format_token: str, timezone: str) -> str:
        return self.format_instant(Instant.now(), format_token, timezone)

    def current_timestamp(self) -> int:
        return Instant.now().epoch_seconds

    def current_timestamp_milli(self) -> int:
        return Instant.now().epoch_millis
