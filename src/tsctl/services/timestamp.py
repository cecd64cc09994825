"""TimestampService — conversions wrapped in ServiceResult.

Fills in the configured default format, timezone and unit, and turns
domain exceptions into structured errors so the CLI never sees a traceback
for bad input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from tsctl.domain.converter import TimeConverter, build_candidates
from tsctl.domain.errors import (
    LayoutError,
    TimeConversionError,
    TimeParseError,
    TimestampRangeError,
)
from tsctl.domain.formats import known_formats, requires_timezone, resolve_layout
from tsctl.domain.zones import is_known_timezone
from tsctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from tsctl.config.models import Unit
    from tsctl.config.settings import TsSettings

log = structlog.get_logger(__name__)


def _error_code(exc: TimeConversionError) -> ErrorCode:
    if isinstance(exc, TimeParseError):
        return ErrorCode.PARSE_FAILED
    if isinstance(exc, LayoutError):
        return ErrorCode.INVALID_LAYOUT
    if isinstance(exc, TimestampRangeError):
        return ErrorCode.OUT_OF_RANGE
    return ErrorCode.CONVERSION_FAILED


def _error_detail(exc: TimeConversionError) -> dict[str, object]:
    if isinstance(exc, TimeParseError):
        return {
            "value": exc.value,
            "format": exc.format_token,
            "layout": exc.layout,
            "cause": str(exc.cause),
        }
    if isinstance(exc, LayoutError):
        return {"layout": exc.layout, "reason": exc.reason}
    if isinstance(exc, TimestampRangeError):
        return {"timestamp": exc.value, "reason": exc.reason}
    return {}


class TimestampService:
    """Timestamp conversions for the CLI.

    Args:
        settings: Supplies default format, timezone and unit. Optional so
            the service can be used as a library with built-in defaults.
        converter: Injected for tests; a fresh TimeConverter otherwise.
    """

    def __init__(
        self,
        settings: TsSettings | None = None,
        converter: TimeConverter | None = None,
    ) -> None:
        if settings is None:
            from tsctl.config.settings import TsSettings

            settings = TsSettings()
        self._settings = settings
        self._converter = converter or TimeConverter()

    # ── Helpers ──────────────────────────────────────────────────────

    def _resolve(
        self, format_token: str | None, timezone: str | None
    ) -> tuple[str, str, list[str]]:
        fmt = format_token or self._settings.effective_format
        tz = timezone or self._settings.effective_timezone
        warnings: list[str] = []
        if not is_known_timezone(tz):
            warnings.append(f"Unknown timezone {tz!r}, using UTC")
        return fmt, tz, warnings

    def _unit(self, unit: Unit | None) -> Unit:
        return unit or self._settings.defaults.unit

    def _meta(self, fmt: str) -> dict[str, object]:
        return {"layout": resolve_layout(fmt), "requires_timezone": requires_timezone(fmt)}

    @staticmethod
    def _failure(op: str, exc: TimeConversionError, warnings: list[str]) -> ServiceResult:
        code = _error_code(exc)
        log.info("conversion.failed", op=op, code=code, error=str(exc))
        return ServiceResult.failure(
            op, code, str(exc), detail=_error_detail(exc), warnings=warnings
        )

    # ── Operations ───────────────────────────────────────────────────

    def to_string(
        self,
        timestamp: int,
        *,
        unit: Unit | None = None,
        format_token: str | None = None,
        timezone: str | None = None,
    ) -> ServiceResult:
        """Render *timestamp* (seconds or milliseconds) as text."""
        op = "to_string"
        fmt, tz, warnings = self._resolve(format_token, timezone)
        unit = self._unit(unit)
        try:
            if unit == "ms":
                text = self._converter.timestamp_to_string_milli(timestamp, fmt, tz)
            else:
                text = self._converter.timestamp_to_string(timestamp, fmt, tz)
        except TimeConversionError as exc:
            return self._failure(op, exc, warnings)

        log.debug("conversion.ok", op=op, timestamp=timestamp, unit=unit, format=fmt)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "time": text,
                "timestamp": timestamp,
                "unit": unit,
                "format": fmt,
                "timezone": tz,
            },
            warnings=warnings,
            meta=self._meta(fmt),
        )

    def to_timestamp(
        self,
        value: str,
        *,
        unit: Unit | None = None,
        format_token: str | None = None,
        timezone: str | None = None,
    ) -> ServiceResult:
        """Parse *value* into a timestamp in the requested unit."""
        op = "to_timestamp"
        fmt, tz, warnings = self._resolve(format_token, timezone)
        unit = self._unit(unit)
        try:
            if unit == "ms":
                timestamp = self._converter.string_to_timestamp_milli(value, fmt, tz)
            else:
                timestamp = self._converter.string_to_timestamp(value, fmt, tz)
        except TimeConversionError as exc:
            return self._failure(op, exc, warnings)

        meta = self._meta(fmt)
        meta["candidates"] = [c.layout.source for c in build_candidates(value, fmt)]
        log.debug("conversion.ok", op=op, value=value, unit=unit, format=fmt)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "timestamp": timestamp,
                "unit": unit,
                "time": value,
                "format": fmt,
                "timezone": tz,
            },
            warnings=warnings,
            meta=meta,
        )

    def now(
        self, *, format_token: str | None = None, timezone: str | None = None
    ) -> ServiceResult:
        """The current time, rendered and as second/millisecond timestamps."""
        op = "now"
        fmt, tz, warnings = self._resolve(format_token, timezone)
        try:
            text = self._converter.format_now(fmt, tz)
        except TimeConversionError as exc:
            return self._failure(op, exc, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "time": text,
                "timestamp": self._converter.current_timestamp(),
                "timestamp_ms": self._converter.current_timestamp_milli(),
                "format": fmt,
                "timezone": tz,
            },
            warnings=warnings,
            meta=self._meta(fmt),
        )

    def formats(self) -> ServiceResult:
        """List the named formats with their layouts."""
        items = known_formats()
        return ServiceResult(ok=True, op="formats", data={"formats": items, "count": len(items)})
