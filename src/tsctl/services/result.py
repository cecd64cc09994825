"""ServiceResult and ServiceError — what services hand back to the CLI.

INVARIANT: Bad user input (unparseable text, a malformed layout, an
unrepresentable timestamp) comes back as ``ok=False`` with an
:class:`ErrorCode`. Programming errors still raise.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure categories."""

    PARSE_FAILED = "PARSE_FAILED"
    INVALID_LAYOUT = "INVALID_LAYOUT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    CONVERSION_FAILED = "CONVERSION_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every TimestampService operation.

    Attributes:
        ok: Whether the conversion succeeded.
        op: Operation name: ``to_string``, ``to_timestamp``, ``now`` or
            ``formats``.
        data: The converted value plus the format, timezone and unit used.
        warnings: Non-fatal issues, such as a timezone that fell back to UTC.
        error: Set when ``ok`` is False.
        meta: The resolved layout and, for parsing, the candidate ladder.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Build an ``ok=False`` result."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
