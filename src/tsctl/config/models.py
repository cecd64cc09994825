"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``tsctl.toml`` only holds overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator

from tsctl.domain.formats import DEFAULT_FORMAT
from tsctl.domain.zones import DEFAULT_TIMEZONE

Unit = Literal["s", "ms"]


class DefaultsConfig(BaseModel):
    """[defaults] section — values used when a command omits them."""

    model_config = {"frozen": True}

    format: str = DEFAULT_FORMAT.value
    timezone: str = DEFAULT_TIMEZONE
    unit: Unit = "s"

    @field_validator("format", "timezone")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = 100


LogLevel = Literal["debug", "info", "warning", "error"]


class LoggingConfig(BaseModel):
    """[logging] section.

    *level* pins the ``tsctl`` logger level; -v and -q still win.
    """

    model_config = {"frozen": True}

    level: LogLevel | None = None
