"""Commands: timestamp to string and string to timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsctl.commands._base import TsCommand, resolve_unit, unit_options

if TYPE_CHECKING:
    from tsctl.commands._context import AppContext


@click.command(
    "to-string",
    cls=TsCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  tsctl to-string 1609459200
  tsctl -f Date to-string -86400
  tsctl --tz Asia/Shanghai -f DateTime to-string 1609459200
  tsctl -f RFC3339Nano to-string --ms 1609459200123
  tsctl --json -f "%d/%m/%Y" to-string 1609459200""",
)
@click.argument("timestamp", type=int)
@unit_options
@click.pass_obj
def to_string(app: AppContext, timestamp: int, unit: str | None, millis: bool) -> None:
    """Render a Unix TIMESTAMP as text.

    Millisecond timestamps are rendered at whole-second precision.
    """
    app.emit(
        app.service.to_string(
            timestamp,
            unit=resolve_unit(unit, millis),  # type: ignore[arg-type]
            format_token=app.settings.format,
            timezone=app.settings.timezone,
        )
    )


@click.command(
    "to-timestamp",
    cls=TsCommand,
    examples="""\
  tsctl to-timestamp 2021-01-01T00:00:00Z
  tsctl --tz Asia/Shanghai -f DateTime to-timestamp "2021-06-15 12:00:00"
  tsctl -f RFC3339Nano to-timestamp --ms 2021-01-01T00:00:00.123456789
  tsctl -q -f Date to-timestamp 2021-01-01""",
)
@click.argument("value")
@unit_options
@click.pass_obj
def to_timestamp(app: AppContext, value: str, unit: str | None, millis: bool) -> None:
    """Parse time text VALUE into a Unix timestamp.

    For zone-carrying formats (RFC3339, RFC1123, ...) an offset in VALUE
    wins over --tz; without one, VALUE is read as wall-clock time in --tz.
    """
    app.emit(
        app.service.to_timestamp(
            value,
            unit=resolve_unit(unit, millis),  # type: ignore[arg-type]
            format_token=app.settings.format,
            timezone=app.settings.timezone,
        )
    )
