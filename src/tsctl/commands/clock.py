"""Command: the current time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsctl.commands._base import TsCommand

if TYPE_CHECKING:
    from tsctl.commands._context import AppContext


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl now
  tsctl --tz Europe/Paris -f RFC1123 now
  tsctl -q -f DateTime now""",
)
@click.pass_obj
def now(app: AppContext) -> None:
    """Show the current time with second and millisecond timestamps."""
    app.emit(app.service.now(format_token=app.settings.format, timezone=app.settings.timezone))
