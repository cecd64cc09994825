"""Command: list the named formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsctl.commands._base import TsCommand

if TYPE_CHECKING:
    from tsctl.commands._context import AppContext


@click.command(
    cls=TsCommand,
    examples="""\
  tsctl formats
  tsctl --json formats""",
)
@click.pass_obj
def formats(app: AppContext) -> None:
    """List named formats, their layouts, and whether they carry a zone."""
    app.emit(app.service.formats())
