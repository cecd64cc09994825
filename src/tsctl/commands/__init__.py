"""Subcommand modules for tsctl.

register_commands() imports lazily so ``tsctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root CLI group."""
    from tsctl.commands.clock import now
    from tsctl.commands.convert import to_string, to_timestamp
    from tsctl.commands.formats import formats

    cli.add_command(to_string)
    cli.add_command(to_timestamp)
    cli.add_command(now)
    cli.add_command(formats)
