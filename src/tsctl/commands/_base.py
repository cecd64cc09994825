"""Shared Click pieces: the ``--examples`` command class and unit options."""

from __future__ import annotations

from typing import Any

import click

UNITS = ("s", "ms")


class TsCommand(click.Command):
    """Click Command whose ``examples`` text is shown by ``--examples``.

    ``--help`` stays short; ``--examples`` prints worked invocations and
    exits before required arguments are checked.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


def unit_options(func: Any) -> Any:
    """Add ``--unit s|ms`` and its ``--ms`` shorthand to a command."""
    func = click.option("--ms", "millis", is_flag=True, help="Shorthand for --unit ms.")(func)
    return click.option(
        "--unit",
        type=click.Choice(UNITS),
        default=None,
        help="Timestamp unit (default from [defaults] unit).",
    )(func)


def resolve_unit(unit: str | None, millis: bool) -> str | None:
    """``--ms`` wins over ``--unit``; None defers to the configured default."""
    return "ms" if millis else unit
