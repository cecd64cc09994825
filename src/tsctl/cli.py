"""Root CLI group for tsctl with global flags and command registration."""

from __future__ import annotations

import click

from tsctl import __version__
from tsctl.commands import register_commands
from tsctl.commands._context import AppContext
from tsctl.config.settings import TsSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tsctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the converted value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--tz", "timezone", default=None, help="IANA timezone, e.g. Asia/Shanghai.")
@click.option(
    "-f",
    "--format",
    "format_token",
    default=None,
    help="Named format (see 'tsctl formats') or a strftime-style layout.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    timezone: str | None,
    format_token: str | None,
) -> None:
    """tsctl — Unix timestamp conversion utility."""
    ctx.ensure_object(dict)
    settings = TsSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        timezone=timezone,
        format=format_token,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
