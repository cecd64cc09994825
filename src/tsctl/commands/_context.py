"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the service instance and result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tsctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tsctl.config.settings import TsSettings
    from tsctl.services.result import ServiceResult
    from tsctl.services.timestamp import TimestampService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TsSettings) -> None:
        self.settings = settings
        self._service: TimestampService | None = None

        from tsctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
            level=settings.logging.level,
        )

    @property
    def service(self) -> TimestampService:
        """The timestamp service (created on first access)."""
        if self._service is None:
            from tsctl.services.timestamp import TimestampService

            self._service = TimestampService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output (JSON mode already carries them).
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=self.settings.output.color,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
