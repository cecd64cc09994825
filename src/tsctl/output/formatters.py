"""Human/JSON output for ServiceResult.

JSON mode dumps the whole result. Human mode prints ``OK: <op>`` followed by
key/value lines (a table for the format list); quiet mode prints only the
primary value so the output can be piped.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from tsctl.output.console import render_to_string

if TYPE_CHECKING:
    from tsctl.services.result import ServiceResult

# The value quiet mode prints for each operation.
_PRIMARY_KEYS: dict[str, str] = {
    "to_string": "time",
    "to_timestamp": "timestamp",
    "now": "time",
}


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be rendered."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    color: bool = True
    width: int | None = None


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _render_formats(result: ServiceResult, settings: OutputSettings) -> str:
    table = Table(title="Named formats", header_style="ts.op")
    table.add_column("Token")
    table.add_column("Layout", style="ts.layout")
    table.add_column("Zone", justify="center", style="ts.zone")
    for item in result.data.get("formats", []):
        table.add_row(
            item["token"],
            escape(item["layout"]),
            "yes" if item["requires_timezone"] else "",
        )
    return render_to_string(table, no_color=not settings.color, width=settings.width)


def _render_human(result: ServiceResult, settings: OutputSettings) -> str:
    if result.op == "formats":
        return _render_formats(result, settings)
    lines = [f"[ts.ok]OK[/]: [ts.op]{result.op}[/]"]
    lines += [
        f"  [ts.key]{key}[/]: [ts.value]{escape(_format_value(value))}[/]"
        for key, value in result.data.items()
    ]
    if settings.verbose and result.meta:
        lines += [
            f"  [ts.key]{key}[/]: {escape(_format_value(value))}"
            for key, value in result.meta.items()
        ]
    return render_to_string(*lines, no_color=not settings.color, width=settings.width)


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When omitted, *json_output* alone decides.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {message}"
    if settings.quiet:
        key = _PRIMARY_KEYS.get(result.op)
        if key is not None and key in result.data:
            return str(result.data[key])
    return _render_human(result, settings)
