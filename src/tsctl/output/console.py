"""Rich Console factory and theme for tsctl output.

Consoles render into a StringIO buffer so formatters keep returning plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TS_THEME = Theme(
    {
        "ts.ok": "bold green",
        "ts.error": "bold red",
        "ts.warning": "bold yellow",
        "ts.op": "bold cyan",
        "ts.key": "dim",
        "ts.value": "bold",
        "ts.layout": "magenta",
        "ts.zone": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=TS_THEME,
        no_color=no_color,
        highlight=False,
        emoji=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_to_string(*renderables: object, no_color: bool = False, width: int | None = None) -> str:
    """Print *renderables* to a fresh console and return the text.

    Strings are treated as Rich markup; the trailing newline is dropped.
    """
    console = create_console(no_color=no_color, width=width)
    for renderable in renderables:
        console.print(renderable, soft_wrap=isinstance(renderable, str))
    return get_output(console).rstrip("\n")
