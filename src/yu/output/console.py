"""Rich Console factory and theme for yu output.

Creates Console instances that render to a StringIO buffer so callers get
plain strings back and route them through ``click.echo``.  In non-TTY
environments (tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

YU_THEME = Theme(
    {
        "yu.prefix": "bold cyan",
        "yu.message": "",
        "yu.command": "dim",
        "yu.ok": "bold green",
        "yu.error": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=YU_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
