"""User-facing progress messages.

Everything yu says to the user goes through here, prefixed with ``[yu]``.
Diagnostics for developers go through logging instead.
"""

from __future__ import annotations

import click
from rich.text import Text

from yu.output.console import create_console, get_output

PREFIX = "[yu]"


def format_message(message: str, *, style: str = "yu.message") -> str:
    """Render ``[yu] <message>`` without interpreting Rich markup in *message*."""
    console = create_console()
    console.print(Text.assemble((PREFIX, "yu.prefix"), " ", (message, style)), end="")
    return get_output(console)


def info(message: str) -> None:
    """Print a progress message to stdout."""
    click.echo(format_message(message))


def announce_command(command: str) -> None:
    """Print the command about to run (verbose mode)."""
    click.echo(format_message(f"Executing: {command}", style="yu.command"))
