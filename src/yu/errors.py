"""Errors that terminate a yu invocation."""

from __future__ import annotations

from typing import IO

import click

from yu.output.messages import format_message


class YuError(click.ClickException):
    """Fatal, user-facing failure.

    Each line of the message is printed as ``[yu] <line>`` on stderr and
    the process exits with code 1.
    """

    exit_code = 1

    def show(self, file: IO[str] | None = None) -> None:
        for line in self.format_message().splitlines():
            click.echo(format_message(line), file=file, err=True)


class CommandFailed(YuError):
    """A subprocess exited non-zero and the caller asked to stop."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Command failed: {command}\nExiting...")
        self.command = command
