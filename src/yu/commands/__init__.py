"""Subcommand modules for yu.

Provides register_commands(), the static name-to-command table for the
root group.  Imports are deferred so ``yu --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the root CLI group."""
    from yu.commands.build import build
    from yu.commands.doctor import doctor
    from yu.commands.lifecycle import recreate, restart, start
    from yu.commands.reset import reset
    from yu.commands.run_cmd import run_cmd
    from yu.commands.service import service
    from yu.commands.shell import shell
    from yu.commands.testing import test

    cli.add_command(test)
    cli.add_command(build)
    cli.add_command(shell)
    cli.add_command(reset)
    cli.add_command(doctor)
    cli.add_command(restart)
    cli.add_command(start)
    cli.add_command(recreate)
    cli.add_command(service)
    cli.add_command(run_cmd)
