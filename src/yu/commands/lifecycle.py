"""Commands: start, restart and recreate service containers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    cls=YuCommand,
    examples="""\
  yu start
  yu start users orders""",
)
@click.argument("services", nargs=-1)
@click.pass_obj
def start(app: AppContext, services: tuple[str, ...]) -> None:
    """Start containers for service(s)."""
    app.stack.start(services)


@click.command(cls=YuCommand, examples="  yu restart users")
@click.argument("services", nargs=-1)
@click.pass_obj
def restart(app: AppContext, services: tuple[str, ...]) -> None:
    """Restart containers for service(s)."""
    app.stack.restart(services)


@click.command(cls=YuCommand, examples="  yu recreate users")
@click.argument("services", nargs=-1)
@click.pass_obj
def recreate(app: AppContext, services: tuple[str, ...]) -> None:
    """Recreate containers for service(s).

    Kills and removes the containers, runs ./seed if present, and brings
    fresh containers up.
    """
    app.stack.recreate(services)
