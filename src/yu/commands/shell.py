"""Command: interactive shell in a new container."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    cls=YuCommand,
    examples="""\
  yu shell users
  yu shell --test users""",
)
@click.option("--test", "test_env", is_flag=True, help="Start the shell with APP_ENV=test.")
@click.argument("services", nargs=-1)
@click.pass_obj
def shell(app: AppContext, test_env: bool, services: tuple[str, ...]) -> None:
    """Start a shell container for a service."""
    app.stack.shell(services, test_env=test_env)
