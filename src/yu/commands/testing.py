"""Command: run service test suites (module named to stay out of pytest's way)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    "test",
    cls=YuCommand,
    examples="""\
  yu test
  yu test users orders
  yu test ./services/users
  yu --no-rm test users""",
)
@click.argument("services", nargs=-1)
@click.pass_obj
def test(app: AppContext, services: tuple[str, ...]) -> None:
    """Run tests for service(s).

    Without arguments, every service with a test entrypoint (bin/test) is
    tested.  All services run; the command fails if any of them failed.
    """
    app.stack.test(services)
