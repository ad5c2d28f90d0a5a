"""Command: package dependencies and build images."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    cls=YuCommand,
    examples="""\
  yu build
  yu build users
  yu -V build users orders""",
)
@click.argument("services", nargs=-1)
@click.pass_obj
def build(app: AppContext, services: tuple[str, ...]) -> None:
    """Build image for service(s)."""
    app.stack.build(services)
