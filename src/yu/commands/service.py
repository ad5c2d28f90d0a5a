"""Command: generate new services from the template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    cls=YuCommand,
    examples="""\
  yu service payments
  yu service payments invoices""",
)
@click.argument("names", nargs=-1)
@click.pass_obj
def service(app: AppContext, names: tuple[str, ...]) -> None:
    """Create service from template."""
    app.scaffold.generate(names)
