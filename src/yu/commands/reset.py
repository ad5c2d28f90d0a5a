"""Command: rebuild everything and restart the stack."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    cls=YuCommand,
    examples="""\
  yu reset
  yu reset --without-cache""",
)
@click.option("--without-cache", is_flag=True, help="Build images with --no-cache.")
@click.pass_obj
def reset(app: AppContext, without_cache: bool) -> None:
    """Fresh build of images for all services and restart."""
    app.stack.reset(without_cache=without_cache)
