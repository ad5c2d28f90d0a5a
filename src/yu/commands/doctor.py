"""Command: environment check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(cls=YuCommand, examples="  yu doctor")
@click.pass_obj
def doctor(app: AppContext) -> None:
    """Check your environment is ready to yu."""
    app.doctor.diagnose()
