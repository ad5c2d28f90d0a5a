"""Command: one-off command in a new container (named run_cmd to avoid shadowing)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yu.commands._base import YuCommand

if TYPE_CHECKING:
    from yu.commands._context import AppContext


@click.command(
    "run",
    cls=YuCommand,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    examples="""\
  yu run users rake db:migrate
  yu run --test users rspec spec/models --fail-fast""",
)
@click.option("--test", "test_env", is_flag=True, help="Run with APP_ENV=test.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def run_cmd(app: AppContext, test_env: bool, args: tuple[str, ...]) -> None:
    """Create a temp container to run a command.

    Everything after the options is passed to docker-compose run, starting
    with the service name.
    """
    app.stack.run(args, test_env=test_env)
