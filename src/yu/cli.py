"""Root CLI group for yu with global flags and command registration."""

from __future__ import annotations

import click

from yu import __version__
from yu.commands import register_commands
from yu.commands._base import YuGroup
from yu.commands._context import AppContext
from yu.config.settings import YuSettings


@click.group(cls=YuGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="yu")
@click.option("-V", "--verbose", is_flag=True, help="Verbose output.")
@click.option(
    "--no-rm",
    is_flag=True,
    help="Do not remove containers used for running commands.",
)
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    no_rm: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """yu: a container framework based on docker-compose."""
    settings = YuSettings.from_cli(
        config_path=config_path,
        verbose=True if verbose else None,
        log_json=True if log_json else None,
        remove_containers=False if no_rm else None,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
