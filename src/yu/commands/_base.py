"""Custom Click base classes with --examples support.

Provides YuCommand and YuGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
YuGroup also turns an unknown subcommand into the help listing and exit 1.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class YuCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class YuGroup(click.Group):
    """Click Group subclass for the root ``yu`` command.

    Sets ``command_class = YuCommand`` so all subcommands accept the
    ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = YuCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Print the help listing and exit 1 for an unknown subcommand."""
        cmd_name = click.utils.make_str(args[0])
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            click.echo(ctx.get_help(), err=True)
            click.echo(f"\nUnknown command '{cmd_name}'.", err=True)
            ctx.exit(1)
        return super().resolve_command(ctx, args)
