"""BaseService: shared foundation for yu's workflow services.

Every service receives the frozen settings and the executor for the
current invocation.  Services build argv tuples, wrap them in
:class:`CommandInvocation` and hand them to the executor; they never call
``subprocess`` themselves.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from yu.execution import CommandInvocation, CommandResult
from yu.infrastructure.compose import ComposeCommands

if TYPE_CHECKING:
    from yu.config.settings import YuSettings
    from yu.execution import CommandExecutor


class BaseService:
    """Base for service-layer classes.

    Usage::

        class StackService(BaseService):
            def start(self, services):
                self._run(self._compose.up(services))
    """

    def __init__(self, settings: YuSettings, executor: CommandExecutor) -> None:
        self._settings = settings
        self._executor = executor
        self._compose = ComposeCommands(settings.compose)

    @property
    def project_root(self) -> Path:
        return self._settings.project_root

    def _run(
        self,
        argv: Sequence[str],
        *,
        cwd: Path | None = None,
        show_output: bool = True,
        exit_on_failure: bool = True,
    ) -> CommandResult:
        invocation = CommandInvocation(
            argv=tuple(argv),
            cwd=cwd,
            show_output=show_output,
            exit_on_failure=exit_on_failure,
        )
        return self._executor.run(invocation)

    def _take_over(self, argv: Sequence[str]) -> NoReturn:
        self._executor.take_over(CommandInvocation(argv=tuple(argv)))
