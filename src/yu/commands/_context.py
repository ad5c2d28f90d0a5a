"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Holds the frozen settings and lazily builds the
executor and services, so ``--help`` and ``--version`` never touch them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yu.config.settings import YuSettings
    from yu.execution import CommandExecutor
    from yu.services.doctor import DoctorService
    from yu.services.scaffold import ScaffoldService
    from yu.services.stack import StackService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: YuSettings, *, command: str | None = None) -> None:
        self.settings = settings
        self._executor: CommandExecutor | None = None

        from yu.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            command=command,
            project_root=settings.project_root,
        )

    @property
    def executor(self) -> CommandExecutor:
        """The command executor (created lazily on first access)."""
        if self._executor is None:
            from yu.execution import CommandExecutor

            self._executor = CommandExecutor(
                verbose=self.settings.verbose,
                cwd=self.settings.project_root,
            )
        return self._executor

    @property
    def stack(self) -> StackService:
        from yu.services.stack import StackService

        return StackService(self.settings, self.executor)

    @property
    def doctor(self) -> DoctorService:
        from yu.services.doctor import DoctorService

        return DoctorService(self.settings, self.executor)

    @property
    def scaffold(self) -> ScaffoldService:
        from yu.services.scaffold import ScaffoldService

        return ScaffoldService(self.settings, self.executor)
