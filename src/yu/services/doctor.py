"""Environment checks behind ``yu doctor``."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from yu.errors import YuError
from yu.execution import CommandInvocation, CommandResult
from yu.output.messages import info
from yu.services.base import BaseService

logger = logging.getLogger(__name__)


def _fail_with(hint: str) -> Callable[[CommandResult], None]:
    def handler(result: CommandResult) -> None:
        logger.debug("%s exited with %d", result.invocation.display, result.returncode)
        raise YuError(hint)

    return handler


class DoctorService(BaseService):
    """Verifies that docker, docker-compose and a compose file are in place.

    Checks run in order and stop at the first failure, which is reported
    with a remediation hint:

    1. the container runtime can be invoked,
    2. ``docker-compose --version`` can be invoked,
    3. the project root holds the compose file.
    """

    def diagnose(self) -> None:
        runtime = self._compose.runtime()
        self._check_command(runtime, f"Please ensure you have {shlex.join(runtime)} working")

        compose = shlex.join(self._settings.compose.command)
        self._check_command(self._compose.version(), f"Please ensure you have {compose} working")

        if not self._settings.compose_file.is_file():
            raise YuError(
                f"Your current directory does not contain a {self._settings.compose.file}"
            )

        info("Everything looks good.")

    def _check_command(self, argv: tuple[str, ...], hint: str) -> None:
        invocation = CommandInvocation(argv=argv, show_output=False)
        self._executor.run(invocation, on_failure=_fail_with(hint))
