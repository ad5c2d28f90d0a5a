"""Command executor.

Two explicit paths:

* :meth:`CommandExecutor.run` forks a child, streams (or discards) its
  output, waits, and applies the failure policy.  Used for every step whose
  outcome yu needs to inspect.
* :meth:`CommandExecutor.take_over` replaces the yu process with the
  command.  Used for the final, user-facing step (interactive shells, image
  builds) so the terminal and signals belong to the child.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import click

from yu.errors import CommandFailed
from yu.execution.invocation import NOT_FOUND_RETURNCODE, CommandInvocation, CommandResult
from yu.output.messages import announce_command

logger = logging.getLogger(__name__)

FailureHandler = Callable[[CommandResult], None]


class CommandExecutor:
    """Runs commands for one yu invocation.

    Args:
        verbose: Print every command before it runs and stream the output
            of commands that would otherwise be silent.
        cwd: Default working directory for commands that do not set one.
    """

    def __init__(self, *, verbose: bool = False, cwd: Path | None = None) -> None:
        self._verbose = verbose
        self._cwd = cwd

    @property
    def verbose(self) -> bool:
        return self._verbose

    def run(
        self,
        invocation: CommandInvocation,
        on_failure: FailureHandler | None = None,
    ) -> CommandResult:
        """Run *invocation* to completion.

        On a non-zero exit, *on_failure* (if given) decides what happens;
        otherwise :class:`CommandFailed` is raised when the invocation asks
        to exit on failure, and the failed result is returned when it does
        not.
        """
        if self._verbose:
            announce_command(invocation.display)

        stream = invocation.show_output or self._verbose
        cwd = invocation.cwd or self._cwd
        logger.debug("Running %s (cwd=%s, stream=%s)", invocation.display, cwd, stream)

        try:
            with subprocess.Popen(
                list(invocation.argv),
                cwd=cwd,
                stdout=subprocess.PIPE if stream else subprocess.DEVNULL,
                stderr=subprocess.STDOUT if stream else subprocess.DEVNULL,
                text=True,
                errors="replace",
            ) as proc:
                if proc.stdout is not None:
                    for line in proc.stdout:
                        click.echo(line, nl=False)
                returncode = proc.wait()
        except OSError as exc:
            logger.debug("Could not start %s: %s", invocation.argv[0], exc)
            returncode = NOT_FOUND_RETURNCODE

        result = CommandResult(invocation=invocation, returncode=returncode)
        if result.ok:
            return result

        logger.debug("%s exited with %d", invocation.display, returncode)
        if on_failure is not None:
            on_failure(result)
        elif invocation.exit_on_failure:
            raise CommandFailed(invocation.display)
        return result

    def take_over(self, invocation: CommandInvocation) -> NoReturn:
        """Replace the current process with *invocation*. Never returns."""
        if self._verbose:
            announce_command(invocation.display)

        cwd = invocation.cwd or self._cwd
        logger.debug("Handing terminal to %s (cwd=%s)", invocation.display, cwd)
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            if cwd is not None:
                os.chdir(cwd)
            os.execvp(invocation.argv[0], list(invocation.argv))
        except OSError as exc:
            logger.debug("exec of %s failed: %s", invocation.argv[0], exc)
            raise CommandFailed(invocation.display) from exc
        # Unreachable unless os.execvp is patched out.
        raise SystemExit(0)
