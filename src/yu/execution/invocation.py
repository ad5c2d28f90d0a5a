"""Value types for a single command run."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path

# Conventional shell status for "command not found".
NOT_FOUND_RETURNCODE = 127


@dataclass(frozen=True)
class CommandInvocation:
    """A command to run, plus how its outcome should be treated."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    show_output: bool = True
    exit_on_failure: bool = True

    @property
    def display(self) -> str:
        command = shlex.join(self.argv)
        if self.cwd is not None:
            return f"cd {shlex.quote(str(self.cwd))} && {command}"
        return command


@dataclass(frozen=True)
class CommandResult:
    invocation: CommandInvocation
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0
