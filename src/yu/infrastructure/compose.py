"""docker-compose command lines.

Builds argv tuples only; running them is the executor's job.
"""

from __future__ import annotations

from collections.abc import Sequence

from yu.config.models import DEFAULT_COMPOSE_FILE, ComposeConfig


class ComposeCommands:
    """Argv builder for the docker-compose subcommands yu uses."""

    def __init__(self, config: ComposeConfig) -> None:
        self._config = config

    def _base(self) -> tuple[str, ...]:
        if self._config.file != DEFAULT_COMPOSE_FILE:
            return (*self._config.command, "-f", self._config.file)
        return self._config.command

    def version(self) -> tuple[str, ...]:
        return (*self._config.command, "--version")

    def runtime(self) -> tuple[str, ...]:
        return self._config.runtime_command

    def run(
        self,
        args: Sequence[str],
        *,
        remove: bool = True,
        env: str | None = None,
    ) -> tuple[str, ...]:
        """``run [--rm] [-e ENV] ARGS...``; *args* starts with the service."""
        argv = [*self._base(), "run"]
        if remove:
            argv.append("--rm")
        if env:
            argv.extend(["-e", env])
        argv.extend(args)
        return tuple(argv)

    def build(self, services: Sequence[str] = (), *, no_cache: bool = False) -> tuple[str, ...]:
        argv = [*self._base(), "build"]
        if no_cache:
            argv.append("--no-cache")
        argv.extend(services)
        return tuple(argv)

    def up(self, services: Sequence[str] = ()) -> tuple[str, ...]:
        """Start containers in the background without recreating existing ones."""
        return (*self._base(), "up", "-d", "--no-recreate", *services)

    def kill(self, services: Sequence[str] = ()) -> tuple[str, ...]:
        return (*self._base(), "kill", *services)

    def rm(self, services: Sequence[str] = ()) -> tuple[str, ...]:
        return (*self._base(), "rm", "--force", *services)
