"""Stack workflows: the command sequences behind test, build, shell, etc.

Each public method is one subcommand.  Methods ending in a take-over never
return; everything else returns normally or raises :class:`YuError`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from typing import NoReturn

from yu.errors import YuError
from yu.infrastructure.discovery import (
    normalise_service_names,
    packageable_services,
    testable_services,
)
from yu.output.messages import info
from yu.services.base import BaseService

logger = logging.getLogger(__name__)


class StackService(BaseService):
    """Operates on the services of one docker-compose project."""

    # ------------------------------------------------------------------
    # Service selection
    # ------------------------------------------------------------------

    def packageable_services(self) -> list[str]:
        return sorted(packageable_services(self.project_root, self._settings.services))

    def testable_services(self) -> list[str]:
        return sorted(testable_services(self.project_root, self._settings.services))

    # ------------------------------------------------------------------
    # Subcommands
    # ------------------------------------------------------------------

    def test(self, services: Sequence[str] = ()) -> None:
        """Run every target's test entrypoint; fail at the end if any failed."""
        targets = normalise_service_names(services) or self.testable_services()
        logger.debug("Test targets: %s", targets)

        failed: list[str] = []
        for service in targets:
            info(f"Running tests for {service}...")
            result = self._run(
                self._compose.run(
                    [service, self._settings.services.test_entrypoint],
                    remove=self._settings.remove_containers,
                ),
                exit_on_failure=False,
            )
            if not result.ok:
                failed.append(service)

        if failed:
            raise YuError(f"Tests failed for: {', '.join(failed)}")

    def build(self, services: Sequence[str] = ()) -> NoReturn:
        """Package dependencies, then hand the terminal to ``compose build``."""
        targets = normalise_service_names(services)
        packageable = self.packageable_services()
        if targets:
            packageable = [service for service in packageable if service in targets]

        for service in packageable:
            self.package_dependencies(service)
        info("Building images...")
        self._take_over(self._compose.build(targets))

    def shell(self, services: Sequence[str], *, test_env: bool = False) -> NoReturn:
        """Open an interactive shell in a fresh container for one service."""
        if not services:
            raise YuError("Please provide service")
        if len(services) > 1:
            raise YuError("One at a time please!")

        (service,) = normalise_service_names(services)
        label = "test shell" if test_env else "shell"
        info(f"Loading {label} for {service}...")
        self._take_over(
            self._compose.run(
                [service, self._settings.services.shell],
                remove=self._settings.remove_containers,
                env=self._settings.services.test_env if test_env else None,
            )
        )

    def reset(self, *, without_cache: bool = False) -> None:
        """Rebuild every image from scratch and bring the whole stack up."""
        manifest = self._settings.services.manifest
        info(f"Packaging dependencies in all services containing a {manifest}")
        for service in self.packageable_services():
            self.package_dependencies(service)
        info("Killing any running containers")
        self._run(self._compose.kill())
        info("Removing all existing containers")
        self._run(self._compose.rm())
        info("Building fresh images")
        self._run(self._compose.build(no_cache=without_cache))
        self.run_seed()
        info("Bringing containers up for all services")
        self._run(self._compose.up())

    def start(self, services: Sequence[str] = ()) -> None:
        self._run(self._compose.up(normalise_service_names(services)))

    def restart(self, services: Sequence[str] = ()) -> None:
        targets = normalise_service_names(services)
        self._run(self._compose.kill(targets))
        self._run(self._compose.up(targets))

    def recreate(self, services: Sequence[str] = ()) -> None:
        """Throw away the services' containers and start fresh ones."""
        targets = normalise_service_names(services)
        self._run(self._compose.kill(targets))
        self._run(self._compose.rm(targets))
        self.run_seed()
        self._run(self._compose.up(targets))

    def run(self, args: Sequence[str], *, test_env: bool = False) -> NoReturn:
        """Run an ad-hoc command (``SERVICE CMD...``) in a new container."""
        if not args:
            raise YuError("Please provide a service and a command")
        self._take_over(
            self._compose.run(
                args,
                remove=self._settings.remove_containers,
                env=self._settings.services.test_env if test_env else None,
            )
        )

    # ------------------------------------------------------------------
    # Shared steps
    # ------------------------------------------------------------------

    def package_dependencies(self, service: str) -> None:
        info(f"Packaging dependencies for {service}")
        self._run(
            self._settings.services.package_command,
            cwd=self.project_root / service,
        )

    def run_seed(self) -> None:
        """Run the project's seed script, if there is an executable one."""
        seed = self._settings.seed_path
        if not seed.is_file():
            return
        if not os.access(seed, os.X_OK):
            logger.warning("Seed script %s is not executable, skipping", seed)
            return
        info("Seeding system state")
        self._run([str(seed)])
