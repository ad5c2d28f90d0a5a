"""Shared pytest fixtures for yu tests."""

from __future__ import annotations

import io
import logging
import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from yu.config.settings import YuSettings
from yu.execution import CommandExecutor

COMPOSE_HEADER = "services:\n  db:\n    image: postgres\n"

Argv = tuple[str, ...]


class FakeShell:
    """Stands in for the OS while recording what yu asked it to do.

    ``calls`` holds every argv passed to ``subprocess.Popen`` and ``execs``
    every argv passed to ``os.execvp``.
    """

    def __init__(self) -> None:
        self.calls: list[Argv] = []
        self.cwds: list[Path | None] = []
        self.streamed: list[bool] = []
        self.execs: list[Argv] = []
        self._failing: list[Callable[[Argv], bool]] = []
        self._missing: list[Callable[[Argv], bool]] = []
        self.output = ""

    def fail_when(self, predicate: Callable[[Argv], bool]) -> None:
        """Make matching commands exit with status 1."""
        self._failing.append(predicate)

    def missing_when(self, predicate: Callable[[Argv], bool]) -> None:
        """Make matching commands fail to start (binary not found)."""
        self._missing.append(predicate)

    def popen(self, argv: list[str], **kwargs: Any) -> _FakePopen:
        key = tuple(argv)
        if any(predicate(key) for predicate in self._missing):
            raise FileNotFoundError(2, "No such file or directory", argv[0])
        self.calls.append(key)
        self.cwds.append(kwargs.get("cwd"))
        streamed = kwargs.get("stdout") == subprocess.PIPE
        self.streamed.append(streamed)
        returncode = 1 if any(predicate(key) for predicate in self._failing) else 0
        return _FakePopen(returncode, self.output if streamed else None)

    def execvp(self, file: str, args: list[str]) -> None:
        self.execs.append(tuple(args))


class _FakePopen:
    def __init__(self, returncode: int, output: str | None) -> None:
        self.returncode = returncode
        self.stdout = io.StringIO(output) if output is not None else None

    def __enter__(self) -> _FakePopen:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.stdout is not None:
            self.stdout.close()

    def wait(self) -> int:
        return self.returncode


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo the logging setup each CLI invocation performs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yu_level = logging.getLogger("yu").level
    yield
    root.handlers = handlers
    structlog.contextvars.clear_contextvars()
    root.setLevel(level)
    logging.getLogger("yu").setLevel(yu_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary docker-compose project with a compose file and no services."""
    (tmp_path / "docker-compose.yml").write_text(COMPOSE_HEADER, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI operates on it.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    for var in ("YU_CONFIG", "YU_VERBOSE", "YU_REMOVE_CONTAINERS", "YU_PROJECT_ROOT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(project_root)


@pytest.fixture
def fake_shell(monkeypatch: pytest.MonkeyPatch) -> Iterator[FakeShell]:
    """Patch process creation in the executor with a recording fake."""
    shell = FakeShell()
    # take_over() changes directory before exec; make sure CWD is restored.
    monkeypatch.chdir(Path.cwd())
    monkeypatch.setattr("yu.execution.executor.subprocess.Popen", shell.popen)
    monkeypatch.setattr("yu.execution.executor.os.execvp", shell.execvp)
    yield shell


@pytest.fixture
def settings(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> YuSettings:
    monkeypatch.delenv("YU_CONFIG", raising=False)
    return YuSettings.from_cli(project_root=project_root)


@pytest.fixture
def executor(settings: YuSettings) -> CommandExecutor:
    return CommandExecutor(verbose=settings.verbose, cwd=settings.project_root)


def make_service(root: Path, name: str, *markers: str) -> Path:
    """Create a service directory containing the given marker files."""
    service_dir = root / name
    service_dir.mkdir(parents=True, exist_ok=True)
    for marker in markers:
        path = service_dir / marker
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
    return service_dir


@pytest.fixture
def service_factory(project_root: Path) -> Callable[..., Path]:
    """Build service directories with marker files inside the project."""

    def factory(name: str, *markers: str) -> Path:
        return make_service(project_root, name, *markers)

    return factory
