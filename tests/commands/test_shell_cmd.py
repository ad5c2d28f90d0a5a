"""Tests for the shell and run CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from yu.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestShellCommand:
    def test_no_service(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["shell"])
        assert result.exit_code == 1
        assert "[yu] Please provide service" in result.output
        assert fake_shell.execs == []

    def test_too_many(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["shell", "a", "b"])
        assert result.exit_code == 1
        assert "One at a time please!" in result.output

    def test_shell(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["shell", "users/"])
        assert result.exit_code == 0
        assert fake_shell.execs == [("docker-compose", "run", "--rm", "users", "bash")]
        assert "[yu] Loading shell for users..." in result.output

    def test_test_shell(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["--no-rm", "shell", "--test", "users"])
        assert result.exit_code == 0
        assert fake_shell.execs == [
            ("docker-compose", "run", "-e", "APP_ENV=test", "users", "bash")
        ]


@pytest.mark.usefixtures("_isolated_project")
class TestRunCommand:
    def test_passes_everything_through(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["run", "users", "rspec", "--fail-fast", "-e", "x"])
        assert result.exit_code == 0, result.output
        assert fake_shell.execs == [
            ("docker-compose", "run", "--rm", "users", "rspec", "--fail-fast", "-e", "x")
        ]

    def test_test_env(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["run", "--test", "users", "rake", "db:migrate"])
        assert result.exit_code == 0
        assert fake_shell.execs == [
            ("docker-compose", "run", "--rm", "-e", "APP_ENV=test", "users", "rake", "db:migrate")
        ]

    def test_no_args(self, cli_runner: CliRunner, fake_shell) -> None:
        result = cli_runner.invoke(cli, ["run"])
        assert result.exit_code == 1
        assert fake_shell.execs == []
