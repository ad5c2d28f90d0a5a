"""Subprocess execution: run-and-stream versus take-over-terminal."""

from yu.execution.executor import CommandExecutor
from yu.execution.invocation import CommandInvocation, CommandResult

__all__ = ["CommandExecutor", "CommandInvocation", "CommandResult"]
