"""structlog configuration for yu.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Progress messages for the user (``[yu] ...``) are not logs and never pass
through here; see :mod:`yu.output.messages`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    command: str | None = None,
    project_root: Path | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        command: Subcommand being run, bound to every log line.
        project_root: Project the invocation operates on, bound likewise.
    """
    bind_invocation(command=command, project_root=project_root)

    yu_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("yu").setLevel(yu_level)


def bind_invocation(*, command: str | None, project_root: Path | None) -> None:
    """Replace the structlog context with the current invocation's fields.

    Log lines from a ``yu test`` in ``/srv/shop`` then carry
    ``command=test project=/srv/shop``.
    """
    structlog.contextvars.clear_contextvars()
    fields: dict[str, str] = {}
    if command:
        fields["command"] = command
    if project_root is not None:
        fields["project"] = str(project_root)
    if fields:
        structlog.contextvars.bind_contextvars(**fields)
