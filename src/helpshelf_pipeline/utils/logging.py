"""
utils/logging.py - structlog setup for helpshelf-pipeline commands.

Events go to stderr so the one-line summaries the commands print on stdout
can be piped or captured. The running subcommand is bound as context and
appears on every event as ``command``.

Usage:
    from helpshelf_pipeline.utils.logging import configure_logging

    configure_logging("INFO", "json", command="build-data")
    structlog.get_logger(__name__).info("csv_read", rows=42)
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from helpshelf_shared.config import settings


def _level_number(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _renderer(log_format: str, stream: TextIO) -> Any:
    if log_format == "json":
        # Titles and descriptions often carry emoji
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    log_level: str | None = None,
    log_format: str | None = None,
    *,
    command: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Route structlog output for one CLI invocation.

    Args:
        log_level:  Minimum level name (default: settings.log_level).
        log_format: "json" or "console" (default: settings.log_format).
        command:    Subcommand name bound to every event.
        stream:     Destination (default: the current sys.stderr).
    """
    stream = stream or sys.stderr

    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(log_format or settings.log_format, stream),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _level_number(log_level or settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        # The stream can change between invocations in one process
        cache_logger_on_first_use=False,
    )
