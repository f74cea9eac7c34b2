"""Structured logging for the row store.

Every logger, structlog or stdlib, ends up on the stdlib "row_store"
logger tree:

- loggers from get_logger() (application layer, prompt) are structlog
  loggers wrapping stdlib loggers of the same name
- the domain and storage modules log through logging.getLogger(__name__)

setup_logging() installs one handler on the "row_store" logger that
renders both kinds of record with structlog's ProcessorFormatter. Until it
runs, events below WARNING are dropped and the rest go wherever the
stdlib root logger sends them (stderr by default): stdout belongs to the
interactive prompt.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "row_store"
LOG_FORMATS = ("json", "console")


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _renderer(log_format: str, stream: TextIO) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def _configure_structlog() -> None:
    # Rendering happens in the handler, so this never changes after import
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_logging(
    level: str = "WARNING",
    log_format: str = "console",
    stream: TextIO | None = None,
) -> None:
    """
    Set up structured logging with structlog.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format ('json' or 'console')
        stream: Where log lines go (stderr if None)

    Raises:
        ValueError: If level or log_format is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}")

    stream = stream or sys.stderr

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_format, stream),
            ],
        )
    )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False


def get_logger(name: str | None = None, **initial_context: Any) -> Any:
    """
    Get a bound logger instance.

    Args:
        name: Name of the stdlib logger to wrap (the "row_store" logger if None)
        **initial_context: Initial context to bind to the logger

    Returns:
        A lazy structlog logger, safe to create at module level
    """
    return structlog.get_logger(name or PACKAGE_LOGGER, **initial_context)


_configure_structlog()
