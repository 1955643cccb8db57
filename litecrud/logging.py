"""Structured logging configuration."""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from litecrud.settings import get_settings


def setup_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Set up structured logging with structlog.

    Library code only ever calls :func:`get_logger`; applications call this
    once at start-up to choose a level and renderer.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``Settings.log_level``.
        log_format: ``'json'`` or ``'console'``.  Defaults to
            ``Settings.log_format``.
    """
    settings = get_settings()
    level = level or settings.log_level
    log_format = log_format or settings.log_format

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> Any:
    """Get a bound logger instance.

    Args:
        name: Logger name (module name typically).
        **initial_context: Initial context to bind to the logger.

    Returns:
        A bound structlog logger.
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
