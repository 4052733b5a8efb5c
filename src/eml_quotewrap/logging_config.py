"""
Structured logging configuration using structlog.

Nothing in the package configures structlog on import; applications call
setup_logging() once at startup. Once configured, log output goes to stderr
so it stays apart from the formatted lines a caller prints. Until then
structlog's default configuration applies.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def setup_logging(log_level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog for the quote reflow pipeline.

    Args:
        log_level: Minimum level name (defaults to settings.log_level)
        json_output: Render JSON lines instead of console output
            (defaults to settings.log_json)
    """
    level = log_level or settings.log_level
    as_json = settings.log_json if json_output is None else json_output

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger bound to the given module name."""
    return structlog.get_logger(name)
