"""
Structured logging configuration using structlog.

Log output goes to stderr: stdout is reserved for the rendered dat file.
"""

import logging
import sys

import structlog

from .config import settings


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # Resolved per call so a replaced sys.stderr is always honoured.
    return structlog.PrintLogger(file=sys.stderr)


def setup_logging() -> None:
    """
    Configure structlog for structured logging on stderr.

    Sets up processors for:
    - Context variable merging
    - Log level addition
    - Exception info rendering
    - Timestamp addition
    - JSON or console rendering based on settings
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if settings.log_json
                else structlog.dev.ConsoleRenderer(colors=False)
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
