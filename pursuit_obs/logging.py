"""
Structured Logging (structlog).

Every logger is a structlog wrapper around a stdlib ``logging.Logger``, so the
stdlib decides where events go:

- before ``setup_logging``: stdlib defaults apply, debug lookups are dropped
  and warnings (the credential advisory) reach stderr
- after ``setup_logging``: events are rendered as JSON or text on stderr,
  the operator diagnostic channel

Nothing is ever written to stdout.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pursuit_config.settings import LoggingSettings


def setup_logging(settings: "LoggingSettings") -> None:
    """
    Configure structlog for structured logging.

    Output format: JSON or text (default)
    Includes: logger name, level, timestamp
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    # Loggers are created at import time, before this runs; uncached loggers
    # pick up the configuration on their next call.
    structlog.configure(
        processors=processors,
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(logging.getLogger(name))
