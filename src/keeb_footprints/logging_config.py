"""Logging infrastructure for the footprint generators.

Log records are tagged with the footprint being rendered so warnings about
missing caller tokens can be traced back to the generator that emitted them.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

# Name of the footprint currently being rendered
footprint_ctx: ContextVar[str | None] = ContextVar("footprint", default=None)


def get_current_footprint() -> str | None:
    """Get the name of the footprint being rendered, if any."""
    return footprint_ctx.get()


class _FootprintFieldFilter(logging.Filter):
    """Ensure every record has a ``footprint`` attribute for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "footprint"):
            record.footprint = get_current_footprint() or "-"
        return True


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to LOGGING_LEVEL env var or 'INFO'.
        format_string: Custom log format string. Defaults to a structured format.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get("LOGGING_LEVEL", "INFO")

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] [%(name)s] [footprint=%(footprint)s] %(message)s"

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    console_handler.addFilter(_FootprintFieldFilter())

    logger.addHandler(console_handler)

    return logger


class FootprintLoggerAdapter(logging.LoggerAdapter[Any]):
    """Logger adapter that adds the current footprint name to log records."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        footprint = get_current_footprint()
        if footprint is not None:
            extra["footprint"] = footprint
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> FootprintLoggerAdapter:
    """Get a logger for the given module name.

    Args:
        name: The module name (e.g., __name__).

    Returns:
        A logger that tags records with the footprint being rendered.
    """
    return FootprintLoggerAdapter(logging.getLogger(name), {})
