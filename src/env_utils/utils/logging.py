"""Logging setup for env-utils.

All loggers live under the ``env_utils`` namespace. Context fields bound
with ``get_logger_with_context`` are appended to each message as
``key=value`` pairs, e.g.::

    DEBUG: Found 3 definition files root=services
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Iterator

ROOT_LOGGER = "env_utils"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
STRUCTURED_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class StructuredFormatter(logging.Formatter):
    """Formatter that appends bound context fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields = getattr(record, "context_fields", None)
        if not fields:
            return message
        return message + " " + " ".join(f"{k}={v}" for k, v in fields.items())


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    structured: bool = False,
) -> None:
    """Install a stderr handler on the ``env_utils`` logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        structured: Prefix records with time and logger name
    """
    if format_string is None:
        format_string = STRUCTURED_FORMAT if structured else PLAIN_FORMAT

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter(format_string))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the ``env_utils`` namespace."""
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Adapter that attaches its bound fields to every record."""

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["context_fields"] = self.extra
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> LoggerAdapter:
    """Logger that reports ``context`` alongside each message.

    Example:
        log = get_logger_with_context(__name__, root="services")
        log.debug("Found %d definition files", 3)
    """
    return LoggerAdapter(get_logger(name), context)


@contextmanager
def log_duration(logger: logging.Logger | logging.LoggerAdapter, label: str) -> Iterator[None]:
    """Log how long the wrapped block took, at debug level."""
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug("%s took %.1fms", label, elapsed_ms)
