"""Logging utilities for the launch injector.

The launcher shares stdout and stderr with the program it delegates to, so its
own log output is kept quiet by default: only warnings and above reach stderr
unless ``DLI_LOG_LEVEL`` asks for more. Context fields (environment name,
config path) are attached to messages through :func:`log_context`.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

LOGGER_NAMESPACE = "launch_injector"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------------------------------------------------------------------
# Context variables for structured logging
# ---------------------------------------------------------------------------

_log_context: ContextVar[dict[str, Any]] = ContextVar(
    "log_context", default={})


class ContextualFormatter(logging.Formatter):
    """Formatter that appends context fields to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        ctx = _log_context.get()
        if ctx:
            ctx_str = " ".join(f"{k}={v}" for k, v in ctx.items())
            message = f"{message} [{ctx_str}]"
        return message


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Temporarily add context fields to all log messages.

    Usage::

        with log_context(environment="client", config="/tmp/dli.cfg"):
            logger.debug("Parsing config")  # message includes context

    Fields are merged with any existing context and restored on exit.
    """
    current = _log_context.get()
    merged = {**current, **fields}
    token = _log_context.set(merged)
    try:
        yield
    finally:
        _log_context.reset(token)


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

_configured = False


def parse_log_level(value: str | None, default: int = logging.WARNING) -> int:
    """Translate a level name such as ``"debug"`` or ``"10"`` to a level number.

    Unknown names fall back to ``default``.
    """
    if not value:
        return default
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging for the launcher namespace.

    Only the ``launch_injector`` logger tree is touched. The root logger is
    left alone because it belongs to the program that receives control.

    Args:
        level: Log level for launcher loggers (default WARNING).
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextualFormatter(DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given name.

    Args:
        name: Name of the logger (typically __name__).

    Returns:
        A logging.Logger instance.
    """
    return logging.getLogger(name)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """Log a recovered exception with context fields at debug level.

    Args:
        logger: Logger instance.
        message: Human-readable message describing the error.
        exc: The exception that was raised.
        **context: Additional context fields to include.
    """
    with log_context(**context):
        logger.debug("%s: %s", message, exc, exc_info=exc)
