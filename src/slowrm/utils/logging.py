"""Structured logging configuration using structlog."""

import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger

_log_stream: Optional[TextIO] = None


def configure_logging(log_file: str | None = None, verbose: bool = False) -> None:
    """Configure structlog for the application.

    Module-level loggers are not cached, so every call goes through the
    current configuration and never reaches a log file closed by a later
    configure_logging or reset_logging.

    Args:
        log_file: Optional path to log file. If None, logs to stderr only.
        verbose: If True, enable debug level logging.
    """
    global _log_stream

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    previous_stream = _log_stream
    if log_file:
        # JSON lines for files, appended across runs
        processors.append(structlog.processors.JSONRenderer())
        _log_stream = open(log_file, "a", encoding="utf-8")
        stream: TextIO = _log_stream
    else:
        processors.append(structlog.dev.ConsoleRenderer())
        _log_stream = None
        stream = sys.stderr

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )

    if previous_stream is not None:
        previous_stream.close()


def reset_logging() -> None:
    """Undo configure_logging and close the log file it opened."""
    structlog.reset_defaults()
    _close_log_stream()


def _close_log_stream() -> None:
    global _log_stream

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured structlog logger.
    """
    return structlog.get_logger(name)
