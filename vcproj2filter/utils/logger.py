"""
Structured logging configuration using structlog.

This module configures structured logging with contextvars support so a
conversion can bind the project path once and have it on every event.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import (
    bind_contextvars,
    merge_contextvars,
    unbind_contextvars,
)

from .log_events import LogEvents


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Logger factory writing to stderr, keeping stdout for command output."""
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    log_level: str | None = None,
    log_format: str = "text",
) -> None:
    """
    Configure structlog with processors and formatters.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Format type (json or text)
    """
    level = log_level or "ERROR"

    processors: list[Any] = [
        # Merge context variables (must be first)
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Colors only when attached to a terminal
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(), exception_formatter=structlog.dev.plain_traceback
            )
        )

    # Loggers are not cached so each event resolves the current sys.stderr
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
        context_class=dict,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with the given name.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Configured bound logger
    """
    return structlog.get_logger(name)


def ensure_logging_configured() -> None:
    """
    Install the quiet default configuration unless structlog is already configured.

    Library callers of convert_project otherwise get structlog's built-in
    configuration, which prints every level to stdout. An application that
    configures structlog itself keeps its own setup.
    """
    if not structlog.is_configured():
        configure_logging()


def setup_logging(
    log_level: str = "ERROR",
    log_format: str = "text",
    app_version: str = "unknown",
    app_env: str = "unknown",
    debug: bool = False,
) -> structlog.stdlib.BoundLogger:
    """
    Setup logging and return the main logger.

    This should be called once per CLI invocation, before converting.

    Returns:
        Configured logger instance
    """
    # Debug mode always shows conversion progress
    if debug:
        log_level = "DEBUG"

    configure_logging(log_level=log_level, log_format=log_format)
    log = get_logger("vcproj2filter")

    log.debug(
        LogEvents.LOGGING_CONFIGURED,
        app_version=app_version,
        app_env=app_env,
        debug=debug,
    )

    return log


class ConversionLogContext:
    """
    Context manager for conversion-scoped logging context.

    Usage:
        with ConversionLogContext(project="app.vcxproj"):
            log.info("This log includes the project path")
        # Context automatically cleared
    """

    def __init__(self, **context: Any) -> None:
        self.context = context
        self.bound_keys = list(context.keys())

    def __enter__(self) -> None:
        """Bind context variables."""
        if self.context:
            bind_contextvars(**self.context)

    def __exit__(self, *args: Any) -> None:
        """Unbind context variables."""
        if self.bound_keys:
            unbind_contextvars(*self.bound_keys)


__all__ = [
    "configure_logging",
    "get_logger",
    "setup_logging",
    "ConversionLogContext",
    "ensure_logging_configured",
]
