"""Structured logging configuration for svgcanvas-py.

Importing the package installs a quiet default (warnings and errors only, on
stderr) unless structlog was already configured, so library use never writes
log lines to stdout. :func:`configure_logging` replaces that default.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _configure(*, level: int, json_logs: bool) -> None:
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_logging(*, debug: bool = False, json_logs: bool = False) -> None:
    """Configure structured logging for the application.

    Log lines go to stderr so they never mix with SVG written to stdout.
    Loggers are not cached, so reconfiguring takes effect immediately.

    Args:
        debug: Enable debug level logging.
        json_logs: Output logs as JSON (for production).
    """
    _configure(level=logging.DEBUG if debug else logging.INFO, json_logs=json_logs)


def configure_default_logging() -> None:
    """Install the library default: warnings and errors only, written to stderr."""
    _configure(level=logging.WARNING, json_logs=False)


if not structlog.is_configured():
    configure_default_logging()
