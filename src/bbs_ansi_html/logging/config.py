"""Logging configuration for bbs-ansi-html.

Structured logging via structlog. The library only emits debug events;
the CLI configures output at startup and a quiet default is installed
on import otherwise:
- Write all logs to stderr (stdout carries the converted HTML)
- Filter by level (default: WARNING)
- Use ISO timestamps and console rendering
"""

import logging
import sys

import structlog

__all__ = ["get_logger", "configure_logging", "configure_default_logging"]

DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog for bbs-ansi-html.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...); unknown names fall back to WARNING
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def configure_default_logging() -> None:
    """Install the WARNING-level stderr setup unless structlog is already configured.

    Runs on import so library calls never print to stdout, which structlog
    does when left unconfigured. Applications that configure structlog
    themselves keep their setup.
    """
    if not structlog.is_configured():
        configure_logging(DEFAULT_LOG_LEVEL)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)
    """
    return structlog.get_logger(name)
