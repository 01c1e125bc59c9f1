"""Logging setup."""

from bbs_ansi_html.logging.config import (
    configure_default_logging,
    configure_logging,
    get_logger,
)

configure_default_logging()

__all__ = ["configure_default_logging", "configure_logging", "get_logger"]
