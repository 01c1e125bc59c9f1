"""SAUCE metadata handling."""

from bbs_ansi_html.sauce.record import SauceRecord
from bbs_ansi_html.sauce.reader import (
    SAUCE_RECORD_SIZE,
    SauceLocation,
    locate_sauce,
    parse_sauce,
    parse_sauce_bytes,
)
from bbs_ansi_html.sauce.writer import append_sauce, sauce_to_bytes

__all__ = [
    "SAUCE_RECORD_SIZE",
    "SauceRecord",
    "SauceLocation",
    "locate_sauce",
    "parse_sauce",
    "parse_sauce_bytes",
    "append_sauce",
    "sauce_to_bytes",
]
