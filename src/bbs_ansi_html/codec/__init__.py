"""Decoding and escape sequence parsing for ANSI art input."""

from bbs_ansi_html.codec.cp437 import cp437_char, cp437_to_unicode
from bbs_ansi_html.codec.ansi_parser import AnsiParser, ParseState

__all__ = ["cp437_char", "cp437_to_unicode", "AnsiParser", "ParseState"]
