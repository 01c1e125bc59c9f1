"""CP437 (IBM PC) character set conversion."""

import re

from bbs_ansi_html.core.constants import CP437_TO_UNICODE, REPLACEMENT_CHAR


_TRAILING_BLANKS = re.compile(r'[\s\x00]+\Z')


def cp437_char(code: int) -> str:
    """Look up the Unicode glyph for a CP437 byte value."""
    if 0 <= code < len(CP437_TO_UNICODE):
        return CP437_TO_UNICODE[code]
    return REPLACEMENT_CHAR


def cp437_to_unicode(data: bytes) -> str:
    """Convert CP437-encoded bytes to Unicode string."""
    return ''.join(CP437_TO_UNICODE[b] for b in data)


def decode_field(units: str, start: int, length: int) -> str:
    """
    Decode a fixed-width CP437 field from a unit string.

    Each character's code point is taken as the byte value. Codes outside
    the table pass through unchanged. Trailing whitespace and NULs are trimmed.
    """
    chunk = units[start:start + length]
    text = ''.join(
        CP437_TO_UNICODE[ord(ch)] if ord(ch) < len(CP437_TO_UNICODE) else ch
        for ch in chunk
    )
    return _TRAILING_BLANKS.sub('', text)
