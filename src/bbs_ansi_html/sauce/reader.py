"""SAUCE record parsing."""

from dataclasses import dataclass

from bbs_ansi_html.codec.cp437 import decode_field
from bbs_ansi_html.sauce.record import SauceRecord


SAUCE_MARKER = "SAUCE00"
COMNT_ID = "COMNT"
SAUCE_RECORD_SIZE = 128
COMMENT_LINE_SIZE = 64
MAX_COMMENT_LINES = 256
# Furthest a COMNT block may start before the record
COMNT_SEARCH_WINDOW = COMMENT_LINE_SIZE * MAX_COMMENT_LINES + len(COMNT_ID)


@dataclass(frozen=True)
class SauceLocation:
    """Offsets of a SAUCE trailer within the input."""
    sauce_pos: int
    comnt_pos: int | None

    @property
    def tail_pos(self) -> int:
        """First offset after the 128-byte record."""
        return self.sauce_pos + SAUCE_RECORD_SIZE

    @property
    def content_end(self) -> int:
        """Where ordinary content stops because of the trailer."""
        if self.comnt_pos is not None:
            return self.comnt_pos
        return self.sauce_pos


def locate_sauce(units: str) -> SauceLocation | None:
    """
    Find the last complete SAUCE record and any COMNT block before it.

    ``units`` holds one character per input byte (or decoded character in
    UTF-8 mode). A marker without a full 128-byte record behind it does not
    count as a trailer.
    """
    sauce_pos = units.rfind(SAUCE_MARKER)
    if sauce_pos == -1 or sauce_pos + SAUCE_RECORD_SIZE > len(units):
        return None

    search_start = max(0, sauce_pos - COMNT_SEARCH_WINDOW)
    comnt_pos = units.rfind(COMNT_ID, search_start, sauce_pos)

    return SauceLocation(
        sauce_pos=sauce_pos,
        comnt_pos=comnt_pos if comnt_pos != -1 else None,
    )


def _word(units: str, offset: int) -> int:
    """Little-endian 16-bit value."""
    return (ord(units[offset]) & 0xFF) | ((ord(units[offset + 1]) & 0xFF) << 8)


def parse_sauce(units: str, location: SauceLocation | None = None) -> SauceRecord | None:
    """Parse the SAUCE record (and COMNT lines) from a unit string."""
    if location is None:
        location = locate_sauce(units)
        if location is None:
            return None

    pos = location.sauce_pos

    comments: list[str] = []
    if location.comnt_pos is not None:
        body_start = location.comnt_pos + len(COMNT_ID)
        for start in range(body_start, pos, COMMENT_LINE_SIZE):
            line = decode_field(units, start, min(COMMENT_LINE_SIZE, pos - start))
            if line:
                comments.append(line)

    return SauceRecord(
        title=decode_field(units, pos + 7, 35),
        author=decode_field(units, pos + 42, 20),
        group=decode_field(units, pos + 62, 20),
        date=decode_field(units, pos + 82, 8),
        width=_word(units, pos + 96),
        height=_word(units, pos + 98),
        comments=tuple(comments),
        font=decode_field(units, pos + 106, 22),
    )


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """Parse a SAUCE record from raw file bytes."""
    return parse_sauce(data.decode('latin-1'))
