"""SAUCE record writing."""

from bbs_ansi_html.sauce.reader import COMMENT_LINE_SIZE, COMNT_ID, MAX_COMMENT_LINES
from bbs_ansi_html.sauce.record import SauceRecord


SAUCE_ID = b"SAUCE"
SAUCE_VERSION = b"00"
EOF_MARKER = b"\x1a"
DATA_TYPE_CHARACTER = 1
FILE_TYPE_ANSI = 1


def _text(value: str, size: int, pad: bytes = b' ') -> bytes:
    return value.encode('cp437', errors='replace')[:size].ljust(size, pad)


def sauce_to_bytes(record: SauceRecord, file_size: int = 0) -> bytes:
    """Serialize a SAUCE record to its 128-byte form."""
    # Start with SAUCE signature and version
    data = bytearray(SAUCE_ID + SAUCE_VERSION)

    data.extend(_text(record.title, 35))
    data.extend(_text(record.author, 20))
    data.extend(_text(record.group, 20))
    data.extend(_text(record.date, 8))

    # File size (4 bytes, little-endian)
    data.extend(file_size.to_bytes(4, 'little'))

    data.append(DATA_TYPE_CHARACTER)
    data.append(FILE_TYPE_ANSI)

    # TInfo1-4: width, height, unused
    data.extend(record.width.to_bytes(2, 'little'))
    data.extend(record.height.to_bytes(2, 'little'))
    data.extend(bytes(4))

    # Number of comments, then TFlags
    data.append(min(len(record.comments), MAX_COMMENT_LINES - 1))
    data.append(0)

    # TInfoS: font name (22 bytes, NUL padded)
    data.extend(_text(record.font, 22, pad=b'\x00'))

    return bytes(data)


def append_sauce(record: SauceRecord, data: bytes) -> bytes:
    """Append EOF marker, optional COMNT block and SAUCE record to data."""
    result = bytearray(data)
    result.extend(EOF_MARKER)

    if record.comments:
        result.extend(COMNT_ID.encode('ascii'))
        for comment in record.comments[:MAX_COMMENT_LINES - 1]:
            result.extend(_text(comment, COMMENT_LINE_SIZE))

    result.extend(sauce_to_bytes(record, file_size=len(data)))
    return bytes(result)
