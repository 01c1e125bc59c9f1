"""SAUCE record data structure."""

import re
from dataclasses import dataclass, field


_CCYYMMDD = re.compile(r'[0-9]{8}')


@dataclass(frozen=True)
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    SAUCE is a metadata format used by the BBS/ANSI art scene to embed
    information about artwork in files. See: https://www.acid.org/info/sauce/sauce.htm

    Width and height are informational only and are never checked against
    the actual content.
    """
    title: str = ""
    author: str = ""
    group: str = ""
    date: str = ""  # CCYYMMDD as stored
    width: int = 0
    height: int = 0
    comments: tuple[str, ...] = field(default_factory=tuple)
    font: str = ""

    @property
    def iso_date(self) -> str:
        """Date as CCYY-MM-DD, or the raw value if it is not 8 digits."""
        if _CCYYMMDD.fullmatch(self.date):
            return f"{self.date[:4]}-{self.date[4:6]}-{self.date[6:]}"
        return self.date

    def formatted_lines(self) -> list[str]:
        """``Key: Value`` lines for every non-empty field."""
        lines = []
        if self.title:
            lines.append(f"Title: {self.title}")
        if self.author:
            lines.append(f"Author: {self.author}")
        if self.group:
            lines.append(f"Group: {self.group}")
        if self.date:
            lines.append(f"Date: {self.iso_date}")
        if self.width or self.height:
            lines.append(f"Size: {self.width}x{self.height}")
        if self.font:
            lines.append(f"Font: {self.font}")
        lines.extend(f"Comment: {comment}" for comment in self.comments)
        return lines

    def __str__(self) -> str:
        """Human-readable representation."""
        lines = self.formatted_lines()
        return "\n".join(lines) if lines else "(No SAUCE metadata)"
