"""Color representation for ANSI art conversion."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from bbs_ansi_html.core.constants import (
    ANSI_TO_CGA,
    DEFAULT_BG,
    DEFAULT_FG,
    INTENSITY_BIT,
)


class ColorMode(Enum):
    """Color mode of a single channel."""
    CGA = "cga"             # 16-color CGA index (SGR 30-37, 40-47, 90-97, 100-107)
    PALETTE_256 = "256"     # Extended 256-color (SGR 38;5;n, 48;5;n)
    RGB = "rgb"             # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A color value for one channel (foreground or background).

    CGA values are stored in CGA index order (1 = blue, 4 = red), which is
    not the ANSI order used by SGR codes. Use ``ansi_to_cga`` to remap.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    DEFAULT_FG: ClassVar["Color"]
    DEFAULT_BG: ClassVar["Color"]

    @classmethod
    def cga(cls, index: int) -> "Color":
        """Create a Color from a CGA index (0-15)."""
        if not 0 <= index <= 15:
            raise ValueError(f"CGA index must be 0-15, got {index}")
        return cls(ColorMode.CGA, index)

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.PALETTE_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.RGB, (r, g, b))

    @property
    def is_extended(self) -> bool:
        return self.mode is not ColorMode.CGA

    @property
    def intensity(self) -> int:
        """The CGA intensity bit, 0 for extended colors."""
        if self.mode is ColorMode.CGA:
            assert isinstance(self.value, int)
            return self.value & INTENSITY_BIT
        return 0

    def with_intensity(self) -> "Color":
        """Set the high intensity bit (no-op on extended colors)."""
        if self.mode is not ColorMode.CGA:
            return self
        assert isinstance(self.value, int)
        return Color(ColorMode.CGA, self.value | INTENSITY_BIT)

    def without_intensity(self) -> "Color":
        """Clear the high intensity bit (no-op on extended colors)."""
        if self.mode is not ColorMode.CGA:
            return self
        assert isinstance(self.value, int)
        return Color(ColorMode.CGA, self.value & ~INTENSITY_BIT)

    def attribute_value(self) -> str:
        """Raw value as carried in an extended tag attribute."""
        if self.mode is ColorMode.RGB:
            assert isinstance(self.value, tuple)
            return ",".join(str(c) for c in self.value)
        return str(self.value)


Color.DEFAULT_FG = Color(ColorMode.CGA, DEFAULT_FG)
Color.DEFAULT_BG = Color(ColorMode.CGA, DEFAULT_BG)


@dataclass(frozen=True)
class ColorState:
    """Current drawing colors. Channels are independent."""
    fg: Color = Color.DEFAULT_FG
    bg: Color = Color.DEFAULT_BG

    @property
    def is_extended(self) -> bool:
        return self.fg.is_extended or self.bg.is_extended


def color_to_hex(color: int) -> str:
    """Convert a CGA index (0-15) to a lowercase hex nibble."""
    if 0 <= color <= 15:
        return "0123456789abcdef"[color]
    return "0"


def ansi_to_cga(ansi_color: int) -> int:
    """Map an ANSI color number (0-7) to its CGA index."""
    if 0 <= ansi_color <= 7:
        return ANSI_TO_CGA[ansi_color]
    return DEFAULT_FG


def ansi_bright_to_cga(ansi_color: int) -> int:
    """Map a bright ANSI color number (0-7) to its high intensity CGA index."""
    return ansi_to_cga(ansi_color) | INTENSITY_BIT
