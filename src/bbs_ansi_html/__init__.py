"""
bbs-ansi-html: convert BBS-era ANSI art to HTML

Turns CP437 (or UTF-8) text with ANSI escape sequences, BBS vendor color
codes and SAUCE metadata into markup built from a small set of color tags
(<ans-KF>, <ans-256>, <ans-rgb>) for a web component layer to display.

Quick Start:
    >>> import bbs_ansi_html as ah
    >>> ah.ansi_to_html(b"\\x1b[31mRed\\x1b[0m")
    '<pre class="ansi"><ans-07></ans-07><ans-04>Red</ans-04><ans-07></ans-07></pre>'
    >>> html = ah.ansi_to_html(b"|04Red", ah.ConversionOptions(renegade_pipe=True))

Features:
    - Full CP437 glyph mapping, or UTF-8 input
    - SGR colors: 16-color CGA, 256-color palette, 24-bit RGB
    - Synchronet Ctrl-A and Renegade pipe color codes
    - SAUCE/COMNT metadata appended as readable text
    - Soft wrap at column 80 for escape-bearing lines
"""

__version__ = "0.1.0"

# Conversion
from bbs_ansi_html.converter import Converter, ansi_to_html
from bbs_ansi_html.core.options import ConversionOptions
from bbs_ansi_html.errors import ConversionError

# Core types
from bbs_ansi_html.core.color import Color, ColorMode, color_to_hex
from bbs_ansi_html.core.constants import CGA_COLORS, CP437_TO_UNICODE

# SAUCE metadata
from bbs_ansi_html.sauce.record import SauceRecord
from bbs_ansi_html.sauce.reader import parse_sauce, parse_sauce_bytes

# Convenience functions
from bbs_ansi_html.io.reader import convert_file

__all__ = [
    # Version
    "__version__",
    # Conversion
    "ansi_to_html",
    "Converter",
    "ConversionOptions",
    "ConversionError",
    # Core types
    "Color",
    "ColorMode",
    "color_to_hex",
    "CGA_COLORS",
    "CP437_TO_UNICODE",
    # SAUCE
    "SauceRecord",
    "parse_sauce",
    "parse_sauce_bytes",
    # I/O
    "convert_file",
]
