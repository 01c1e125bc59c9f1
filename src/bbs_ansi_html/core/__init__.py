"""Core data structures for ANSI art conversion."""

from bbs_ansi_html.core.color import Color, ColorMode, ColorState
from bbs_ansi_html.core.options import ConversionOptions

__all__ = ["Color", "ColorMode", "ColorState", "ConversionOptions"]
