"""File I/O for ANSI art files."""

from bbs_ansi_html.io.reader import convert_file, load_bytes

__all__ = ["convert_file", "load_bytes"]
