"""Conversion options."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """
    Switches controlling how input is interpreted.

    All options are independent and default to off, which gives plain
    CP437 input with standard ANSI escape sequences.
    """
    utf8_input: bool = False         # Input is UTF-8 text, only C0 controls use CP437 glyphs
    synchronet_ctrl_a: bool = False  # Synchronet Ctrl-A color codes
    renegade_pipe: bool = False      # Renegade |00-|23 pipe codes
