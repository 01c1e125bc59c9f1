"""Exceptions raised by the converter."""


class ConversionError(ValueError):
    """Input could not be converted (e.g. invalid UTF-8 in UTF-8 mode)."""
