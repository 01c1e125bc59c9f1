"""Shared constants for ANSI art to HTML conversion."""

# Control characters the parser reacts to
ESC = "\x1b"
SUB = "\x1a"
CTRL_A = "\x01"
PIPE = "|"
REPLACEMENT_CHAR = "\ufffd"

# Soft wrap column for lines that carried escape sequences
WRAP_COLUMN = 80

# CSI parameters with more significant digits than this are out of range
MAX_PARAM_DIGITS = 5
PARAM_OUT_OF_RANGE = 10 ** MAX_PARAM_DIGITS

# Most spaces a single cursor-forward sequence produces
MAX_CURSOR_FORWARD = 255

# CP437 to Unicode mapping (bytes 0x00-0xFF)
# Source: https://en.wikipedia.org/wiki/Code_page_437
CP437_TO_UNICODE: tuple[str, ...] = (
    # 0x00: NUL stays NUL, the rest of the C0 range are the PC glyphs
    '\u0000', '☺', '☻', '♥', '♦', '♣', '♠', '•',
    '◘', '○', '◙', '♂', '♀', '♪', '♫', '☼',
    # 0x10
    '►', '◄', '↕', '‼', '¶', '§', '▬', '↨',
    '↑', '↓', '→', '←', '∟', '↔', '▲', '▼',
    # 0x20-0x7E: printable ASCII, 0x7F is the house glyph
    *(chr(code) for code in range(0x20, 0x7F)),
    '⌂',
    # 0x80: accented Latin
    'Ç', 'ü', 'é', 'â', 'ä', 'à', 'å', 'ç',
    'ê', 'ë', 'è', 'ï', 'î', 'ì', 'Ä', 'Å',
    # 0x90
    'É', 'æ', 'Æ', 'ô', 'ö', 'ò', 'û', 'ù',
    'ÿ', 'Ö', 'Ü', '¢', '£', '¥', '₧', 'ƒ',
    # 0xA0
    'á', 'í', 'ó', 'ú', 'ñ', 'Ñ', 'ª', 'º',
    '¿', '⌐', '¬', '½', '¼', '¡', '«', '»',
    # 0xB0: shades and box drawing
    '░', '▒', '▓', '│', '┤', '╡', '╢', '╖',
    '╕', '╣', '║', '╗', '╝', '╜', '╛', '┐',
    # 0xC0
    '└', '┴', '┬', '├', '─', '┼', '╞', '╟',
    '╚', '╔', '╩', '╦', '╠', '═', '╬', '╧',
    # 0xD0: box drawing and half blocks
    '╨', '╤', '╥', '╙', '╘', '╒', '╓', '╫',
    '╪', '┘', '┌', '█', '▄', '▌', '▐', '▀',
    # 0xE0: Greek and math
    'α', 'ß', 'Γ', 'π', 'Σ', 'σ', '\u00B5', 'τ',
    'Φ', 'Θ', 'Ω', 'δ', '∞', 'φ', 'ε', '∩',
    # 0xF0
    '≡', '±', '≥', '≤', '⌠', '⌡', '÷', '≈',
    '°', '\u2219', '\u00B7', '√', 'ⁿ', '²', '■', '\u00A0',
)

# CGA palette in CGA index order (renderer reference only)
CGA_COLORS: tuple[str, ...] = (
    "#000000",  # 0 - Black
    "#0000AA",  # 1 - Blue
    "#00AA00",  # 2 - Green
    "#00AAAA",  # 3 - Cyan
    "#AA0000",  # 4 - Red
    "#AA00AA",  # 5 - Magenta
    "#AA5500",  # 6 - Brown
    "#AAAAAA",  # 7 - Light Gray
    "#555555",  # 8 - Dark Gray
    "#5555FF",  # 9 - Light Blue
    "#55FF55",  # a - Light Green
    "#55FFFF",  # b - Light Cyan
    "#FF5555",  # c - Light Red
    "#FF55FF",  # d - Light Magenta
    "#FFFF55",  # e - Yellow
    "#FFFFFF",  # f - White
)

# ANSI color order (SGR 30-37) to CGA color index
ANSI_TO_CGA: tuple[int, ...] = (0, 4, 2, 6, 1, 5, 3, 7)

# CGA intensity bit (bright foreground / blink background)
INTENSITY_BIT = 0x08

DEFAULT_FG = 7
DEFAULT_BG = 0
