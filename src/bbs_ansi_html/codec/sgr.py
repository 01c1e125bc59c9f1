"""SGR (Select Graphic Rendition) color processing."""

from dataclasses import dataclass

from bbs_ansi_html.core.color import (
    Color,
    ColorMode,
    ColorState,
    ansi_bright_to_cga,
    ansi_to_cga,
)
from bbs_ansi_html.core.constants import MAX_PARAM_DIGITS, PARAM_OUT_OF_RANGE


@dataclass(frozen=True)
class SgrResult:
    """Outcome of one SGR sequence."""
    state: ColorState
    # Mode of the channel that most recently received an extended color
    extended_mode: ColorMode | None = None


def parse_param(field: str) -> int:
    """
    Read one CSI parameter field.

    Empty fields count as 0. Fields with more than ``MAX_PARAM_DIGITS``
    significant digits read as ``PARAM_OUT_OF_RANGE``, which no command
    accepts as a valid value.
    """
    digits = field.lstrip('0')
    if not digits:
        return 0
    if len(digits) > MAX_PARAM_DIGITS:
        return PARAM_OUT_OF_RANGE
    return int(digits)


def parse_params(params: str) -> list[int]:
    """Split a CSI parameter string; empty fields count as 0."""
    if not params:
        return [0]
    return [parse_param(p) for p in params.split(';')]


def apply_sgr(params: str, state: ColorState) -> SgrResult:
    """
    Apply an SGR parameter string to a color state.

    Parameters are applied left to right against a working copy of the
    colors. Unknown codes are ignored without affecting the others.
    """
    codes = parse_params(params)
    fg, bg = state.fg, state.bg
    extended_mode: ColorMode | None = None

    i = 0
    while i < len(codes):
        code = codes[i]

        if code == 0:
            fg, bg = Color.DEFAULT_FG, Color.DEFAULT_BG
        elif code == 1:
            fg = fg.with_intensity()
        elif code in (2, 22):
            fg = fg.without_intensity()
        elif code in (5, 6):
            # Blink is shown as a bright background
            bg = bg.with_intensity()
        elif code == 25:
            bg = bg.without_intensity()
        elif code == 7:
            fg, bg = bg, fg
        elif 30 <= code <= 37:
            fg = Color.cga(fg.intensity | ansi_to_cga(code - 30))
        elif code == 39:
            fg = Color.DEFAULT_FG
        elif 40 <= code <= 47:
            bg = Color.cga(bg.intensity | ansi_to_cga(code - 40))
        elif code == 49:
            bg = Color.DEFAULT_BG
        elif 90 <= code <= 97:
            fg = Color.cga(ansi_bright_to_cga(code - 90))
        elif 100 <= code <= 107:
            bg = Color.cga(ansi_bright_to_cga(code - 100))
        elif code in (38, 48):
            color, consumed = _extended_color(codes, i + 1)
            i += consumed
            if color is not None:
                if code == 38:
                    fg = color
                else:
                    bg = color
                extended_mode = color.mode

        i += 1

    return SgrResult(ColorState(fg, bg), extended_mode)


def _extended_color(codes: list[int], start: int) -> tuple[Color | None, int]:
    """
    Read a 38/48 sub-sequence starting at ``start``.

    Returns the color (None if malformed) and how many parameters were
    consumed after the 38/48 itself.
    """
    if start >= len(codes):
        return None, 0

    selector = codes[start]
    if selector == 5:
        # 256-color: 38;5;n
        if start + 1 >= len(codes):
            return None, 1
        index = codes[start + 1]
        if 0 <= index <= 255:
            return Color.from_256(index), 2
        return None, 2
    if selector == 2:
        # True color: 38;2;r;g;b
        rgb = codes[start + 1:start + 4]
        consumed = 1 + len(rgb)
        if len(rgb) == 3 and all(0 <= c <= 255 for c in rgb):
            return Color.from_rgb(*rgb), consumed
        return None, consumed

    # Unknown selector
    return None, 1
