"""BBS vendor color codes: Synchronet Ctrl-A and Renegade pipe codes."""

from bbs_ansi_html.core.color import Color, ColorState

# Synchronet hue letters, in CGA order
_SYNCHRONET_HUES = "kbgcrmyw"

RENEGADE_MAX_CODE = 23


def apply_synchronet(selector: str, state: ColorState) -> ColorState:
    """
    Apply the character following a Ctrl-A.

    Lowercase hue letters select normal intensity foregrounds, uppercase
    the bright ones. Digits 0-7 select the background. Attribute codes
    set or clear bits, so repeating them is harmless.
    """
    fg, bg = state.fg, state.bg

    if selector in _SYNCHRONET_HUES:
        fg = Color.cga(_SYNCHRONET_HUES.index(selector))
    elif selector in _SYNCHRONET_HUES.upper():
        fg = Color.cga(_SYNCHRONET_HUES.upper().index(selector) + 8)
    elif "0" <= selector <= "7":
        bg = Color.cga(ord(selector) - ord("0"))
    elif selector in "Hh":
        fg = fg.with_intensity()
    elif selector in "Ii":
        bg = bg.with_intensity()
    elif selector in "Nn":
        fg, bg = Color.DEFAULT_FG, Color.DEFAULT_BG
    elif selector == "-":
        fg = fg.without_intensity()
    elif selector == "_":
        bg = bg.without_intensity()

    return ColorState(fg, bg)


def apply_renegade(code: int, state: ColorState) -> ColorState:
    """
    Apply a two-digit Renegade pipe code (0-23).

    0-15 select the foreground directly, 16-23 select background 0-7.
    """
    if 0 <= code <= 15:
        return ColorState(Color.cga(code), state.bg)
    if 16 <= code <= RENEGADE_MAX_CODE:
        return ColorState(state.fg, Color.cga(code - 16))
    return state
