"""HTML output for converted ANSI art."""

from bbs_ansi_html.core.color import Color, ColorMode, ColorState, color_to_hex
from bbs_ansi_html.core.constants import WRAP_COLUMN


PRE_OPEN = '<pre class="ansi">'
PRE_CLOSE = '</pre>'

_HTML_ESCAPES = {
    '<': '&lt;',
    '>': '&gt;',
    '&': '&amp;',
    '"': '&quot;',
    "'": '&apos;',
}

_EXTENDED_TAGS = {
    ColorMode.PALETTE_256: "ans-256",
    ColorMode.RGB: "ans-rgb",
}


def open_tag(state: ColorState, kind: ColorMode) -> str:
    """
    Render the opening tag for a color state.

    ``kind`` is CGA for ``<ans-KF>`` (K = background, F = foreground) or an
    extended mode naming the ``ans-256``/``ans-rgb`` tag. A channel still in
    CGA mode inside an extended tag carries a ``fg-H``/``bg-H`` fallback.
    """
    if kind is ColorMode.CGA:
        return f"<ans-{_nibble(state.bg)}{_nibble(state.fg)}>"
    fg = _attribute(state.fg, "fg")
    bg = _attribute(state.bg, "bg")
    return f'<{_EXTENDED_TAGS[kind]} fg="{fg}" bg="{bg}">'


def close_tag(state: ColorState, kind: ColorMode) -> str:
    """Render the closing tag matching ``open_tag``."""
    if kind is ColorMode.CGA:
        return f"</ans-{_nibble(state.bg)}{_nibble(state.fg)}>"
    return f"</{_EXTENDED_TAGS[kind]}>"


def _nibble(color: Color) -> str:
    assert isinstance(color.value, int)
    return color_to_hex(color.value)


def _attribute(color: Color, channel: str) -> str:
    if color.is_extended:
        return color.attribute_value()
    return f"{channel}-{_nibble(color)}"


class HtmlEmitter:
    """
    Accumulates the HTML result of one conversion.

    Tracks the visual column for soft wrapping, whether the current line has
    seen an escape sequence, and save-position suppression. Color tags are
    only written when the color state actually changes.
    """

    def __init__(self, wrap_column: int = WRAP_COLUMN):
        self.wrap_column = wrap_column
        self.state = ColorState()
        self.kind = ColorMode.CGA
        self.column = 0
        self.line_has_escape = False
        self.suppressed = False
        self._parts: list[str] = []

    def open(self) -> None:
        """Start the document with the wrapper and the default color tag."""
        self._parts.append(PRE_OPEN)
        self._parts.append(open_tag(self.state, self.kind))

    def close(self) -> str:
        """Balance the open color tag, close the wrapper and return the HTML."""
        self._parts.append(close_tag(self.state, self.kind))
        self._parts.append(PRE_CLOSE)
        return ''.join(self._parts)

    def mark_escape(self) -> None:
        """Record that the current line carried an escape sequence."""
        self.line_has_escape = True

    def switch_color(self, new: ColorState, extended_mode: ColorMode | None = None) -> None:
        """Close the current tag and open one for ``new`` if colors differ."""
        if new == self.state:
            return
        self._parts.append(close_tag(self.state, self.kind))
        self.kind = self._resolve_kind(new, extended_mode)
        self.state = new
        self._parts.append(open_tag(self.state, self.kind))

    def _resolve_kind(self, state: ColorState, extended_mode: ColorMode | None) -> ColorMode:
        modes = {c.mode for c in (state.fg, state.bg) if c.is_extended}
        if not modes:
            return ColorMode.CGA
        if len(modes) == 1:
            return modes.pop()
        # Foreground and background in different extended modes
        if extended_mode in modes:
            return extended_mode
        if self.kind in modes:
            return self.kind
        return state.fg.mode

    def emit(self, char: str) -> None:
        """Write one literal character."""
        if self.suppressed:
            return

        if char == '\r':
            return
        if char == '\n':
            self._parts.append('\n')
            self.column = 0
            self.line_has_escape = False
            return

        # Soft return, only for lines that carried escape sequences
        if self.line_has_escape and self.column >= self.wrap_column:
            self._parts.append('\n')
            self.column = 0

        self._parts.append(_HTML_ESCAPES.get(char, char))
        self.column += 1

    def emit_text(self, text: str) -> None:
        for char in text:
            self.emit(char)
