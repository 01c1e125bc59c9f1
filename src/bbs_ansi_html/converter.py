"""Conversion of ANSI/BBS art to HTML."""

from bbs_ansi_html.codec.ansi_parser import AnsiParser
from bbs_ansi_html.core.constants import SUB
from bbs_ansi_html.core.options import ConversionOptions
from bbs_ansi_html.errors import ConversionError
from bbs_ansi_html.logging import get_logger
from bbs_ansi_html.render.html import HtmlEmitter
from bbs_ansi_html.sauce.reader import locate_sauce, parse_sauce

log = get_logger(__name__)


def normalize_input(data: bytes | str, options: ConversionOptions) -> str:
    """
    Turn caller input into the unit string the parser consumes.

    CP437 mode: one character per byte, code point == byte value.
    UTF-8 mode: decoded text; invalid UTF-8 raises ConversionError.
    """
    if isinstance(data, str):
        return data
    if options.utf8_input:
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ConversionError(f"Input is not valid UTF-8: {e}") from e
    return data.decode('latin-1')


class Converter:
    """
    Runs a single conversion.

    Owns the emitter and parser for one call; nothing is shared between
    conversions.
    """

    def __init__(self, options: ConversionOptions | None = None):
        self.options = options or ConversionOptions()
        self.emitter = HtmlEmitter()
        self.parser = AnsiParser(self.emitter, self.options)

    def convert(self, units: str) -> str:
        """Convert a normalized unit string to an HTML fragment."""
        self.emitter.open()

        location = locate_sauce(units)

        # Content stops at the first SUB or at the trailer, whichever is earlier
        content_end = len(units)
        sub_pos = units.find(SUB)
        if sub_pos != -1:
            content_end = sub_pos
        if location is not None:
            content_end = min(content_end, location.content_end)

        self.parser.feed(units[:content_end])
        self.parser.finish()

        if location is not None:
            record = parse_sauce(units, location)
            log.debug(
                "sauce_found",
                offset=location.sauce_pos,
                comments=len(record.comments) if record else 0,
            )
            if record is not None:
                lines = record.formatted_lines()
                if lines:
                    self.emitter.emit('\n')
                    self.emitter.emit_text(''.join(f"{line}\n" for line in lines))

            self._convert_tail(units[location.tail_pos:])
        else:
            log.debug("sauce_absent")

        return self.emitter.close()

    def _convert_tail(self, tail: str) -> None:
        """Process content found after the SAUCE record, up to the next SUB."""
        if all(char in '\x00\x1a' for char in tail):
            return

        self.emitter.emit('\n')
        sub_pos = tail.find(SUB)
        self.parser.feed(tail if sub_pos == -1 else tail[:sub_pos])
        self.parser.finish()


def ansi_to_html(data: bytes | str, options: ConversionOptions | None = None) -> str:
    """
    Convert CP437 (or UTF-8) ANSI/BBS art to an HTML fragment.

    The result is a ``<pre class="ansi">`` element containing ``<ans-KF>``,
    ``<ans-256>`` and ``<ans-rgb>`` color elements for an external
    presentation layer to style.

    Example:
        >>> ansi_to_html(b"Hello")
        '<pre class="ansi"><ans-07>Hello</ans-07></pre>'
    """
    options = options or ConversionOptions()
    units = normalize_input(data, options)
    log.debug("conversion_started", units=len(units), utf8=options.utf8_input)
    html = Converter(options).convert(units)
    log.debug("conversion_finished", size=len(html))
    return html
