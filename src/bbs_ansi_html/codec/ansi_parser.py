"""ANSI escape sequence parser driving the HTML emitter."""

from enum import Enum, auto

from bbs_ansi_html.codec.bbs_codes import (
    RENEGADE_MAX_CODE,
    apply_renegade,
    apply_synchronet,
)
from bbs_ansi_html.codec.cp437 import cp437_char
from bbs_ansi_html.codec.sgr import apply_sgr, parse_param
from bbs_ansi_html.core.constants import CTRL_A, ESC, MAX_CURSOR_FORWARD, PIPE
from bbs_ansi_html.core.options import ConversionOptions
from bbs_ansi_html.render.html import HtmlEmitter


class ParseState(Enum):
    """Parser states. Exactly one is active at a time."""
    NORMAL = auto()
    ESCAPE = auto()
    CSI = auto()
    SYNCHRONET_CTRL_A = auto()
    RENEGADE_PIPE_1 = auto()
    RENEGADE_PIPE_2 = auto()


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _leading_param(params: str) -> int:
    """First CSI parameter as an int, 0 if missing."""
    return parse_param(params.split(';', 1)[0])


class AnsiParser:
    """
    Stateful parser that turns a normalized character stream into HTML.

    In CP437 mode each character's code point is the raw byte value; in
    UTF-8 mode characters are already decoded text. Colors are tracked by
    the emitter; this class only owns the sequence parsing state.

    Supported:
        - CSI: m (SGR), J (2/3 clear screen), s/u (save/restore), C (forward)
        - CSI H, f, A, B, D, K are accepted with no visual effect
        - ESC 7 / ESC 8 (DEC save/restore)
        - Synchronet Ctrl-A and Renegade pipe codes when enabled
    """

    def __init__(self, emitter: HtmlEmitter, options: ConversionOptions | None = None):
        self.emitter = emitter
        self.options = options or ConversionOptions()
        self.state = ParseState.NORMAL
        self.csi_params = ''
        self.renegade_digit = 0

    def feed(self, units: str) -> None:
        """Process a run of characters."""
        for char in units:
            self._process(char)

    def finish(self) -> None:
        """Flush an unfinished vendor prefix as literal text and reset."""
        if self.state is ParseState.RENEGADE_PIPE_1:
            self.emitter.emit(PIPE)
        elif self.state is ParseState.RENEGADE_PIPE_2:
            self.emitter.emit(PIPE)
            self.emitter.emit(str(self.renegade_digit))
        elif self.state is ParseState.SYNCHRONET_CTRL_A:
            self.emitter.emit(cp437_char(ord(CTRL_A)))
        self.state = ParseState.NORMAL
        self.csi_params = ''

    def _process(self, char: str) -> None:
        # Renegade fallbacks re-run the current character in NORMAL state,
        # so loop instead of recursing.
        while True:
            state = self.state

            if state is ParseState.NORMAL:
                self._process_normal(char)
                return

            if state is ParseState.ESCAPE:
                self._process_escape(char)
                return

            if state is ParseState.CSI:
                self._process_csi(char)
                return

            if state is ParseState.SYNCHRONET_CTRL_A:
                self.emitter.mark_escape()
                self.emitter.switch_color(apply_synchronet(char, self.emitter.state))
                self.state = ParseState.NORMAL
                return

            if state is ParseState.RENEGADE_PIPE_1:
                if _is_digit(char):
                    self.renegade_digit = ord(char) - ord('0')
                    self.state = ParseState.RENEGADE_PIPE_2
                    return
                self.emitter.emit(PIPE)
                self.state = ParseState.NORMAL
                if char == PIPE:
                    # "||" is an escaped literal pipe
                    return
                continue

            # RENEGADE_PIPE_2
            if _is_digit(char):
                code = self.renegade_digit * 10 + (ord(char) - ord('0'))
                if code <= RENEGADE_MAX_CODE:
                    self.emitter.mark_escape()
                    self.emitter.switch_color(apply_renegade(code, self.emitter.state))
                self.state = ParseState.NORMAL
                return
            self.emitter.emit(PIPE)
            self.emitter.emit(str(self.renegade_digit))
            self.state = ParseState.NORMAL

    def _process_normal(self, char: str) -> None:
        code = ord(char)

        if char == ESC:
            self.state = ParseState.ESCAPE
        elif self.options.synchronet_ctrl_a and char == CTRL_A:
            self.state = ParseState.SYNCHRONET_CTRL_A
        elif self.options.renegade_pipe and char == PIPE:
            self.state = ParseState.RENEGADE_PIPE_1
        elif char == '\n':
            self.emitter.emit(char)
        elif char == '\r':
            pass
        elif code < 0x20 or (code >= 0x7F and not self.options.utf8_input):
            self.emitter.emit(cp437_char(code))
        else:
            self.emitter.emit(char)

    def _process_escape(self, char: str) -> None:
        if char == '[':
            self.csi_params = ''
            self.state = ParseState.CSI
            return

        if char == '7':
            self.emitter.suppressed = True
            self.emitter.mark_escape()
        elif char == '8':
            self.emitter.suppressed = False
            self.emitter.mark_escape()
        # Anything else is an unsupported escape and is dropped
        self.state = ParseState.NORMAL

    def _process_csi(self, char: str) -> None:
        if _is_digit(char) or char == ';':
            self.csi_params += char
        elif 0x40 <= ord(char) <= 0x7E:
            params, self.csi_params = self.csi_params, ''
            self.state = ParseState.NORMAL
            self._handle_csi(params, char)
        else:
            self.state = ParseState.NORMAL

    def _handle_csi(self, params: str, command: str) -> None:
        """Handle a complete CSI escape sequence."""
        self.emitter.mark_escape()

        if command == 'm':
            result = apply_sgr(params, self.emitter.state)
            self.emitter.switch_color(result.state, result.extended_mode)
        elif command == 'J':
            # Erase display: simulate a cleared screen with blank lines
            if _leading_param(params) in (2, 3):
                self.emitter.emit_text('\n\n\n')
        elif command == 's':
            self.emitter.suppressed = True
        elif command == 'u':
            self.emitter.suppressed = False
        elif command == 'C':
            # Cursor forward, clamped
            count = min(max(1, _leading_param(params)), MAX_CURSOR_FORWARD)
            self.emitter.emit_text(' ' * count)
        # H, f, A, B, D, K and anything else: no visual effect
