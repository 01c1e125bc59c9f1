"""Tests for Synchronet Ctrl-A and Renegade pipe color codes."""

import pytest

from bbs_ansi_html import ConversionOptions, ansi_to_html
from bbs_ansi_html.codec.bbs_codes import apply_renegade, apply_synchronet
from bbs_ansi_html.core.color import Color, ColorState


SYNCHRONET = ConversionOptions(synchronet_ctrl_a=True)
RENEGADE = ConversionOptions(renegade_pipe=True)


def _wrap(body: str) -> str:
    return f'<pre class="ansi"><ans-07>{body}</ans-07></pre>'


class TestApplySynchronet:
    """Selector table."""

    @pytest.mark.parametrize("selector,fg", [
        ("k", 0), ("b", 1), ("g", 2), ("c", 3),
        ("r", 4), ("m", 5), ("y", 6), ("w", 7),
        ("K", 8), ("B", 9), ("R", 12), ("W", 15),
    ])
    def test_hues(self, selector: str, fg: int) -> None:
        state = apply_synchronet(selector, ColorState())
        assert state.fg == Color.cga(fg)
        assert state.bg == Color.DEFAULT_BG

    def test_background_digits(self) -> None:
        state = apply_synchronet("4", ColorState(Color.cga(14), Color.cga(0)))
        assert state == ColorState(Color.cga(14), Color.cga(4))

    def test_digits_above_seven_ignored(self) -> None:
        assert apply_synchronet("8", ColorState()) == ColorState()

    def test_high_intensity_is_idempotent(self) -> None:
        once = apply_synchronet("h", ColorState(Color.cga(4), Color.cga(0)))
        twice = apply_synchronet("H", once)
        assert once.fg == Color.cga(12)
        assert twice == once

    def test_blink_sets_background_bit(self) -> None:
        state = apply_synchronet("i", ColorState(Color.cga(7), Color.cga(1)))
        assert state.bg == Color.cga(9)

    def test_clear_bits(self) -> None:
        state = ColorState(Color.cga(12), Color.cga(9))
        assert apply_synchronet("-", state).fg == Color.cga(4)
        assert apply_synchronet("_", state).bg == Color.cga(1)

    def test_normal_resets(self) -> None:
        state = ColorState(Color.cga(12), Color.cga(9))
        assert apply_synchronet("n", state) == ColorState()
        assert apply_synchronet("N", state) == ColorState()

    def test_unknown_selector(self) -> None:
        state = ColorState(Color.cga(3), Color.cga(5))
        assert apply_synchronet("z", state) == state
        assert apply_synchronet("Z", state) == state

    def test_non_ascii_letters_ignored(self) -> None:
        state = ColorState(Color.cga(3), Color.cga(5))
        # KELVIN SIGN lowercases to "k"
        assert apply_synchronet("\u212a", state) == state
        assert apply_synchronet("\u0130", state) == state


class TestApplyRenegade:
    """Two-digit pipe code mapping."""

    def test_foreground_codes(self) -> None:
        state = ColorState(Color.cga(7), Color.cga(2))
        assert apply_renegade(12, state) == ColorState(Color.cga(12), Color.cga(2))
        assert apply_renegade(0, state).fg == Color.cga(0)

    def test_background_codes(self) -> None:
        state = ColorState(Color.cga(14), Color.cga(0))
        assert apply_renegade(16, state) == ColorState(Color.cga(14), Color.cga(0))
        assert apply_renegade(23, state) == ColorState(Color.cga(14), Color.cga(7))

    def test_out_of_range(self) -> None:
        assert apply_renegade(24, ColorState()) == ColorState()


class TestSynchronetConversion:
    """Ctrl-A codes in the full pipeline."""

    def test_foreground(self) -> None:
        assert '<ans-04>Red' in ansi_to_html(b"\x01rRed", SYNCHRONET)

    def test_bright_foreground(self) -> None:
        assert '<ans-0c>X' in ansi_to_html(b"\x01RX", SYNCHRONET)

    def test_background_and_foreground(self) -> None:
        assert '<ans-4e>X' in ansi_to_html(b"\x01Y\x014X", SYNCHRONET)

    def test_normal_returns_to_default(self) -> None:
        result = ansi_to_html(b"\x01rA\x01nB", SYNCHRONET)
        assert result.endswith('<ans-07>B</ans-07></pre>')

    def test_selector_not_emitted(self) -> None:
        assert _wrap('AB') == ansi_to_html(b"A\x01zB", SYNCHRONET)

    def test_non_ascii_selector_in_utf8_mode(self) -> None:
        options = ConversionOptions(utf8_input=True, synchronet_ctrl_a=True)
        assert _wrap('X') == ansi_to_html("\x01\u212aX".encode("utf-8"), options)

    def test_disabled_shows_glyph(self) -> None:
        assert '☺rX' in ansi_to_html(b"\x01rX")

    def test_trailing_ctrl_a_flushed(self) -> None:
        assert _wrap('A☺') == ansi_to_html(b"A\x01", SYNCHRONET)

    def test_code_enables_soft_wrap(self) -> None:
        result = ansi_to_html(b"\x01w" + b"X" * 85, SYNCHRONET)
        counts = [line.count('X') for line in result.split('\n')]
        assert counts == [80, 5]


class TestRenegadeConversion:
    """Pipe codes in the full pipeline."""

    def test_foreground(self) -> None:
        assert '<ans-04>Text' in ansi_to_html("|04Text", RENEGADE)

    def test_bright_foreground(self) -> None:
        assert '<ans-0c>X' in ansi_to_html("|12X", RENEGADE)

    def test_background(self) -> None:
        assert '<ans-17>X' in ansi_to_html("|17X", RENEGADE)
        assert '<ans-77>X' in ansi_to_html("|23X", RENEGADE)

    def test_foreground_keeps_background(self) -> None:
        assert '<ans-1e>X' in ansi_to_html("|17|14X", RENEGADE)

    def test_escaped_pipe(self) -> None:
        assert '|04Text' in ansi_to_html("||04Text", RENEGADE)

    @pytest.mark.parametrize("code", ["24", "31", "99"])
    def test_invalid_codes_discarded(self, code: str) -> None:
        assert _wrap('X') == ansi_to_html(f"|{code}X", RENEGADE)

    def test_single_digit_then_text(self) -> None:
        assert _wrap('|0XText') == ansi_to_html("|0XText", RENEGADE)

    def test_lone_pipe(self) -> None:
        assert _wrap('|Hello') == ansi_to_html("|Hello", RENEGADE)

    def test_pipe_before_escape(self) -> None:
        assert '|</ans-07><ans-04>X' in ansi_to_html("|\x1b[31mX", RENEGADE)

    def test_trailing_prefix_flushed(self) -> None:
        assert _wrap('A|') == ansi_to_html("A|", RENEGADE)
        assert _wrap('A|5') == ansi_to_html("A|5", RENEGADE)

    def test_long_pipe_run(self) -> None:
        result = ansi_to_html("|" * 10001, RENEGADE)
        assert result.count('|') == 5001

    def test_disabled_is_literal(self) -> None:
        assert _wrap('|04Text') == ansi_to_html("|04Text")


class TestBothDialects:
    """Dialects are independent and may be combined."""

    def test_combined(self) -> None:
        options = ConversionOptions(synchronet_ctrl_a=True, renegade_pipe=True)
        assert '<ans-14>X' in ansi_to_html(b"\x01r|17X", options)

    def test_with_ansi(self) -> None:
        options = ConversionOptions(synchronet_ctrl_a=True, renegade_pipe=True)
        result = ansi_to_html(b"\x1b[44m\x01W|00X", options)
        assert '<ans-10>X' in result
