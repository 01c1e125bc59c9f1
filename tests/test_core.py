"""Tests for core data structures and the CP437 codec."""

import pytest

from bbs_ansi_html.codec.cp437 import cp437_char, cp437_to_unicode, decode_field
from bbs_ansi_html.core.color import (
    Color,
    ColorMode,
    ColorState,
    ansi_bright_to_cga,
    ansi_to_cga,
    color_to_hex,
)
from bbs_ansi_html.core.constants import CGA_COLORS, CP437_TO_UNICODE
from bbs_ansi_html.core.options import ConversionOptions


class TestColor:
    """Tests for Color class."""

    def test_defaults(self) -> None:
        assert Color.DEFAULT_FG == Color.cga(7)
        assert Color.DEFAULT_BG == Color.cga(0)
        state = ColorState()
        assert state.fg == Color.cga(7)
        assert state.bg == Color.cga(0)
        assert state.is_extended is False

    def test_cga(self) -> None:
        color = Color.cga(12)
        assert color.mode == ColorMode.CGA
        assert color.value == 12
        assert color.is_extended is False

    def test_from_256(self) -> None:
        color = Color.from_256(196)
        assert color.mode == ColorMode.PALETTE_256
        assert color.value == 196
        assert color.is_extended is True

    def test_from_rgb(self) -> None:
        color = Color.from_rgb(255, 128, 64)
        assert color.mode == ColorMode.RGB
        assert color.value == (255, 128, 64)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            Color.cga(16)
        with pytest.raises(ValueError):
            Color.from_256(256)
        with pytest.raises(ValueError):
            Color.from_rgb(0, 300, 0)

    def test_intensity_bit(self) -> None:
        assert Color.cga(4).with_intensity() == Color.cga(12)
        assert Color.cga(12).with_intensity() == Color.cga(12)
        assert Color.cga(12).without_intensity() == Color.cga(4)
        assert Color.cga(12).intensity == 8
        assert Color.cga(4).intensity == 0

    def test_intensity_ignored_on_extended(self) -> None:
        color = Color.from_256(9)
        assert color.with_intensity() is color
        assert color.without_intensity() is color
        assert color.intensity == 0

    def test_attribute_value(self) -> None:
        assert Color.from_256(17).attribute_value() == "17"
        assert Color.from_rgb(10, 20, 30).attribute_value() == "10,20,30"

    def test_ansi_to_cga(self) -> None:
        assert [ansi_to_cga(n) for n in range(8)] == [0, 4, 2, 6, 1, 5, 3, 7]
        assert [ansi_bright_to_cga(n) for n in range(8)] == [8, 12, 10, 14, 9, 13, 11, 15]

    def test_color_to_hex(self) -> None:
        assert color_to_hex(0) == "0"
        assert color_to_hex(9) == "9"
        assert color_to_hex(10) == "a"
        assert color_to_hex(15) == "f"
        assert color_to_hex(16) == "0"


class TestConversionOptions:

    def test_defaults_off(self) -> None:
        options = ConversionOptions()
        assert options.utf8_input is False
        assert options.synchronet_ctrl_a is False
        assert options.renegade_pipe is False


class TestCp437:
    """Tests for the code-page table and helpers."""

    def test_table_size(self) -> None:
        assert len(CP437_TO_UNICODE) == 256
        assert len(CGA_COLORS) == 16

    def test_known_glyphs(self) -> None:
        assert CP437_TO_UNICODE[0x00] == '\x00'
        assert CP437_TO_UNICODE[0x01] == '☺'
        assert CP437_TO_UNICODE[0x41] == 'A'
        assert CP437_TO_UNICODE[0x7F] == '⌂'
        assert CP437_TO_UNICODE[0xB0] == '░'
        assert CP437_TO_UNICODE[0xC4] == '─'
        assert CP437_TO_UNICODE[0xDB] == '█'
        assert CP437_TO_UNICODE[0xE1] == 'ß'
        assert CP437_TO_UNICODE[0xFE] == '■'
        assert CP437_TO_UNICODE[0xFF] == '\u00a0'

    def test_printable_ascii_is_identity(self) -> None:
        for code in range(0x20, 0x7F):
            assert CP437_TO_UNICODE[code] == chr(code)

    def test_cp437_char_fallback(self) -> None:
        assert cp437_char(0xDA) == '┌'
        assert cp437_char(0x100) == '\ufffd'

    def test_cp437_to_unicode(self) -> None:
        assert cp437_to_unicode(bytes([0xDA, 0xC4, 0xBF])) == '┌─┐'

    def test_decode_field_trims(self) -> None:
        units = "Title" + " " * 10 + "\x00" * 5
        assert decode_field(units, 0, 20) == "Title"

    def test_decode_field_maps_high_bytes(self) -> None:
        units = "\xdb\xb0  "
        assert decode_field(units, 0, 4) == "█░"

    def test_decode_field_keeps_inner_spaces(self) -> None:
        assert decode_field("A B  ", 0, 5) == "A B"
