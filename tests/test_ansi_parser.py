"""Tests for the ANSI decoder."""

import io

import pytest

from bbs_irc_art.codec import ArtFormat, decode
from bbs_irc_art.codec.ansi_parser import AnsiDecoder, parse_ansi
from bbs_irc_art.core.canvas import Canvas, Cursor
from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.color import ANSI_16, DEFAULT_BG, DEFAULT_FG


def text(canvas: Canvas, row: int = 0) -> str:
    """The characters of one row with trailing spaces removed."""
    return ''.join(canvas[x, row].char for x in range(canvas.width)).rstrip()


class TestGround:
    """Plain characters and bare control codes."""

    def test_red_letter_then_reset(self) -> None:
        canvas = parse_ansi(b"\x1b[31mA\x1b[0m", width=80)
        cell = canvas[0, 0]
        assert cell.char == 'A'
        assert cell.fg == ANSI_16[1]
        assert cell.bg == DEFAULT_BG
        assert cell.bold is False
        assert canvas[1, 0] == Cell()

    def test_cp437_translation(self) -> None:
        canvas = parse_ansi(b"\xdb\xb0\xdf")
        assert text(canvas) == "█░▀"

    def test_tab_expands_to_multiple_of_eight(self) -> None:
        canvas = parse_ansi(b"ab\x1b[44m\tc")
        assert canvas[8, 0].char == 'c'
        for x in range(2, 8):
            assert canvas[x, 0].char == ' '
            # Tab stops are written as real cells in the current colors
            assert canvas[x, 0].bg == ANSI_16[4]

    def test_tab_at_stop_advances_full_width(self) -> None:
        canvas = parse_ansi(b"\tx")
        assert canvas[8, 0].char == 'x'

    def test_tab_near_right_edge_stops_at_wrap(self) -> None:
        canvas = parse_ansi(b"abcdefghi\tX", width=10)
        assert canvas[9, 0].char == ' '
        assert canvas[0, 1].char == 'X'
        assert canvas.current_height == 2

    def test_tab_stops_restart_after_wrap(self) -> None:
        canvas = parse_ansi(b"abcdefghi\t\tX", width=10)
        assert canvas[8, 1].char == 'X'

    def test_newline_and_carriage_return(self) -> None:
        canvas = parse_ansi(b"ab\r\ncd\rX")
        assert text(canvas, 0) == "ab"
        assert text(canvas, 1) == "Xd"
        assert canvas.current_height == 2

    def test_sub_stops_decoding(self) -> None:
        canvas = parse_ansi(b"ab\x1acd\n\nef")
        assert text(canvas) == "ab"
        assert canvas.current_height == 1

    def test_wraps_at_width(self) -> None:
        canvas = parse_ansi(b"abcde", width=3)
        assert text(canvas, 0) == "abc"
        assert text(canvas, 1) == "de"


class TestEscapeSequences:
    """CSI parsing and command dispatch."""

    def test_truncated_sequence_leaves_canvas_untouched(self) -> None:
        canvas = parse_ansi(b"\x1b[3")
        assert canvas.content_bounds() is None
        assert canvas.cursor == Cursor(0, 0)
        assert canvas.current_height == 1

    def test_unknown_escape_is_dropped(self) -> None:
        canvas = parse_ansi(b"\x1bXab")
        assert text(canvas) == "ab"

    def test_unknown_csi_command_is_ignored(self) -> None:
        canvas = parse_ansi(b"a\x1b[5Zb")
        assert text(canvas) == "ab"

    def test_private_sequences_are_ignored(self) -> None:
        canvas = parse_ansi(b"\x1b[?7h\x1b[?25la\x1b[=1m")
        assert text(canvas) == "a"
        assert canvas[0, 0].bold is False

    def test_sequence_split_across_chunks(self) -> None:
        decoder = AnsiDecoder(Canvas(width=80))
        decoder.feed(b"\x1b[3")
        decoder.feed(b"2mG")
        decoder.finish()
        assert decoder.canvas[0, 0].fg == ANSI_16[2]

    def test_absolute_position(self) -> None:
        canvas = parse_ansi(b"\x1b[3;5Hx\x1b[Hy\x1b[2fz")
        assert canvas[4, 2].char == 'x'
        assert canvas[0, 0].char == 'y'
        assert canvas[0, 1].char == 'z'

    def test_relative_moves(self) -> None:
        canvas = parse_ansi(b"\x1b[5C\x1b[2Ba\x1b[Ab\x1b[3Dc\x1b[0Cd")
        assert canvas[5, 2].char == 'a'
        assert canvas[4, 1].char == 'c'
        # Zero counts as one, so 'd' lands on top of 'b'
        assert canvas[5, 1].char == ' '
        assert canvas[6, 1].char == 'd'
        assert canvas[6, 1].fg == DEFAULT_FG

    def test_huge_parameter_is_clamped(self) -> None:
        canvas = parse_ansi(b"\x1b[99999999Cx", width=10)
        assert canvas[9, 0].char == 'x'
        assert canvas.current_height == 2

    def test_repeated_moves_cannot_grow_past_cap(self) -> None:
        decoder = AnsiDecoder(Canvas(width=10, max_rows=50))
        decoder.feed(b"\x1b[9999B" * 300 + b"x")
        decoder.finish()
        assert decoder.canvas.current_height == 50
        assert decoder.canvas[0, 49].char == 'x'

    def test_save_and_restore_cursor(self) -> None:
        canvas = parse_ansi(b"ab\x1b[s\n\ncd\x1b[uX")
        assert text(canvas, 0) == "abX"
        assert text(canvas, 2) == "cd"

    def test_clear_screen_uses_current_colors(self) -> None:
        canvas = parse_ansi(b"xx\nyy\x1b[44m\x1b[2Jz")
        assert canvas.current_height == 2
        assert canvas[0, 0].char == 'z'
        assert canvas[1, 0] == Cell(' ', DEFAULT_FG, ANSI_16[4])
        assert canvas[1, 1].bg == ANSI_16[4]

    def test_other_erase_modes_are_ignored(self) -> None:
        canvas = parse_ansi(b"xx\x1b[J\x1b[1J")
        assert text(canvas) == "xx"


class TestSgr:
    """SGR attribute handling."""

    def test_bold_and_bright_are_independent(self) -> None:
        canvas = parse_ansi(b"\x1b[1;31ma\x1b[22;91mb")
        assert (canvas[0, 0].bold, canvas[0, 0].bright) == (True, False)
        assert (canvas[1, 0].bold, canvas[1, 0].bright) == (False, True)
        assert canvas[1, 0].fg == ANSI_16[1]

    def test_normal_foreground_clears_bright(self) -> None:
        canvas = parse_ansi(b"\x1b[92ma\x1b[32mb")
        assert canvas[1, 0].bright is False

    def test_ice_colors(self) -> None:
        canvas = parse_ansi(b"\x1b[5;44ma\x1b[25mb\x1b[103mc")
        assert (canvas[0, 0].bg, canvas[0, 0].ice) == (ANSI_16[4], True)
        assert (canvas[1, 0].bg, canvas[1, 0].ice) == (ANSI_16[4], False)
        assert (canvas[2, 0].bg, canvas[2, 0].ice) == (ANSI_16[3], True)

    def test_default_colors(self) -> None:
        canvas = parse_ansi(b"\x1b[35;46m\x1b[39;49ma")
        assert canvas[0, 0] == Cell('a')

    @pytest.mark.parametrize("reset", [b"\x1b[0m", b"\x1b[m", b"\x1b[1;m"])
    def test_reset_restores_defaults(self, reset: bytes) -> None:
        canvas = parse_ansi(b"\x1b[1;5;93;45m" + reset + b"a")
        assert canvas[0, 0] == Cell('a')

    def test_unrecognized_parameters_are_ignored(self) -> None:
        canvas = parse_ansi(b"\x1b[3;7;38;5;196;31ma")
        assert canvas[0, 0].fg == ANSI_16[1]


class TestStreamDecode:
    """Decoding from a stream through the codec entry point."""

    def test_byte_limit(self) -> None:
        canvas = decode(ArtFormat.ANSI, Canvas(width=80), io.BytesIO(b"abcdef"), limit=3)
        assert text(canvas) == "abc"

    def test_limit_splits_a_sequence(self) -> None:
        canvas = decode(ArtFormat.ANSI, Canvas(width=80), io.BytesIO(b"a\x1b[31mb"), limit=4)
        assert text(canvas) == "a"

    def test_zero_limit_means_unlimited(self) -> None:
        canvas = decode(ArtFormat.ANSI, Canvas(width=80), io.BytesIO(b"abc"), limit=0)
        assert text(canvas) == "abc"

    def test_large_input_spans_chunks(self) -> None:
        data = (b"\x1b[31m" + b"x" * 79 + b"\r\n") * 300
        canvas = decode(ArtFormat.ANSI, Canvas(width=80), io.BytesIO(data))
        assert canvas.current_height == 301
        assert canvas[78, 299].fg == ANSI_16[1]

    def test_read_errors_propagate(self) -> None:
        class BrokenStream(io.RawIOBase):
            def read(self, size: int = -1) -> bytes:
                raise OSError("disk on fire")

        with pytest.raises(OSError):
            decode(ArtFormat.ANSI, Canvas(width=80), BrokenStream())
