"""Render a canvas to ANSI escape sequences."""

from typing import NamedTuple

from bbs_irc_art.codec.cp437 import unicode_to_cp437
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.color import sgr_index
from bbs_irc_art.core.constants import CSI, RESET


class _Attrs(NamedTuple):
    bold: bool
    fg: int  # ANSI_16 index, bright half already applied
    bg: int


def _attrs(cell: Cell) -> _Attrs:
    return _Attrs(cell.bold, sgr_index(cell.fg, cell.bright), sgr_index(cell.bg, cell.ice))


DEFAULT_ATTRS = _attrs(Cell())


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences.

    Every line starts with a reset and is written up to the canvas-wide
    content bounds, so all lines share one right edge. SGR codes are only
    emitted when the quantized attributes change.
    """

    def __init__(self, line_ending: str = "\n"):
        self.line_ending = line_ending

    def render(self, canvas: Canvas) -> str:
        """Render canvas to ANSI string."""
        bounds = canvas.content_bounds()
        if bounds is None:
            return ""

        lines: list[str] = []
        for y, row in enumerate(canvas.rows()):
            if y > bounds.max_row:
                break

            line_parts: list[str] = [RESET]
            last = DEFAULT_ATTRS
            for cell in row[:bounds.max_col + 1]:
                attrs = _attrs(cell)
                if attrs != last:
                    line_parts.append(_sgr(last, attrs))
                    last = attrs
                line_parts.append(cell.char)

            line_parts.append(RESET)
            line_parts.append(self.line_ending)
            lines.append(''.join(line_parts))

        return ''.join(lines)

    def encode(self, canvas: Canvas) -> bytes:
        """Render canvas to CP437 bytes."""
        return unicode_to_cp437(self.render(canvas))


def _sgr(last: _Attrs, attrs: _Attrs) -> str:
    """Build the SGR sequence that moves the terminal from ``last`` to ``attrs``."""
    sgr_parts: list[str] = []

    if attrs.bold != last.bold:
        sgr_parts.append('1' if attrs.bold else '22')

    if attrs.fg != last.fg:
        if attrs.fg < 8:
            sgr_parts.append(str(30 + attrs.fg))
        else:
            sgr_parts.append(str(90 + attrs.fg - 8))

    if attrs.bg != last.bg:
        if attrs.bg < 8:
            if last.bg >= 8:
                # 40-47 leave the iCE flag alone
                sgr_parts.append('25')
            sgr_parts.append(str(40 + attrs.bg))
        else:
            sgr_parts.append(str(100 + attrs.bg - 8))

    return f"{CSI}{';'.join(sgr_parts)}m"


def encode_ansi(canvas: Canvas) -> bytes:
    """Serialize a canvas as CP437 ANSI art."""
    return TerminalRenderer().encode(canvas)
