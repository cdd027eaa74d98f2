"""Render a canvas to mIRC color codes."""

from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.color import (
    ANSI_16,
    ANSI_TO_MIRC,
    DEFAULT_BG,
    DEFAULT_FG,
    MIRC_99,
    Color,
    intensify,
    nearest_color,
)
from bbs_irc_art.core.constants import MIRC_BOLD, MIRC_COLOR, MIRC_DEFAULT_INDEX, MIRC_PLAIN


def mirc_index(color: Color, bright: bool = False, force_16: bool = False) -> int:
    """
    Map a color to a mIRC palette index.

    Colors from the 16-color ANSI palette use the classic mIRC
    equivalents; anything else takes the nearest of the 99 mIRC colors.
    """
    if bright:
        color = intensify(color)
    if force_16:
        return ANSI_TO_MIRC[nearest_color(ANSI_16, color)]
    if color in ANSI_16:
        return ANSI_TO_MIRC[ANSI_16.index(color)]
    return nearest_color(MIRC_99, color)


class MircRenderer:
    """
    Render a Canvas to mIRC color codes.

    Uses the same canvas-wide bounds as the ANSI renderer. Each line is
    written as if it were a fresh chat message: the previous state starts
    at the defaults and no reset is needed at the end. Indices are always
    written with two digits so digits in the art itself stay literal, and
    a default color next to a non-default one is written as index 99.
    """

    def __init__(self, force_16: bool = False, line_ending: str = "\n"):
        self.force_16 = force_16
        self.line_ending = line_ending

    def render(self, canvas: Canvas) -> str:
        """Render canvas to a mIRC string."""
        bounds = canvas.content_bounds()
        if bounds is None:
            return ""

        lines: list[str] = []
        for y, row in enumerate(canvas.rows()):
            if y > bounds.max_row:
                break

            # None stands for "client default"
            last_fg: int | None = None
            last_bg: int | None = None
            last_bold = False
            line_parts: list[str] = []

            for cell in row[:bounds.max_col + 1]:
                fg = self._code(cell.fg, cell.bright, DEFAULT_FG)
                bg = self._code(cell.bg, cell.ice, DEFAULT_BG)

                if (fg, bg) != (last_fg, last_bg):
                    if fg is None and bg is None:
                        line_parts.append(MIRC_PLAIN)
                        last_bold = False
                    else:
                        line_parts.append(f"{MIRC_COLOR}{self._or_default(fg):02d}")
                        # A literal comma right after ^Cnn would be read as a background
                        if bg is not None or bg != last_bg or cell.char == ',':
                            line_parts.append(f",{self._or_default(bg):02d}")
                    last_fg, last_bg = fg, bg

                if cell.bold != last_bold:
                    line_parts.append(MIRC_BOLD)
                    last_bold = cell.bold

                line_parts.append(cell.char)

            line_parts.append(self.line_ending)
            lines.append(''.join(line_parts))

        return ''.join(lines)

    def encode(self, canvas: Canvas) -> bytes:
        """Render canvas to UTF-8 bytes."""
        return self.render(canvas).encode("utf-8")

    def _code(self, color: Color, flag: bool, default: Color) -> int | None:
        if color == default and not flag:
            return None
        return mirc_index(color, flag, self.force_16)

    @staticmethod
    def _or_default(code: int | None) -> int:
        return MIRC_DEFAULT_INDEX if code is None else code


def encode_mirc(canvas: Canvas, force_16: bool = False) -> bytes:
    """Serialize a canvas as UTF-8 mIRC art."""
    return MircRenderer(force_16=force_16).encode(canvas)
