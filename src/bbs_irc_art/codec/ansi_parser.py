"""ANSI escape sequence decoder with a minimal virtual terminal."""

import logging
from enum import Enum, auto

from bbs_irc_art.codec.base import ArtDecoder
from bbs_irc_art.codec.cp437 import cp437_to_unicode
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.color import ANSI_16, DEFAULT_BG, DEFAULT_FG
from bbs_irc_art.core.constants import CR, ESC, LF, SUB, TAB, TAB_SIZE

logger = logging.getLogger(__name__)

# Larger parameters are clamped; no art needs to jump this far
MAX_PARAM = 9999

PRIVATE_MARKERS = "<=>?"


class State(Enum):
    """Parser states."""
    GROUND = auto()
    ESCAPE = auto()
    CSI = auto()


class AnsiDecoder(ArtDecoder):
    """
    Stateful ANSI decoder that processes CP437 bytes into a Canvas.

    Understands the subset of CSI sequences used by BBS art: SGR colors,
    absolute and relative cursor movement, clear screen and cursor
    save/restore. Anything else is skipped. Input that stops in the
    middle of a sequence simply ends the decode.
    """

    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)
        self.state = State.GROUND
        self._params: list[int] = []
        self._current: int | None = None
        self._private = False

    def feed(self, data: bytes) -> None:
        """Process raw bytes (CP437 encoded) into the canvas."""
        self.feed_unicode(cp437_to_unicode(data))

    def feed_unicode(self, text: str) -> None:
        """Process already-decoded text into the canvas."""
        for char in text:
            if self.done:
                return
            if self.state is State.GROUND:
                self._ground(char)
            elif self.state is State.ESCAPE:
                if char == '[':
                    self.state = State.CSI
                    self._params = []
                    self._current = None
                    self._private = False
                else:
                    logger.debug("Ignoring unsupported escape ESC %r", char)
                    self.state = State.GROUND
            else:
                self._collect(char)

    def finish(self) -> None:
        if self.state is not State.GROUND:
            logger.debug("Input ended inside an escape sequence")
            self.state = State.GROUND

    def _ground(self, char: str) -> None:
        if char == ESC:
            self.state = State.ESCAPE
        elif char == LF:
            self.canvas.new_line()
        elif char == CR:
            self.canvas.carriage_return()
        elif char == TAB:
            col = self.canvas.cursor.col
            # A tab that reaches the right edge stops at the wrap
            for _ in range(min(TAB_SIZE - col % TAB_SIZE, self.canvas.width - col)):
                self.put(' ')
        elif char == SUB:
            # EOF marker - stop processing
            self.done = True
        else:
            self.put(char)

    def _collect(self, char: str) -> None:
        """Accumulate CSI parameters until the command byte arrives."""
        if '0' <= char <= '9':
            value = (self._current or 0) * 10 + (ord(char) - ord('0'))
            self._current = min(value, MAX_PARAM)
        elif char == ';':
            self._params.append(self._current or 0)
            self._current = None
        elif char in PRIVATE_MARKERS:
            self._private = True
        else:
            if self._current is not None or self._params:
                self._params.append(self._current or 0)
            self.state = State.GROUND
            if self._private:
                logger.debug("Ignoring private sequence ending in %r", char)
            else:
                self._handle_csi(char, self._params)

    def _handle_csi(self, command: str, params: list[int]) -> None:
        """Handle a complete CSI escape sequence."""
        canvas = self.canvas

        if command == 'm':
            self._handle_sgr(params)
        elif command in ('H', 'f'):
            # Cursor position
            row = params[0] if params else 1
            col = params[1] if len(params) > 1 else 1
            canvas.move_to(row, col)
        elif command == 'A':
            canvas.move_up(_count(params))
        elif command == 'B':
            canvas.move_down(_count(params))
        elif command == 'C':
            canvas.move_forward(_count(params))
        elif command == 'D':
            canvas.move_backward(_count(params))
        elif command == 'J':
            # Erase in display; only "entire screen" matters for art
            if params and params[0] == 2:
                canvas.clear(Cell(' ', self.fg, self.bg, self.bold, self.bright, self.ice))
        elif command == 's':
            canvas.save_cursor()
        elif command == 'u':
            canvas.restore_cursor()
        else:
            logger.debug("Ignoring CSI command %r with params %s", command, params)

    def _handle_sgr(self, params: list[int]) -> None:
        """Handle SGR (Select Graphic Rendition) parameters."""
        if not params:
            params = [0]

        for p in params:
            if p == 0:
                self.reset_attributes()
            elif p == 1:
                self.bold = True
            elif p == 5:
                # Blink doubles as the iCE color (bright background) marker
                self.ice = True
            elif p == 22:
                self.bold = False
            elif p == 25:
                self.ice = False
            elif 30 <= p <= 37:
                self.fg = ANSI_16[p - 30]
                self.bright = False
            elif p == 39:
                self.fg = DEFAULT_FG
            elif 40 <= p <= 47:
                self.bg = ANSI_16[p - 40]
            elif p == 49:
                self.bg = DEFAULT_BG
            elif 90 <= p <= 97:
                self.fg = ANSI_16[p - 90]
                self.bright = True
            elif 100 <= p <= 107:
                self.bg = ANSI_16[p - 100]
                self.ice = True


def _count(params: list[int]) -> int:
    """Repeat count for relative moves; missing or zero means one."""
    return (params[0] if params else 1) or 1


def parse_ansi(data: bytes, width: int = 80) -> Canvas:
    """Decode a complete ANSI byte string onto a new canvas."""
    decoder = AnsiDecoder(Canvas(width=width))
    decoder.feed(data)
    decoder.finish()
    return decoder.canvas
