"""mIRC color code decoder."""

import codecs
import logging
from enum import Enum, auto

from bbs_irc_art.codec.base import ArtDecoder
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.color import (
    ANSI_16,
    DEFAULT_BG,
    DEFAULT_FG,
    MIRC_99,
    Color,
    nearest_color,
    reduce_to_16,
)
from bbs_irc_art.core.constants import (
    CR,
    LF,
    MIRC_BOLD,
    MIRC_COLOR,
    MIRC_DEFAULT_INDEX,
    MIRC_ITALIC,
    MIRC_PLAIN,
    MIRC_UNDERLINE,
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class State(Enum):
    """Parser states. The color states implement the one-character peek."""
    GROUND = auto()
    FG_DIGITS = auto()
    AFTER_FG = auto()
    BG_DIGITS = auto()


class MircDecoder(ArtDecoder):
    """
    Stateful decoder for mIRC art (UTF-8 text with inline control codes).

    Color codes have the form ``^C<fg>[,<bg>]`` with one or two digits
    per index and 99 selecting the default color; a bare ``^C`` resets
    colors. Every line starts from the default attributes, as a chat
    client renders each line as a separate message.

    With ``force_16`` every color is replaced by its nearest entry in the
    16-color ANSI palette as it is read.
    """

    def __init__(self, canvas: Canvas, force_16: bool = False) -> None:
        super().__init__(canvas)
        self.force_16 = force_16
        self.state = State.GROUND
        self._digits = ""
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def feed(self, data: bytes) -> None:
        """Process raw UTF-8 bytes into the canvas."""
        self.feed_unicode(self._utf8.decode(data))

    def feed_unicode(self, text: str) -> None:
        """Process already-decoded text into the canvas."""
        for char in text:
            if self.done:
                return
            self._step(char)

    def finish(self) -> None:
        self.feed_unicode(self._utf8.decode(b"", final=True))
        if self.state is not State.GROUND:
            logger.debug("Input ended inside a color code")
        if self.state is State.FG_DIGITS and self._digits:
            self._apply_fg(self._digits)
        elif self.state is State.BG_DIGITS:
            if self._digits:
                self._apply_bg(self._digits)
            else:
                self.put(',')
        self.state = State.GROUND
        self._digits = ""

    def _step(self, char: str) -> None:
        state = self.state

        if state is State.FG_DIGITS:
            if char in DIGITS:
                self._digits += char
                if len(self._digits) == 2:
                    self._apply_fg(self._digits)
                    self.state = State.AFTER_FG
                return
            if not self._digits:
                # ^C without digits resets
                self.reset_attributes()
                self.state = State.GROUND
            else:
                self._apply_fg(self._digits)
                self.state = State.AFTER_FG
            self._step(char)
            return

        if state is State.AFTER_FG:
            if char == ',':
                self._digits = ""
                self.state = State.BG_DIGITS
                return
            self.state = State.GROUND
            self._ground(char)
            return

        if state is State.BG_DIGITS:
            if char in DIGITS:
                self._digits += char
                if len(self._digits) == 2:
                    self._apply_bg(self._digits)
                    self.state = State.GROUND
                return
            self.state = State.GROUND
            if self._digits:
                self._apply_bg(self._digits)
            else:
                # A comma with no index after it is ordinary text
                self.put(',')
            self._ground(char)
            return

        self._ground(char)

    def _ground(self, char: str) -> None:
        if char == MIRC_COLOR:
            self._digits = ""
            self.state = State.FG_DIGITS
        elif char == MIRC_BOLD:
            self.bold = not self.bold
        elif char in (MIRC_ITALIC, MIRC_UNDERLINE):
            pass
        elif char == MIRC_PLAIN:
            self.reset_attributes()
        elif char == LF:
            # After an auto-wrap the cursor is already at column 0
            if self.canvas.cursor.col != 0:
                self.canvas.new_line()
            self.reset_attributes()
        elif char == CR:
            self.canvas.new_line()
            self.reset_attributes()
        else:
            self.put(char)

    def _lookup(self, digits: str) -> Color | None:
        """Palette color for an index, or None for the default color."""
        index = int(digits)
        if index == MIRC_DEFAULT_INDEX:
            return None
        color = MIRC_99[index]
        if self.force_16:
            color = reduce_to_16(color)
        return color

    def _apply_fg(self, digits: str) -> None:
        color = self._lookup(digits)
        self.fg = DEFAULT_FG if color is None else color

    def _apply_bg(self, digits: str) -> None:
        color = self._lookup(digits)
        if color is None:
            self.bg = DEFAULT_BG
            self.ice = False
        else:
            self.bg = color
            self.ice = nearest_color(ANSI_16, color) >= 8


def parse_mirc(data: bytes, width: int = 80, force_16: bool = False) -> Canvas:
    """Decode a complete mIRC byte string onto a new canvas."""
    decoder = MircDecoder(Canvas(width=width), force_16=force_16)
    decoder.feed(data)
    decoder.finish()
    return decoder.canvas
