"""Shared stream handling for the art decoders."""

import logging
from abc import ABC, abstractmethod
from typing import BinaryIO

from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.color import DEFAULT_BG, DEFAULT_FG

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


class ArtDecoder(ABC):
    """
    Base class for the stateful decoders.

    A decoder owns the current drawing attributes and writes cells into
    a Canvas. Input can arrive in any number of chunks; the parser state
    carries over between them, so a sequence split across two reads is
    still recognized.
    """

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas
        self.done = False
        self.reset_attributes()

    def reset_attributes(self) -> None:
        """Restore the default drawing attributes."""
        self.fg = DEFAULT_FG
        self.bg = DEFAULT_BG
        self.bold = False
        self.bright = False
        self.ice = False

    def decode(self, stream: BinaryIO, limit: int | None = None) -> Canvas:
        """
        Read a whole stream into the canvas.

        Args:
            stream: Binary stream positioned at the start of the art
            limit: Maximum number of bytes to consume (None or 0 = no limit)

        Returns:
            The canvas that was written to

        Raises:
            OSError: If reading the stream fails
        """
        remaining = limit if limit and limit > 0 else None
        while not self.done:
            size = CHUNK_SIZE if remaining is None else min(CHUNK_SIZE, remaining)
            if size == 0:
                logger.debug("Byte limit of %d reached", limit)
                break
            chunk = stream.read(size)
            if not chunk:
                break
            if remaining is not None:
                remaining -= len(chunk)
            self.feed(chunk)
        self.finish()
        return self.canvas

    def put(self, char: str) -> None:
        """Write a character with the current attributes."""
        self.canvas.set_cell(char, self.fg, self.bg, self.bold, self.bright, self.ice)

    @abstractmethod
    def feed(self, data: bytes) -> None:
        """Process a chunk of raw input bytes."""
        ...

    @abstractmethod
    def finish(self) -> None:
        """Handle end of input; a pending partial sequence is dropped."""
        ...
