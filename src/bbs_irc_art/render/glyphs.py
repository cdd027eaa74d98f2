"""Glyph sources used by the image renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from PIL import Image, ImageDraw, ImageFont


@dataclass(frozen=True)
class GlyphMetrics:
    """Cell metrics for a font at one size."""
    advance: int
    ascent: int
    descent: int

    @property
    def height(self) -> int:
        return self.ascent + self.descent


@dataclass(frozen=True)
class Glyph:
    """
    A rendered glyph coverage mask.

    ``left`` and ``top`` give the mask's offset from the pen position on
    the baseline; ``top`` is negative for ink above the baseline.
    """
    mask: Image.Image
    left: int
    top: int


@runtime_checkable
class GlyphSource(Protocol):
    """Anything that can measure a font and rasterize single characters."""

    def metrics(self, size: int) -> GlyphMetrics:
        ...

    def glyph(self, char: str, size: int, bold: bool = False) -> Glyph | None:
        ...


class FontGlyphSource:
    """
    Glyph source backed by Pillow's FreeType fonts.

    Uses the TrueType/OpenType font at ``font_path``, or Pillow's bundled
    default font when no path is given. A separate bold face is used for
    bold cells when ``bold_font_path`` is set.
    """

    def __init__(self, font_path: str | None = None, bold_font_path: str | None = None):
        self.font_path = font_path
        self.bold_font_path = bold_font_path
        self._faces: dict[tuple[int, bool], ImageFont.FreeTypeFont] = {}

    def _face(self, size: int, bold: bool = False) -> ImageFont.FreeTypeFont:
        bold = bold and self.bold_font_path is not None
        key = (size, bold)
        if key not in self._faces:
            path = self.bold_font_path if bold else self.font_path
            if path:
                self._faces[key] = ImageFont.truetype(path, size)
            else:
                self._faces[key] = ImageFont.load_default(size=size)
        return self._faces[key]

    def metrics(self, size: int) -> GlyphMetrics:
        face = self._face(size)
        ascent, descent = face.getmetrics()
        # Monospace assumption: every cell is as wide as an "M"
        advance = max(1, round(face.getlength("M")))
        return GlyphMetrics(advance, ascent, descent)

    def glyph(self, char: str, size: int, bold: bool = False) -> Glyph | None:
        face = self._face(size, bold)
        left, top, right, bottom = face.getbbox(char, anchor="ls")
        if right <= left or bottom <= top:
            return None
        mask = Image.new("L", (right - left, bottom - top), 0)
        ImageDraw.Draw(mask).text((-left, -top), char, fill=255, font=face, anchor="ls")
        return Glyph(mask, left, top)
