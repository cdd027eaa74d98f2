"""Rasterize a canvas to a Pillow image."""

import logging
from typing import Callable

from PIL import Image

from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.color import DEFAULT_BG, intensify, reduce_to_16
from bbs_irc_art.core.constants import BLOCK
from bbs_irc_art.render.glyphs import FontGlyphSource, GlyphSource

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
Box = tuple[int, int, int, int]

# Shade patterns on absolute image coordinates, so adjacent cells tile
SHADES: dict[str, Callable[[int, int], bool]] = {
    BLOCK["dark"]: lambda x, y: x % 2 == 1 or y % 2 == 1,
    BLOCK["medium"]: lambda x, y: (x + y) % 2 == 0,
    BLOCK["light"]: lambda x, y: x % 2 == 0 and y % 2 == 0,
}

BLOCK_GLYPHS = frozenset(BLOCK.values())


class ImageRenderer:
    """
    Render a Canvas to an RGB image, cropped to the content bounds.

    Cell size comes from the glyph source's metrics at ``font_size``
    multiplied by ``scale``, so a thumbnail is a smaller rendering rather
    than a resampled full image. Block and shade characters are drawn as
    exact pixel patterns; everything else goes through the glyph source.
    """

    def __init__(
        self,
        glyphs: GlyphSource | None = None,
        font_size: int = 16,
        scale: float = 1.0,
        force_16: bool = False,
    ):
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.glyphs = glyphs if glyphs is not None else FontGlyphSource()
        self.font_size = font_size
        self.scale = scale
        self.force_16 = force_16

    def cell_size(self) -> tuple[int, int, int]:
        """Return (width, height, baseline) of one cell in pixels."""
        metrics = self.glyphs.metrics(self.font_size)
        width = max(1, round(metrics.advance * self.scale))
        height = max(1, round(metrics.height * self.scale))
        baseline = round(metrics.ascent * self.scale)
        return width, height, baseline

    def render(self, canvas: Canvas) -> Image.Image:
        """Render canvas to a new image."""
        bounds = canvas.content_bounds()
        if bounds is None:
            logger.debug("Canvas is empty, rendering placeholder image")
            return Image.new("RGB", (1, 1), DEFAULT_BG.rgb)

        cell_w, cell_h, baseline = self.cell_size()
        glyph_size = max(1, round(self.font_size * self.scale))
        image = Image.new("RGB", (bounds.cols * cell_w, bounds.rows * cell_h), DEFAULT_BG.rgb)
        pixels = image.load()
        logger.debug(
            "Rendering %dx%d cells at %dx%d px per cell",
            bounds.cols, bounds.rows, cell_w, cell_h,
        )

        for y in range(bounds.min_row, bounds.max_row + 1):
            for x in range(bounds.min_col, bounds.max_col + 1):
                cell = canvas.get(x, y)
                x0 = (x - bounds.min_col) * cell_w
                y0 = (y - bounds.min_row) * cell_h
                box = (x0, y0, x0 + cell_w, y0 + cell_h)
                fg, bg = self.cell_colors(cell)

                if cell.char in BLOCK_GLYPHS:
                    self._draw_block(image, pixels, cell.char, box, fg, bg)
                    continue

                _fill(image, bg, box)
                if cell.char != ' ':
                    self._draw_glyph(image, cell, box, baseline, glyph_size, fg)

        return image

    def cell_colors(self, cell: Cell) -> tuple[RGB, RGB]:
        """Resolve the display colors of a cell, applying intensity flags."""
        fg = intensify(cell.fg) if cell.bright else cell.fg
        bg = intensify(cell.bg) if cell.ice else cell.bg
        if self.force_16:
            fg, bg = reduce_to_16(fg), reduce_to_16(bg)
        return fg.rgb, bg.rgb

    def _draw_block(self, image: Image.Image, pixels, char: str, box: Box, fg: RGB, bg: RGB) -> None:
        x0, y0, x1, y1 = box
        mid_y = y0 + (y1 - y0) // 2
        mid_x = x0 + (x1 - x0) // 2

        if char == BLOCK["full"]:
            _fill(image, fg, box)
        elif char == BLOCK["upper"]:
            _fill(image, fg, (x0, y0, x1, mid_y))
            _fill(image, bg, (x0, mid_y, x1, y1))
        elif char == BLOCK["lower"]:
            _fill(image, bg, (x0, y0, x1, mid_y))
            _fill(image, fg, (x0, mid_y, x1, y1))
        elif char == BLOCK["left"]:
            _fill(image, fg, (x0, y0, mid_x, y1))
            _fill(image, bg, (mid_x, y0, x1, y1))
        elif char == BLOCK["right"]:
            _fill(image, bg, (x0, y0, mid_x, y1))
            _fill(image, fg, (mid_x, y0, x1, y1))
        else:
            _fill(image, bg, box)
            lit = SHADES[char]
            for py in range(y0, y1):
                for px in range(x0, x1):
                    if lit(px, py):
                        pixels[px, py] = fg

    def _draw_glyph(
        self,
        image: Image.Image,
        cell: Cell,
        box: Box,
        baseline: int,
        size: int,
        fg: RGB,
    ) -> None:
        glyph = self.glyphs.glyph(cell.char, size, cell.bold)
        if glyph is None:
            return

        x0, y0, x1, y1 = box
        gx = x0 + glyph.left
        gy = y0 + baseline + glyph.top
        mask_w, mask_h = glyph.mask.size

        # Clip to the cell so overhanging ink cannot leak into neighbours
        left = max(0, x0 - gx)
        top = max(0, y0 - gy)
        right = min(mask_w, x1 - gx)
        bottom = min(mask_h, y1 - gy)
        if right <= left or bottom <= top:
            return

        mask = glyph.mask.crop((left, top, right, bottom))
        image.paste(fg, (gx + left, gy + top, gx + right, gy + bottom), mask)


def _fill(image: Image.Image, color: RGB, box: Box) -> None:
    x0, y0, x1, y1 = box
    if x1 > x0 and y1 > y0:
        image.paste(color, box)


def rasterize(canvas: Canvas, scale: float = 1.0, glyphs: GlyphSource | None = None, **kwargs) -> Image.Image:
    """Render a canvas to an image at the given scale."""
    return ImageRenderer(glyphs=glyphs, scale=scale, **kwargs).render(canvas)
