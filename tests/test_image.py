"""Tests for the rasterizer (uses a stub glyph source, no font files)."""

from typing import Optional

import pytest
from PIL import Image

from bbs_irc_art.codec.ansi_parser import parse_ansi
from bbs_irc_art.codec.mirc_parser import parse_mirc
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.color import ANSI_16, DEFAULT_BG
from bbs_irc_art.render.glyphs import Glyph, GlyphMetrics
from bbs_irc_art.render.image import ImageRenderer, rasterize

RED = ANSI_16[1].rgb
GREEN = ANSI_16[2].rgb
BLUE = ANSI_16[4].rgb
BLACK = DEFAULT_BG.rgb


def pixels(image: Image.Image, box: tuple[int, int, int, int]) -> set[tuple[int, int, int]]:
    """Distinct colors inside ``box`` (left, top, right, bottom)."""
    return set(image.crop(box).getdata())


class TestBlockGlyphs:
    """Block and shade characters are drawn as exact pixel patterns."""

    def test_full_block_is_solid(self, glyphs) -> None:
        canvas = parse_ansi(b"\x1b[32m\xdb")
        image = ImageRenderer(glyphs=glyphs).render(canvas)
        assert image.size == (8, 16)
        assert pixels(image, (0, 0, 8, 16)) == {GREEN}
        # Block glyphs never reach the glyph source
        assert glyphs.requests == []

    @pytest.mark.parametrize(
        "char, fg_box, bg_box",
        [
            (b"\xdf", (0, 0, 8, 8), (0, 8, 8, 16)),   # upper half
            (b"\xdc", (0, 8, 8, 16), (0, 0, 8, 8)),   # lower half
            (b"\xdd", (0, 0, 4, 16), (4, 0, 8, 16)),  # left half
            (b"\xde", (4, 0, 8, 16), (0, 0, 4, 16)),  # right half
        ],
        ids=["upper", "lower", "left", "right"],
    )
    def test_half_blocks(self, glyphs, char: bytes, fg_box: tuple, bg_box: tuple) -> None:
        canvas = parse_ansi(b"\x1b[31;44m" + char)
        image = ImageRenderer(glyphs=glyphs).render(canvas)
        assert pixels(image, fg_box) == {RED}
        assert pixels(image, bg_box) == {BLUE}

    @pytest.mark.parametrize(
        "char, lit",
        [
            (b"\xb2", lambda x, y: x % 2 == 1 or y % 2 == 1),
            (b"\xb1", lambda x, y: (x + y) % 2 == 0),
            (b"\xb0", lambda x, y: x % 2 == 0 and y % 2 == 0),
        ],
        ids=["dark", "medium", "light"],
    )
    def test_shades(self, glyphs, char: bytes, lit) -> None:
        canvas = parse_ansi(b"\x1b[31;44m" + char)
        image = ImageRenderer(glyphs=glyphs).render(canvas)
        for y in range(16):
            for x in range(8):
                assert image.getpixel((x, y)) == (RED if lit(x, y) else BLUE), (x, y)

    def test_shade_parity_uses_image_coordinates(self, glyphs) -> None:
        canvas = parse_ansi(b"\x1b[31;44m\xb1\xb1")
        # An odd cell width puts the second cell on an odd x offset
        image = ImageRenderer(glyphs=glyphs, font_size=18).render(canvas)
        assert image.size == (18, 17)
        assert image.getpixel((8, 0)) == RED
        assert image.getpixel((9, 0)) == BLUE
        assert image.getpixel((10, 0)) == RED

    def test_rendering_is_deterministic(self, glyphs) -> None:
        canvas = parse_ansi(b"\x1b[33;45m\xb0\xb1\xb2\xdb\xdc\xdf\r\n\xdd\xde")
        first = ImageRenderer(glyphs=glyphs).render(canvas)
        second = ImageRenderer(glyphs=glyphs).render(canvas)
        assert first.tobytes() == second.tobytes()


class TestColors:
    """Intensity flags and palette reduction."""

    def test_bright_foreground(self, glyphs) -> None:
        image = ImageRenderer(glyphs=glyphs).render(parse_ansi(b"\x1b[91m\xdb"))
        assert pixels(image, (0, 0, 8, 16)) == {ANSI_16[9].rgb}

    def test_ice_background(self, glyphs) -> None:
        image = ImageRenderer(glyphs=glyphs).render(parse_ansi(b"\x1b[5;41m "))
        assert pixels(image, (0, 0, 8, 16)) == {ANSI_16[9].rgb}

    def test_truecolor_is_kept(self, glyphs) -> None:
        canvas = parse_mirc("\x0352█".encode("utf-8"))
        image = ImageRenderer(glyphs=glyphs).render(canvas)
        assert pixels(image, (0, 0, 8, 16)) == {(255, 0, 0)}

    def test_force_16(self, glyphs) -> None:
        canvas = parse_mirc("\x0352█".encode("utf-8"))
        image = ImageRenderer(glyphs=glyphs, force_16=True).render(canvas)
        assert pixels(image, (0, 0, 8, 16)) == {RED}


class TestGlyphs:
    """Ordinary characters go through the glyph source."""

    def test_glyph_drawn_on_baseline(self, glyphs) -> None:
        image = ImageRenderer(glyphs=glyphs).render(parse_ansi(b"\x1b[31mA"))
        # 4x8 box, one pixel in, bottom edge on the baseline at y=12
        assert pixels(image, (1, 4, 5, 12)) == {RED}
        assert image.getpixel((0, 4)) == BLACK
        assert image.getpixel((5, 4)) == BLACK
        assert image.getpixel((1, 3)) == BLACK
        assert image.getpixel((1, 12)) == BLACK
        assert glyphs.requests == [('A', 16, False)]

    def test_bold_and_scaled_size_reach_source(self, glyphs) -> None:
        ImageRenderer(glyphs=glyphs, scale=0.5).render(parse_ansi(b"\x1b[1mB"))
        assert glyphs.requests == [('B', 8, True)]

    def test_spaces_are_not_requested(self, glyphs) -> None:
        ImageRenderer(glyphs=glyphs).render(parse_ansi(b"\x1b[44m  x"))
        assert [request[0] for request in glyphs.requests] == ['x']

    def test_glyph_is_clipped_to_cell(self) -> None:
        class HugeGlyphSource:
            def metrics(self, size: int) -> GlyphMetrics:
                return GlyphMetrics(advance=8, ascent=12, descent=4)

            def glyph(self, char: str, size: int, bold: bool = False) -> Optional[Glyph]:
                return Glyph(Image.new("L", (30, 30), 255), left=-10, top=-20)

        canvas = parse_ansi(b"\x1b[34m\xdb\x1b[31mA\x1b[34m\xdb")
        image = ImageRenderer(glyphs=HugeGlyphSource()).render(canvas)
        assert pixels(image, (0, 0, 8, 16)) == {BLUE}
        assert pixels(image, (8, 0, 16, 16)) == {RED}
        assert pixels(image, (16, 0, 24, 16)) == {BLUE}


class TestLayout:
    """Image size, cropping and scaling."""

    def test_empty_canvas_gives_placeholder(self, glyphs) -> None:
        image = ImageRenderer(glyphs=glyphs).render(Canvas(width=80))
        assert image.size == (1, 1)
        assert image.getpixel((0, 0)) == BLACK

    def test_crops_to_content(self, glyphs) -> None:
        canvas = parse_ansi(b"\x1b[4;6H\x1b[32m\xdb \xdb\r\n\x1b[7C\xdb")
        image = ImageRenderer(glyphs=glyphs).render(canvas)
        # Columns 5-7, rows 3-4
        assert image.size == (3 * 8, 2 * 16)
        assert image.getpixel((0, 0)) == GREEN
        assert image.getpixel((8, 0)) == BLACK
        assert image.getpixel((16, 16)) == GREEN

    def test_trailing_ice_space_is_kept(self, glyphs) -> None:
        image = ImageRenderer(glyphs=glyphs).render(parse_ansi(b"\x1b[32m\xdb\x1b[5;40m "))
        assert image.size == (16, 16)
        assert pixels(image, (8, 0, 16, 16)) == {ANSI_16[8].rgb}

    def test_scale(self, glyphs) -> None:
        canvas = parse_ansi(b"\x1b[32m\xdb\xdb")
        image = rasterize(canvas, scale=0.5, glyphs=glyphs)
        assert image.size == (8, 8)
        assert pixels(image, (0, 0, 8, 8)) == {GREEN}

    @pytest.mark.parametrize("scale", [0, -1.0])
    def test_invalid_scale(self, glyphs, scale: float) -> None:
        with pytest.raises(ValueError):
            ImageRenderer(glyphs=glyphs, scale=scale)

    def test_image_mode(self, glyphs) -> None:
        image = rasterize(parse_ansi(b"x"), glyphs=glyphs)
        assert image.mode == "RGB"
