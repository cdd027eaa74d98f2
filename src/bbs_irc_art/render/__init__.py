"""Renderers for outputting art to text formats and images."""

from bbs_irc_art.render.glyphs import FontGlyphSource, Glyph, GlyphMetrics, GlyphSource
from bbs_irc_art.render.image import ImageRenderer, rasterize
from bbs_irc_art.render.mirc import MircRenderer, encode_mirc
from bbs_irc_art.render.terminal import TerminalRenderer, encode_ansi

__all__ = [
    "TerminalRenderer",
    "MircRenderer",
    "ImageRenderer",
    "encode_ansi",
    "encode_mirc",
    "rasterize",
    "GlyphSource",
    "FontGlyphSource",
    "Glyph",
    "GlyphMetrics",
]
