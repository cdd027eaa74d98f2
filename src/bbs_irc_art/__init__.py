"""
bbs-irc-art: convert between ANSI art and mIRC art

Decode BBS-era ANSI art or IRC color-code art onto a shared canvas,
then write it back out as either text format or as a PNG image.

Quick Start:
    >>> import bbs_irc_art as art
    >>> doc = art.load("artwork.ans")
    >>> print(doc.render_mirc())
    >>> doc.render_image(scale=0.5).save("artwork_thumb.png")

Features:
    - ANSI decoding with CP437 translation and a minimal virtual terminal
    - mIRC decoding with the full 99-color palette
    - Minimal-code ANSI and mIRC encoders
    - PNG rasterization with pixel-exact block and shade glyphs
    - SAUCE metadata reading
"""

__version__ = "0.1.0"

# Core types
from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.color import Color
from bbs_irc_art.core.document import ArtDocument

# Formats
from bbs_irc_art.codec import ArtFormat, decode, detect_format
from bbs_irc_art.render import encode_ansi, encode_mirc, rasterize

# SAUCE metadata
from bbs_irc_art.sauce.record import SauceRecord

# Configuration and errors
from bbs_irc_art.config import Settings
from bbs_irc_art.errors import ArtError, UnknownFormatError

# Convenience functions
from bbs_irc_art.io.reader import load, load_bytes
from bbs_irc_art.io.writer import save_image, save_text

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Canvas",
    "Color",
    "ArtDocument",
    # Formats
    "ArtFormat",
    "detect_format",
    "decode",
    "encode_ansi",
    "encode_mirc",
    "rasterize",
    # SAUCE
    "SauceRecord",
    # Configuration and errors
    "Settings",
    "ArtError",
    "UnknownFormatError",
    # I/O
    "load",
    "load_bytes",
    "save_text",
    "save_image",
]
