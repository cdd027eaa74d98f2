"""Core data structures for text art representation."""

from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.canvas import Bounds, Canvas, Cursor
from bbs_irc_art.core.color import Color
from bbs_irc_art.core.document import ArtDocument

__all__ = ["Cell", "Canvas", "Cursor", "Bounds", "Color", "ArtDocument"]
