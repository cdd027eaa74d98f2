"""ArtDocument - high-level representation of a decoded art file."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from bbs_irc_art.core.canvas import Canvas

if TYPE_CHECKING:
    from PIL import Image

    from bbs_irc_art.codec.detect import ArtFormat
    from bbs_irc_art.render.glyphs import GlyphSource
    from bbs_irc_art.sauce.record import SauceRecord


@dataclass
class ArtDocument:
    """
    Represents a decoded artwork with metadata.

    Combines Canvas + SAUCE metadata + source info into a single
    high-level object. The canvas can be rendered to either text
    format or to an image, whichever format it was decoded from.
    """
    canvas: Canvas = field(default_factory=Canvas)
    sauce: "SauceRecord | None" = None
    source_path: Path | None = None
    format: "ArtFormat | None" = None

    @classmethod
    def load(cls, path: str | Path, **kwargs) -> "ArtDocument":
        """Load an art file from disk."""
        from bbs_irc_art.io.reader import load
        return load(path, **kwargs)

    def render_ansi(self) -> str:
        """Render to ANSI escape sequences."""
        from bbs_irc_art.render.terminal import TerminalRenderer
        return TerminalRenderer().render(self.canvas)

    def render_mirc(self, force_16: bool = False) -> str:
        """Render to mIRC color codes."""
        from bbs_irc_art.render.mirc import MircRenderer
        return MircRenderer(force_16=force_16).render(self.canvas)

    def render_image(
        self,
        scale: float = 1.0,
        glyphs: "GlyphSource | None" = None,
        **kwargs,
    ) -> "Image.Image":
        """Rasterize the canvas."""
        from bbs_irc_art.render.image import ImageRenderer
        return ImageRenderer(glyphs=glyphs, scale=scale, **kwargs).render(self.canvas)

    @property
    def title(self) -> str:
        """Get title from SAUCE or filename."""
        if self.sauce and self.sauce.title:
            return self.sauce.title
        if self.source_path:
            return self.source_path.stem
        return "Untitled"

    @property
    def author(self) -> str:
        """Get author from SAUCE."""
        return self.sauce.author if self.sauce else ""

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.current_height
