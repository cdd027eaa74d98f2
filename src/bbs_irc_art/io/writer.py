"""Save converted art."""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from bbs_irc_art.codec.detect import ArtFormat
from bbs_irc_art.render.glyphs import GlyphSource
from bbs_irc_art.render.mirc import encode_mirc
from bbs_irc_art.render.terminal import encode_ansi

if TYPE_CHECKING:
    from bbs_irc_art.core.document import ArtDocument

logger = logging.getLogger(__name__)

STDOUT = "-"
THUMBNAIL_SUFFIX = "_thumb"


def save_text(
    doc: "ArtDocument",
    path: str | Path,
    fmt: ArtFormat,
    force_16: bool = False,
) -> None:
    """
    Encode a document as ANSI (CP437) or mIRC (UTF-8) text.

    Writes to stdout when ``path`` is ``"-"``.
    """
    if fmt is ArtFormat.ANSI:
        data = encode_ansi(doc.canvas)
    elif fmt is ArtFormat.MIRC:
        data = encode_mirc(doc.canvas, force_16=force_16)
    else:
        raise ValueError(f"Cannot write {fmt.value} text")

    if str(path) == STDOUT:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return

    Path(path).write_bytes(data)
    logger.info("Wrote %d bytes of %s to %s", len(data), fmt.value, path)


def save_image(
    doc: "ArtDocument",
    path: str | Path,
    scale: float = 1.0,
    glyphs: GlyphSource | None = None,
    **kwargs,
) -> Path:
    """Rasterize a document and save it as PNG."""
    path = Path(path)
    image = doc.render_image(scale=scale, glyphs=glyphs, **kwargs)
    image.save(path, format="PNG")
    logger.info("Wrote %dx%d image to %s", image.width, image.height, path)
    return path


def thumbnail_path(path: str | Path) -> Path:
    """Derive the thumbnail file name: ``art.png`` becomes ``art_thumb.png``."""
    path = Path(path)
    return path.with_name(f"{path.stem}{THUMBNAIL_SUFFIX}{path.suffix or '.png'}")
