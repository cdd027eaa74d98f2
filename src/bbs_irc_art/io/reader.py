"""Load ANSI and mIRC art files."""

import io
import logging
import sys
from pathlib import Path

from bbs_irc_art.codec import decode
from bbs_irc_art.codec.detect import SNIFF_SIZE, ArtFormat, detect_format
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.core.constants import SUB
from bbs_irc_art.core.document import ArtDocument
from bbs_irc_art.errors import UnknownFormatError
from bbs_irc_art.sauce.reader import parse_sauce_bytes
from bbs_irc_art.sauce.record import SauceRecord

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
STDIN = "-"


def load(
    path: str | Path,
    width: int | None = None,
    fmt: ArtFormat | None = None,
    force_16: bool = False,
    default_width: int = DEFAULT_WIDTH,
) -> ArtDocument:
    """
    Load an art file from disk, or from stdin when ``path`` is ``"-"``.

    The format is sniffed from the first bytes unless ``fmt`` is given.
    A SAUCE record, if present, supplies the canvas width (unless
    ``width`` is given) and the length of the art before the metadata.
    Without either, the canvas is ``default_width`` columns wide.

    Raises:
        UnknownFormatError: If the format cannot be detected
        OSError: If the file cannot be read
    """
    if str(path) == STDIN:
        data = sys.stdin.buffer.read()
        source_path = None
        source = "stdin"
    else:
        source_path = Path(path)
        data = source_path.read_bytes()
        source = str(source_path)

    doc = load_bytes(
        data,
        width=width,
        fmt=fmt,
        force_16=force_16,
        source=source,
        default_width=default_width,
    )
    doc.source_path = source_path
    return doc


def load_bytes(
    data: bytes,
    width: int | None = None,
    fmt: ArtFormat | None = None,
    force_16: bool = False,
    source: str = "input",
    default_width: int = DEFAULT_WIDTH,
) -> ArtDocument:
    """Load art from raw bytes."""
    if fmt is None or fmt is ArtFormat.UNKNOWN:
        fmt = detect_format(data[:SNIFF_SIZE])
        if fmt is ArtFormat.UNKNOWN:
            raise UnknownFormatError(source)
        logger.info("Detected %s format for %s", fmt.value, source)

    sauce = parse_sauce_bytes(data)
    if width is None:
        width = sauce.width if sauce and sauce.width else default_width
    limit = _content_length(data, sauce)
    logger.debug("Decoding %s with width %d, byte limit %s", source, width, limit)

    canvas = decode(fmt, Canvas(width=width), io.BytesIO(data), limit=limit, force_16=force_16)
    return ArtDocument(canvas=canvas, sauce=sauce, format=fmt)


def _content_length(data: bytes, sauce: SauceRecord | None) -> int | None:
    """Number of bytes that belong to the art itself, or None for all."""
    if sauce is None:
        return None
    if sauce.data_size:
        return sauce.data_size
    # No declared size: stop at the EOF marker in front of the record
    eof_pos = data.rfind(SUB.encode("ascii"))
    return eof_pos if eof_pos > 0 else None
