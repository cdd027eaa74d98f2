"""Encoding/decoding for ANSI and mIRC art."""

from typing import BinaryIO

from bbs_irc_art.codec.ansi_parser import AnsiDecoder, parse_ansi
from bbs_irc_art.codec.base import ArtDecoder
from bbs_irc_art.codec.cp437 import cp437_to_unicode, unicode_to_cp437
from bbs_irc_art.codec.detect import ArtFormat, detect_format
from bbs_irc_art.codec.mirc_parser import MircDecoder, parse_mirc
from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.errors import UnknownFormatError


def make_decoder(fmt: ArtFormat, canvas: Canvas, force_16: bool = False) -> ArtDecoder:
    """Create the decoder for a format."""
    if fmt is ArtFormat.ANSI:
        return AnsiDecoder(canvas)
    if fmt is ArtFormat.MIRC:
        return MircDecoder(canvas, force_16=force_16)
    raise UnknownFormatError()


def decode(
    fmt: ArtFormat,
    canvas: Canvas,
    stream: BinaryIO,
    limit: int | None = None,
    force_16: bool = False,
) -> Canvas:
    """Decode a stream of the given format into ``canvas``."""
    return make_decoder(fmt, canvas, force_16=force_16).decode(stream, limit)


__all__ = [
    "cp437_to_unicode",
    "unicode_to_cp437",
    "ArtFormat",
    "detect_format",
    "ArtDecoder",
    "AnsiDecoder",
    "MircDecoder",
    "parse_ansi",
    "parse_mirc",
    "make_decoder",
    "decode",
]
