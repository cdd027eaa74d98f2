"""Format sniffing for input streams."""

from enum import Enum

SNIFF_SIZE = 4096


class ArtFormat(Enum):
    """Text art formats the decoders understand."""
    ANSI = "ansi"
    MIRC = "mirc"
    UNKNOWN = "unknown"


def detect_format(prefix: bytes) -> ArtFormat:
    """
    Guess the format from the first bytes of an input.

    Only the first ``SNIFF_SIZE`` bytes are inspected. A CSI introducer
    wins over a mIRC color code when both are present.
    """
    chunk = prefix[:SNIFF_SIZE]
    if b"\x1b[" in chunk:
        return ArtFormat.ANSI
    if b"\x03" in chunk:
        return ArtFormat.MIRC
    return ArtFormat.UNKNOWN
