"""File I/O for text art files."""

from bbs_irc_art.io.reader import load, load_bytes
from bbs_irc_art.io.writer import save_image, save_text, thumbnail_path

__all__ = ["load", "load_bytes", "save_text", "save_image", "thumbnail_path"]
