"""SAUCE metadata handling."""

from bbs_irc_art.sauce.record import SauceRecord
from bbs_irc_art.sauce.reader import parse_sauce, parse_sauce_bytes

__all__ = ["SauceRecord", "parse_sauce", "parse_sauce_bytes"]
