"""Exceptions raised by bbs-irc-art."""


class ArtError(Exception):
    """Base class for errors raised by this package."""


class UnknownFormatError(ArtError, ValueError):
    """Input is neither ANSI nor mIRC art and no format was given."""

    def __init__(self, source: str = "input") -> None:
        super().__init__(
            f"Could not detect the format of {source}; specify ansi or mirc explicitly"
        )
        self.source = source
