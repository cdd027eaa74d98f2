"""Cell - atomic unit of the art canvas."""

from dataclasses import dataclass

from bbs_irc_art.core.color import DEFAULT_BG, DEFAULT_FG, Color


@dataclass(slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    ``bold`` is the glyph weight. ``bright`` selects the high-intensity
    half of the 16-color palette for the foreground and ``ice`` does the
    same for the background; the three flags are independent.
    """
    char: str = ' '
    fg: Color = DEFAULT_FG
    bg: Color = DEFAULT_BG
    bold: bool = False
    bright: bool = False
    ice: bool = False

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(
            char=self.char,
            fg=self.fg,
            bg=self.bg,
            bold=self.bold,
            bright=self.bright,
            ice=self.ice,
        )

    def is_default(self) -> bool:
        """Check if this cell has default values (empty space, default colors)."""
        return (
            self.char == ' '
            and self.fg == DEFAULT_FG
            and self.bg == DEFAULT_BG
            and not self.bold
            and not self.bright
            and not self.ice
        )

    def has_content(self) -> bool:
        """
        True unless this is a space on the default background.

        ``ice`` brightens the background, so an ice space counts even on
        the default background color.
        """
        return self.char != ' ' or self.bg != DEFAULT_BG or self.ice
