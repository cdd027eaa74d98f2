"""Truecolor values and the fixed ANSI/mIRC palettes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """
    An RGBA color value.

    Every cell stores truecolor; palette indices only exist at the
    boundaries where a format is read or written.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b, self.a)):
            raise ValueError(
                f"RGBA values must be 0-255, got ({self.r}, {self.g}, {self.b}, {self.a})"
            )

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a Color from "#rrggbb" or "rrggbb"."""
        value = value.lstrip("#")
        if len(value) != 6:
            raise ValueError(f"Expected 6 hex digits, got {value!r}")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Standard 16-color ANSI palette (classic DOS/VGA values)
ANSI_16: tuple[Color, ...] = (
    Color(0x00, 0x00, 0x00),  # 0: Black
    Color(0xAA, 0x00, 0x00),  # 1: Red
    Color(0x00, 0xAA, 0x00),  # 2: Green
    Color(0xAA, 0x55, 0x00),  # 3: Yellow/Brown
    Color(0x00, 0x00, 0xAA),  # 4: Blue
    Color(0xAA, 0x00, 0xAA),  # 5: Magenta
    Color(0x00, 0xAA, 0xAA),  # 6: Cyan
    Color(0xAA, 0xAA, 0xAA),  # 7: White (Light Gray)
    Color(0x55, 0x55, 0x55),  # 8: Bright Black (Dark Gray)
    Color(0xFF, 0x55, 0x55),  # 9: Bright Red
    Color(0x55, 0xFF, 0x55),  # 10: Bright Green
    Color(0xFF, 0xFF, 0x55),  # 11: Bright Yellow
    Color(0x55, 0x55, 0xFF),  # 12: Bright Blue
    Color(0xFF, 0x55, 0xFF),  # 13: Bright Magenta
    Color(0x55, 0xFF, 0xFF),  # 14: Bright Cyan
    Color(0xFF, 0xFF, 0xFF),  # 15: Bright White
)

# mIRC palette: 16 classic colors followed by the 83-color extended set
MIRC_99: tuple[Color, ...] = tuple(Color.from_hex(h) for h in (
    # 0-15
    "ffffff", "000000", "00007f", "009300", "ff0000", "7f0000", "9c009c", "fc7f00",
    "ffff00", "00fc00", "009393", "00ffff", "0000fc", "ff00ff", "7f7f7f", "d2d2d2",
    # 16-27
    "470000", "472100", "474700", "324700", "004700", "00472c",
    "004747", "002747", "000047", "2e0047", "470047", "47002a",
    # 28-39
    "740000", "743a00", "747400", "517400", "007400", "007449",
    "007474", "004074", "000074", "4b0074", "740074", "740045",
    # 40-51
    "b50000", "b56300", "b5b500", "7db500", "00b500", "00b571",
    "00b5b5", "0063b5", "0000b5", "7500b5", "b500b5", "b5006b",
    # 52-63
    "ff0000", "ff8c00", "ffff00", "b2ff00", "00ff00", "00ffa0",
    "00ffff", "008cff", "0000ff", "a500ff", "ff00ff", "ff0098",
    # 64-75
    "ff5959", "ffb459", "ffff71", "cfff60", "6fff6f", "65ffc9",
    "6dffff", "59b4ff", "5959ff", "c459ff", "ff66ff", "ff59bc",
    # 76-87
    "ff9c9c", "ffd39c", "ffff9c", "e2ff9c", "9cff9c", "9cffdb",
    "9cffff", "9cd3ff", "9c9cff", "dc9cff", "ff9cff", "ff94d3",
    # 88-98: grayscale ramp
    "000000", "131313", "282828", "363636", "4d4d4d", "656565",
    "818181", "9f9f9f", "bcbcbc", "e2e2e2", "ffffff",
))

# Classic mIRC index for each ANSI_16 entry
ANSI_TO_MIRC: tuple[int, ...] = (1, 5, 3, 7, 2, 6, 10, 15, 14, 4, 9, 8, 12, 13, 11, 0)

DEFAULT_FG = ANSI_16[7]
DEFAULT_BG = ANSI_16[0]


def nearest_color(table: tuple[Color, ...], color: Color) -> int:
    """Find the index of the closest palette entry by RGB distance.

    Ties go to the lowest index. Fully transparent colors map to index 0.
    """
    if color.a == 0:
        return 0

    best_index = 0
    min_distance = float('inf')
    for i, entry in enumerate(table):
        distance = (
            (color.r - entry.r) ** 2 +
            (color.g - entry.g) ** 2 +
            (color.b - entry.b) ** 2
        )
        if distance < min_distance:
            min_distance = distance
            best_index = i
    return best_index


def reduce_to_16(color: Color) -> Color:
    """Replace a color with its nearest ANSI_16 entry."""
    return ANSI_16[nearest_color(ANSI_16, color)]


def intensify(color: Color) -> Color:
    """Return the high-intensity swatch for a color in the low half of ANSI_16.

    Colors that are already closest to a bright entry are returned unchanged.
    """
    index = nearest_color(ANSI_16, color)
    if index < 8:
        return ANSI_16[index + 8]
    return color


def sgr_index(color: Color, bright: bool = False) -> int:
    """Quantize to an ANSI_16 index, promoting to the bright half when flagged."""
    index = nearest_color(ANSI_16, color)
    if bright and index < 8:
        index += 8
    return index
