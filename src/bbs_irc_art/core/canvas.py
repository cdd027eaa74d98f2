"""Canvas - 2D grid of cells plus the cursor that decoders write through."""

from dataclasses import dataclass, field
from typing import Iterator

from bbs_irc_art.core.cell import Cell
from bbs_irc_art.core.color import Color

# Upper bound on canvas height; cursor movement past it stays on the last row
MAX_ROWS = 10_000


@dataclass(frozen=True)
class Cursor:
    """A 0-based cursor position. Immutable, so saving one is a snapshot."""
    row: int = 0
    col: int = 0


@dataclass(frozen=True)
class Bounds:
    """Inclusive bounding rectangle of canvas content."""
    min_row: int
    max_row: int
    min_col: int
    max_col: int

    @property
    def rows(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def cols(self) -> int:
        return self.max_col - self.min_col + 1


@dataclass
class Canvas:
    """
    A 2D grid of Cells representing a piece of text art.

    The width is fixed at construction; rows are appended on demand as
    the cursor moves down, and are never removed. Height is capped at
    ``max_rows``: moving past the last row stays on it. Decoders mutate the
    canvas through the cursor operations below, renderers only read it.
    """
    width: int = 80
    max_rows: int = MAX_ROWS
    cursor: Cursor = Cursor()
    _saved_cursor: Cursor = Cursor()
    _buffer: list[list[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate the width and create the first row."""
        if self.width < 1:
            raise ValueError(f"Canvas width must be at least 1, got {self.width}")
        if self.max_rows < 1:
            raise ValueError(f"Canvas max_rows must be at least 1, got {self.max_rows}")
        if not self._buffer:
            self.ensure_row(0)

    def ensure_row(self, row: int) -> None:
        """Ensure the buffer has at least this many rows (0-indexed)."""
        row = self._clamp_row(row)
        while len(self._buffer) <= row:
            self._buffer.append([Cell() for _ in range(self.width)])

    def _clamp_row(self, row: int) -> int:
        return min(row, self.max_rows - 1)

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at column x, row y."""
        if x < 0 or x >= self.width:
            raise IndexError(f"x={x} out of bounds (width={self.width})")
        if y < 0 or y >= len(self._buffer):
            raise IndexError(f"y={y} out of bounds (height={len(self._buffer)})")
        return self._buffer[y][x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    @property
    def current_height(self) -> int:
        """Get the current number of rows in the buffer."""
        return len(self._buffer)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    # Cursor-driven writes

    def set_cell(
        self,
        char: str,
        fg: Color,
        bg: Color,
        bold: bool = False,
        bright: bool = False,
        ice: bool = False,
    ) -> None:
        """Write a cell at the cursor and advance, wrapping at the right edge."""
        row, col = self.cursor.row, self.cursor.col
        self.ensure_row(row)
        self._buffer[row][col] = Cell(char, fg, bg, bold, bright, ice)

        col += 1
        if col >= self.width:
            self.new_line()
        else:
            self.cursor = Cursor(row, col)

    def new_line(self) -> None:
        """Move to column 0 of the next row."""
        row = self._clamp_row(self.cursor.row + 1)
        self.ensure_row(row)
        self.cursor = Cursor(row, 0)

    def carriage_return(self) -> None:
        """Move to column 0 without changing row."""
        self.cursor = Cursor(self.cursor.row, 0)

    def move_to(self, row: int, col: int) -> None:
        """Move to a 1-based (row, col) position, clamped to the canvas."""
        r = self._clamp_row(max(0, row - 1))
        c = max(0, min(col - 1, self.width - 1))
        self.ensure_row(r)
        self.cursor = Cursor(r, c)

    def move_up(self, n: int = 1) -> None:
        self.cursor = Cursor(max(0, self.cursor.row - n), self.cursor.col)

    def move_down(self, n: int = 1) -> None:
        row = self._clamp_row(self.cursor.row + max(0, n))
        self.ensure_row(row)
        self.cursor = Cursor(row, self.cursor.col)

    def move_forward(self, n: int = 1) -> None:
        col = min(self.cursor.col + max(0, n), self.width - 1)
        self.cursor = Cursor(self.cursor.row, col)

    def move_backward(self, n: int = 1) -> None:
        self.cursor = Cursor(self.cursor.row, max(0, self.cursor.col - n))

    def save_cursor(self) -> None:
        self._saved_cursor = self.cursor

    def restore_cursor(self) -> None:
        self.cursor = self._saved_cursor
        self.ensure_row(self.cursor.row)

    def clear(self, fill: Cell | None = None) -> None:
        """Overwrite every existing cell with ``fill`` (as a space) and home the cursor."""
        template = fill.copy() if fill is not None else Cell()
        template.char = ' '
        for row in self._buffer:
            for x in range(self.width):
                row[x] = template.copy()
        self.cursor = Cursor(0, 0)

    def content_bounds(self) -> Bounds | None:
        """
        Find the minimal rectangle enclosing all cells with content.

        Returns None for a canvas holding nothing but default spaces.
        """
        min_row, max_row = len(self._buffer), -1
        min_col, max_col = self.width, -1

        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                if cell.has_content():
                    min_row = min(min_row, y)
                    max_row = max(max_row, y)
                    min_col = min(min_col, x)
                    max_col = max(max_col, x)

        if max_row == -1:
            return None
        return Bounds(min_row, max_row, min_col, max_col)
