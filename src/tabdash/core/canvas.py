"""Canvas - fixed-size 2D grid of cells that one frame is painted into."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from tabdash.core.cell import Cell
from tabdash.core.rect import Rect
from tabdash.core.style import Style

# Shown in place of control characters, which must never reach the terminal
REPLACEMENT = "\ufffd"


@dataclass
class Canvas:
    """
    The shared screen buffer.

    Writes outside the canvas are ignored; writes may additionally be
    clipped to a Rect so a widget can never paint outside its region.
    """
    width: int = 80
    height: int = 24
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self._buffer:
            self.reset()

    @property
    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def reset(self) -> None:
        """Blank every cell."""
        self._buffer = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def resize(self, width: int, height: int) -> None:
        """Change dimensions; content is discarded."""
        self.width = width
        self.height = height
        self.reset()

    def get(self, x: int, y: int) -> Cell:
        """Cell at (x, y); IndexError outside the canvas."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """canvas[x, y]"""
        x, y = pos
        return self.get(x, y)

    def put_char(
        self,
        x: int,
        y: int,
        char: str,
        style: Optional[Style] = None,
        clip: Optional[Rect] = None,
    ) -> bool:
        """
        Put a character at position, patching style over the cell's style.
        C0 and C1 control characters are stored as REPLACEMENT.

        Returns False if the position was clipped.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        if clip is not None and not clip.contains(x, y):
            return False
        if char < " " or "\x7f" <= char < "\xa0":
            char = REPLACEMENT
        cell = self._buffer[y][x]
        cell.char = char
        if style is not None:
            cell.style = cell.style.patch(style)
        return True

    def put_text(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        clip: Optional[Rect] = None,
    ) -> int:
        """Put a string starting at position; returns cells written."""
        written = 0
        for i, char in enumerate(text):
            if clip is not None and x + i >= clip.right:
                break
            if self.put_char(x + i, y, char, style, clip):
                written += 1
        return written

    def set_style(self, rect: Rect, style: Style) -> None:
        """Patch style over every cell in rect without touching characters."""
        for x, y in rect.cells():
            if 0 <= x < self.width and 0 <= y < self.height:
                cell = self._buffer[y][x]
                cell.style = cell.style.patch(style)

    def rows(self) -> Iterator[list[Cell]]:
        """Rows top to bottom."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield (x, y, cell) for every cell, row by row."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def row_text(self, y: int) -> str:
        """Characters of one row without styling."""
        return ''.join(cell.char for cell in self._buffer[y])

    def snapshot(self) -> list[list[tuple[str, Style]]]:
        """Immutable copy of the buffer contents, for comparisons."""
        return [[(cell.char, cell.style) for cell in row] for row in self._buffer]
