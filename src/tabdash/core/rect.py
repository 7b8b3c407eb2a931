"""Rect - a rectangular area of the screen in character cells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """
    Rectangle bounds in character cells.

    Rects are values: every operation returns a new Rect. A Rect with
    zero width or height is legal and covers no cells.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"negative size: {self.width}x{self.height}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        """Check if cell (x, y) lies inside this rect."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inner(self, margin: int) -> Rect:
        """
        Shrink by margin on all four sides.

        If the margin exceeds half the extent the result clamps to zero
        size along that axis instead of going negative.
        """
        margin = max(0, margin)
        dx = min(margin, self.width // 2)
        dy = min(margin, self.height // 2)
        return Rect(
            self.x + dx,
            self.y + dy,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )

    def cells(self):
        """Iterate over all (x, y) positions inside the rect."""
        for y in range(self.y, self.bottom):
            for x in range(self.x, self.right):
                yield x, y
