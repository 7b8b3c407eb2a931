"""Constraint-based layout: split a region into tiled child regions.

A split takes a parent Rect, a direction and one constraint per child:

- Fixed(n):   exactly n cells
- Percent(p): p percent of the (post-margin) extent, truncated
- Min(n):     at least n cells, plus an even share of leftover space

The returned children always tile the post-margin parent exactly: no
gaps, no overlaps. Leftover space goes to the Min constraints (earlier
ones take the integer-division remainder) or, when there are none, to
the last child. If the fixed and percent sizes overflow the extent,
children are truncated in order and later ones get zero cells.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

from tabdash.core.rect import Rect

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Axis along which a split lays children out."""
    HORIZONTAL = "horizontal"  # children side by side, left to right
    VERTICAL = "vertical"      # children stacked, top to bottom


@dataclass(frozen=True)
class Fixed:
    cells: int

    def __post_init__(self) -> None:
        if self.cells < 0:
            raise ValueError(f"Fixed size must be >= 0, got {self.cells}")


@dataclass(frozen=True)
class Percent:
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 100:
            raise ValueError(f"Percent must be in 0..100, got {self.value}")


@dataclass(frozen=True)
class Min:
    cells: int = 0

    def __post_init__(self) -> None:
        if self.cells < 0:
            raise ValueError(f"Min size must be >= 0, got {self.cells}")


Constraint = Union[Fixed, Percent, Min]


def parse_constraint(spec: Union[str, dict]) -> Constraint:
    """
    Parse "fixed:3", "percent:50", "min:0" or {"fixed": 3} style specs.
    """
    if isinstance(spec, str):
        kind, sep, amount = spec.partition(":")
        if not sep:
            raise ValueError(f"Constraint must look like 'kind:n', got {spec!r}")
    elif isinstance(spec, dict) and len(spec) == 1:
        ((kind, amount),) = spec.items()
    else:
        raise ValueError(f"Invalid constraint: {spec!r}")

    if isinstance(amount, bool) or not isinstance(amount, (int, str)):
        raise ValueError(f"Constraint amount must be an integer, got {amount!r}")
    try:
        n = int(amount)
    except ValueError:
        raise ValueError(f"Constraint amount must be an integer, got {amount!r}") from None

    kind = kind.strip().lower()
    if kind == "fixed":
        return Fixed(n)
    if kind == "percent":
        return Percent(n)
    if kind == "min":
        return Min(n)
    raise ValueError(f"Unknown constraint kind: {kind!r}")


def _sizes(extent: int, constraints: Sequence[Constraint]) -> list[int]:
    """Resolve constraints to cell counts summing exactly to extent."""
    requested: list[int] = []
    for c in constraints:
        if isinstance(c, Fixed):
            requested.append(c.cells)
        elif isinstance(c, Percent):
            requested.append(extent * c.value // 100)
        elif isinstance(c, Min):
            requested.append(c.cells)
        else:
            raise TypeError(f"Not a constraint: {c!r}")

    total = sum(requested)
    if total > extent:
        # Overflow: hand out space in order until it runs out
        logger.debug("Constraints overflow extent %d by %d cells", extent, total - extent)
        sizes = []
        remaining = extent
        for size in requested:
            take = min(size, remaining)
            sizes.append(take)
            remaining -= take
        return sizes

    sizes = list(requested)
    leftover = extent - total
    flexible = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
    if flexible:
        share, extra = divmod(leftover, len(flexible))
        for rank, i in enumerate(flexible):
            sizes[i] += share + (1 if rank < extra else 0)
    else:
        sizes[-1] += leftover
    return sizes


def split(
    region: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
    margin: int = 0,
) -> list[Rect]:
    """
    Split region into len(constraints) child regions.

    Returns an empty list when there are no constraints or the
    post-margin region has no extent along direction.
    """
    area = region.inner(margin)
    extent = area.width if direction is Direction.HORIZONTAL else area.height
    if not constraints or extent == 0:
        return []

    children: list[Rect] = []
    offset = 0
    for size in _sizes(extent, constraints):
        if direction is Direction.HORIZONTAL:
            children.append(Rect(area.x + offset, area.y, size, area.height))
        else:
            children.append(Rect(area.x, area.y + offset, area.width, size))
        offset += size
    return children
