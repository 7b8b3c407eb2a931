"""Content tree: the declarative description of what a tab shows.

A tree is built from three node types. Split and Layers arrange other
nodes; Block is a leaf that paints something. What a Block paints is
its kind: a Paragraph, Gauge, SelectableList or TabBar (or nothing,
for a bare frame). The set of kinds is closed; the widget renderer has
one case per kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from tabdash.cli.core.layout import Constraint, Direction
from tabdash.core.color import Color
from tabdash.core.style import Style

TITLE_STYLE = Style(fg=Color.GREEN, bold=True)
HIGHLIGHT_STYLE = Style(fg=Color.YELLOW, bold=True)
GAUGE_STYLE = Style(fg=Color.MAGENTA, bg=Color.BLACK, italic=True)


@dataclass(frozen=True)
class Paragraph:
    """Text with inline {mod=bold;fg=yellow ...} markup."""
    text: str
    wrap: bool = True


@dataclass(frozen=True)
class Gauge:
    """
    Horizontal progress bar. percent is clamped to 0..100 when drawn;
    label defaults to "<percent>%".
    """
    percent: int
    label: Optional[str] = None


@dataclass(frozen=True)
class SelectableList:
    """One item per row; empty strings give blank separator rows."""
    items: tuple[str, ...]
    selected: Optional[int] = None
    highlight_style: Style = HIGHLIGHT_STYLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class TabBar:
    """Row of tab titles with the selected one highlighted."""
    titles: tuple[str, ...]
    selected: int = 0
    style: Style = Style(fg=Color.GREEN)
    highlight_style: Style = Style(fg=Color.YELLOW)
    divider: str = "│"

    def __post_init__(self) -> None:
        object.__setattr__(self, "titles", tuple(self.titles))


BlockKind = Union[Paragraph, Gauge, SelectableList, TabBar, None]


@dataclass(frozen=True)
class Block:
    """A leaf region with optional border and title around its kind."""
    title: Optional[str] = None
    kind: BlockKind = None
    style: Style = field(default_factory=Style)
    title_style: Style = TITLE_STYLE
    borders: bool = True


@dataclass(frozen=True)
class Split:
    """Divide the region with one constraint per child."""
    direction: Direction
    constraints: tuple[Constraint, ...]
    children: tuple["ContentNode", ...]
    margin: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "constraints", tuple(self.constraints))
        object.__setattr__(self, "children", tuple(self.children))
        if len(self.constraints) != len(self.children):
            raise ValueError(
                f"Split has {len(self.constraints)} constraints "
                f"but {len(self.children)} children"
            )
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")


@dataclass(frozen=True)
class Layers:
    """Render every child into the same region, later ones on top."""
    children: tuple["ContentNode", ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))


ContentNode = Union[Split, Layers, Block]


@dataclass(frozen=True)
class Tab:
    title: str
    content: ContentNode


def vsplit(constraints: Sequence[Constraint], children: Sequence[ContentNode], margin: int = 0) -> Split:
    """Shorthand for a vertical Split."""
    return Split(Direction.VERTICAL, tuple(constraints), tuple(children), margin)


def hsplit(constraints: Sequence[Constraint], children: Sequence[ContentNode], margin: int = 0) -> Split:
    """Shorthand for a horizontal Split."""
    return Split(Direction.HORIZONTAL, tuple(constraints), tuple(children), margin)
