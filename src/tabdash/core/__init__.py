"""Core value types: screen regions, styles and the screen buffer."""

from tabdash.core.rect import Rect
from tabdash.core.color import Color
from tabdash.core.style import Style
from tabdash.core.cell import Cell
from tabdash.core.canvas import Canvas

__all__ = ["Rect", "Color", "Style", "Cell", "Canvas"]
