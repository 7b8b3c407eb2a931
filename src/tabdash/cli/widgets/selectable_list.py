"""List widget - one item per row with optional highlighted selection."""

from __future__ import annotations

from tabdash.content.nodes import SelectableList
from tabdash.core.canvas import Canvas
from tabdash.core.rect import Rect
from tabdash.core.style import Style


def render_list(items: SelectableList, area: Rect, canvas: Canvas, base: Style = Style()) -> None:
    """Rows past the area height are not drawn."""
    for i, item in enumerate(items.items[:area.height]):
        y = area.y + i
        style = base
        if items.selected == i:
            style = base.patch(items.highlight_style)
            canvas.set_style(Rect(area.x, y, area.width, 1), style)
        canvas.put_text(area.x, y, item.replace('\t', ' '), style, clip=area)
