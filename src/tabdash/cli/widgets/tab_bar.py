"""Tab bar widget - the row of tab titles in the dashboard header."""

from __future__ import annotations

from tabdash.content.nodes import TabBar
from tabdash.core.canvas import Canvas
from tabdash.core.rect import Rect
from tabdash.core.style import Style


def render_tab_bar(bar: TabBar, area: Rect, canvas: Canvas, base: Style = Style()) -> None:
    """Titles separated by the divider; whatever overflows is clipped."""
    if area.is_empty:
        return
    divider = f" {bar.divider} "
    x = area.x + 1
    for i, title in enumerate(bar.titles):
        if x >= area.right:
            break
        if i > 0:
            canvas.put_text(x, area.y, divider, base, clip=area)
            x += len(divider)
        style = base.patch(bar.highlight_style if i == bar.selected else bar.style)
        canvas.put_text(x, area.y, title, style, clip=area)
        x += len(title)
