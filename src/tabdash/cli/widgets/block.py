"""Block widget - border, title and the content kind inside them."""

from __future__ import annotations

from tabdash.cli.widgets.gauge import render_gauge
from tabdash.cli.widgets.paragraph import render_paragraph
from tabdash.cli.widgets.selectable_list import render_list
from tabdash.cli.widgets.tab_bar import render_tab_bar
from tabdash.content.nodes import Block, Gauge, Paragraph, SelectableList, TabBar
from tabdash.core.canvas import Canvas
from tabdash.core.rect import Rect
from tabdash.core.style import Style

# Single-line box drawing
HORIZONTAL = '─'
VERTICAL = '│'
TOP_LEFT = '┌'
TOP_RIGHT = '┐'
BOTTOM_LEFT = '└'
BOTTOM_RIGHT = '┘'


def block_inner(block: Block, area: Rect) -> Rect:
    """
    Content area of a block: shrunk by one cell per bordered side.
    A borderless block with a title gives up its top row to the title.
    """
    if block.borders:
        return area.inner(1)
    if block.title:
        return Rect(area.x, area.y + min(1, area.height), area.width, max(0, area.height - 1))
    return area


def draw_border(area: Rect, canvas: Canvas, style: Style) -> None:
    if area.is_empty:
        return
    top, bottom = area.y, area.bottom - 1
    left, right = area.x, area.right - 1
    for x in range(left, right + 1):
        canvas.put_char(x, top, HORIZONTAL, style, clip=area)
        canvas.put_char(x, bottom, HORIZONTAL, style, clip=area)
    for y in range(top, bottom + 1):
        canvas.put_char(left, y, VERTICAL, style, clip=area)
        canvas.put_char(right, y, VERTICAL, style, clip=area)
    canvas.put_char(left, top, TOP_LEFT, style, clip=area)
    canvas.put_char(right, top, TOP_RIGHT, style, clip=area)
    canvas.put_char(left, bottom, BOTTOM_LEFT, style, clip=area)
    canvas.put_char(right, bottom, BOTTOM_RIGHT, style, clip=area)


def draw_title(block: Block, area: Rect, canvas: Canvas) -> None:
    """Title on the top row, truncated to fit between the corners."""
    if block.borders:
        x, room = area.x + 1, area.width - 2
    else:
        x, room = area.x, area.width
    if room <= 0:
        return
    canvas.put_text(x, area.y, block.title[:room], block.style.patch(block.title_style), clip=area)


def render_block(block: Block, area: Rect, canvas: Canvas) -> None:
    if area.is_empty:
        return

    canvas.set_style(area, block.style)
    if block.borders:
        draw_border(area, canvas, block.style)
    if block.title:
        draw_title(block, area, canvas)

    inner = block_inner(block, area)
    kind = block.kind
    if kind is None or inner.is_empty:
        return
    if isinstance(kind, Paragraph):
        render_paragraph(kind, inner, canvas, block.style)
    elif isinstance(kind, Gauge):
        render_gauge(kind, inner, canvas, block.style)
    elif isinstance(kind, SelectableList):
        render_list(kind, inner, canvas, block.style)
    elif isinstance(kind, TabBar):
        render_tab_bar(kind, inner, canvas, block.style)
    else:
        raise TypeError(f"Unknown block kind: {type(kind).__name__}")
