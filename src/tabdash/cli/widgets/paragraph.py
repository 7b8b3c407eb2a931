"""Paragraph widget - styled, optionally wrapped text."""

from __future__ import annotations

from tabdash.cli.widgets.markup import layout_text
from tabdash.content.nodes import Paragraph
from tabdash.core.canvas import Canvas
from tabdash.core.rect import Rect
from tabdash.core.style import Style


def render_paragraph(paragraph: Paragraph, area: Rect, canvas: Canvas, base: Style = Style()) -> None:
    """Draw the paragraph top-aligned; rows past the area height are dropped."""
    rows = layout_text(paragraph.text, area.width, paragraph.wrap, base)
    for dy, row in enumerate(rows[:area.height]):
        for dx, (char, style) in enumerate(row):
            canvas.put_char(area.x + dx, area.y + dy, char, style, clip=area)
