"""Gauge widget - horizontal progress bar with a centered label."""

from __future__ import annotations

from tabdash.content.nodes import Gauge
from tabdash.core.canvas import Canvas
from tabdash.core.color import Color
from tabdash.core.rect import Rect
from tabdash.core.style import Style


def clamp_percent(percent: int) -> int:
    return max(0, min(100, percent))


def render_gauge(gauge: Gauge, area: Rect, canvas: Canvas, base: Style = Style()) -> None:
    """
    Fill every row of the area: the first width * percent // 100
    columns in the complete style, the rest in the incomplete style.
    The label goes on the middle row and takes the inverse colors of
    the bar under each of its characters.
    """
    if area.is_empty:
        return

    percent = clamp_percent(gauge.percent)
    bar = base.fg if base.fg is not None else Color.WHITE
    track = base.bg if base.bg is not None else Color.RESET
    complete = Style(fg=track, bg=bar)
    incomplete = Style(fg=bar, bg=track)
    filled = area.width * percent // 100

    for y in range(area.y, area.bottom):
        for dx in range(area.width):
            canvas.put_char(area.x + dx, y, ' ', complete if dx < filled else incomplete, clip=area)

    label = gauge.label if gauge.label is not None else f"{percent}%"
    label = label[:area.width]
    start = (area.width - len(label)) // 2
    y = area.y + area.height // 2
    for i, char in enumerate(label):
        dx = start + i
        canvas.put_char(area.x + dx, y, char, complete if dx < filled else incomplete, clip=area)
