"""Entry point of the widget renderer: walk a content tree onto a canvas."""

from __future__ import annotations

from tabdash.cli.core.layout import split
from tabdash.cli.widgets.block import render_block
from tabdash.content.nodes import Block, ContentNode, Layers, Split
from tabdash.core.canvas import Canvas
from tabdash.core.rect import Rect


def render(node: ContentNode, area: Rect, canvas: Canvas) -> None:
    """
    Paint node into area of canvas.

    Purely a function of (node, area): no state is kept between calls,
    and nothing outside area is written.
    """
    if isinstance(node, Split):
        regions = split(area, node.direction, node.constraints, node.margin)
        for child, region in zip(node.children, regions):
            render(child, region, canvas)
    elif isinstance(node, Layers):
        for child in node.children:
            render(child, area, canvas)
    elif isinstance(node, Block):
        render_block(node, area, canvas)
    else:
        raise TypeError(f"Not a content node: {type(node).__name__}")
