"""Widget renderer - paints content nodes into regions of a Canvas."""

from tabdash.cli.widgets.base import render
from tabdash.cli.widgets.block import render_block, block_inner
from tabdash.cli.widgets.paragraph import render_paragraph
from tabdash.cli.widgets.gauge import render_gauge
from tabdash.cli.widgets.selectable_list import render_list
from tabdash.cli.widgets.tab_bar import render_tab_bar

__all__ = [
    "render",
    "render_block",
    "block_inner",
    "render_paragraph",
    "render_gauge",
    "render_list",
    "render_tab_bar",
]
