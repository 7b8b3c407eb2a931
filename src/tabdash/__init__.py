"""
tabdash: full-screen tabbed terminal dashboards

Each tab is a declarative tree of splits and blocks (paragraphs,
gauges, lists). The tree is laid out against the terminal size on
every frame and repainted while keyboard input and a periodic tick
drive the event loop.

Quick Start:
    >>> from tabdash import default_tabs, run_dashboard
    >>> run_dashboard(default_tabs())
"""

import logging

__version__ = "0.1.0"

# Nothing may reach stderr while the terminal is in raw mode
logging.getLogger(__name__).addHandler(logging.NullHandler())

from tabdash.core import Canvas, Cell, Color, Rect, Style
from tabdash.cli.core.layout import Direction, Fixed, Min, Percent, split
from tabdash.cli.core.tabs import TabSet
from tabdash.content import (
    Block,
    Gauge,
    Layers,
    Paragraph,
    SelectableList,
    Split,
    Tab,
    default_tabs,
    load_tabs,
)
from tabdash.cli.widgets import render
from tabdash.cli.dashboard import DashboardApp, render_frame, run_dashboard
from tabdash.errors import ContentError, InputClosedError, TabdashError, TerminalInitError

__all__ = [
    "__version__",
    # Core types
    "Canvas",
    "Cell",
    "Color",
    "Rect",
    "Style",
    # Layout
    "Direction",
    "Fixed",
    "Min",
    "Percent",
    "split",
    "TabSet",
    # Content
    "Block",
    "Gauge",
    "Layers",
    "Paragraph",
    "SelectableList",
    "Split",
    "Tab",
    "default_tabs",
    "load_tabs",
    # Rendering
    "render",
    "render_frame",
    "DashboardApp",
    "run_dashboard",
    # Errors
    "TabdashError",
    "TerminalInitError",
    "InputClosedError",
    "ContentError",
]
