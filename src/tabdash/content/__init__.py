"""Dashboard content: node types, the built-in sample and the JSON loader."""

from tabdash.content.nodes import (
    Block,
    ContentNode,
    Gauge,
    Layers,
    Paragraph,
    SelectableList,
    Split,
    Tab,
    TabBar,
    hsplit,
    vsplit,
)
from tabdash.content.default import default_tabs
from tabdash.content.loader import load_tabs, parse_document, parse_node

__all__ = [
    "Block",
    "ContentNode",
    "Gauge",
    "Layers",
    "Paragraph",
    "SelectableList",
    "Split",
    "Tab",
    "TabBar",
    "hsplit",
    "vsplit",
    "default_tabs",
    "load_tabs",
    "parse_document",
    "parse_node",
]
