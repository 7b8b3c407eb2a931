"""Load dashboard content from JSON.

Document shape::

    {"tabs": [{"title": "Welcome", "content": <node>}, ...]}

Nodes are objects with a "type":

    {"type": "split", "direction": "vertical", "margin": 0,
     "constraints": ["fixed:3", {"percent": 50}, "min:0"],
     "children": [<node>, ...]}
    {"type": "layers", "children": [<node>, ...]}
    {"type": "block", "title": "...", "borders": true,
     "style": {"fg": "green"}, "title_style": {"mod": "bold"},
     "paragraph": {"text": "...", "wrap": true}}

A block carries at most one of "paragraph", "gauge"
({"percent": 80, "label": "..."}) or "list"
({"items": [...], "selected": 0, "highlight_style": {...}}).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from tabdash.cli.core.layout import Direction, parse_constraint
from tabdash.content.nodes import (
    HIGHLIGHT_STYLE,
    TITLE_STYLE,
    Block,
    ContentNode,
    Gauge,
    Layers,
    Paragraph,
    SelectableList,
    Split,
    Tab,
)
from tabdash.core.style import Style
from tabdash.errors import ContentError

logger = logging.getLogger(__name__)

_KINDS = ("paragraph", "gauge", "list")


def _expect(value: Any, kind: type, path: str, what: str) -> Any:
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ContentError(f"{what} must be {kind.__name__}, got {type(value).__name__}", path)
    return value


def _style(data: Any, path: str, default: Style = Style()) -> Style:
    if data is None:
        return default
    _expect(data, dict, path, "style")
    try:
        return Style.parse(data)
    except ValueError as exc:
        raise ContentError(str(exc), path) from None


def _children(data: dict, path: str) -> list[ContentNode]:
    children = _expect(data.get("children"), list, f"{path}.children", "children")
    return [parse_node(child, f"{path}.children[{i}]") for i, child in enumerate(children)]


def _split(data: dict, path: str) -> Split:
    try:
        direction = Direction(data.get("direction", "vertical"))
    except ValueError:
        raise ContentError(f"unknown direction {data.get('direction')!r}", f"{path}.direction") from None

    specs = _expect(data.get("constraints"), list, f"{path}.constraints", "constraints")
    constraints = []
    for i, spec in enumerate(specs):
        try:
            constraints.append(parse_constraint(spec))
        except ValueError as exc:
            raise ContentError(str(exc), f"{path}.constraints[{i}]") from None

    margin = _expect(data.get("margin", 0), int, f"{path}.margin", "margin")
    try:
        return Split(direction, tuple(constraints), tuple(_children(data, path)), margin)
    except ValueError as exc:
        raise ContentError(str(exc), path) from None


def _kind(data: dict, path: str) -> Union[Paragraph, Gauge, SelectableList, None]:
    present = [k for k in _KINDS if k in data]
    if len(present) > 1:
        raise ContentError(f"block has more than one kind: {', '.join(present)}", path)
    if not present:
        return None

    name = present[0]
    body = _expect(data[name], dict, f"{path}.{name}", name)
    where = f"{path}.{name}"

    if name == "paragraph":
        text = _expect(body.get("text"), str, f"{where}.text", "text")
        wrap = _expect(body.get("wrap", True), bool, f"{where}.wrap", "wrap")
        return Paragraph(text, wrap)

    if name == "gauge":
        percent = _expect(body.get("percent"), int, f"{where}.percent", "percent")
        label = body.get("label")
        if label is not None:
            _expect(label, str, f"{where}.label", "label")
        return Gauge(percent, label)

    items = _expect(body.get("items"), list, f"{where}.items", "items")
    for i, item in enumerate(items):
        _expect(item, str, f"{where}.items[{i}]", "item")
    selected = body.get("selected")
    if selected is not None:
        _expect(selected, int, f"{where}.selected", "selected")
        if not 0 <= selected < len(items):
            raise ContentError(f"selected index {selected} out of range", f"{where}.selected")
    highlight = _style(body.get("highlight_style"), f"{where}.highlight_style", HIGHLIGHT_STYLE)
    return SelectableList(tuple(items), selected, highlight)


def _block(data: dict, path: str) -> Block:
    title = data.get("title")
    if title is not None:
        _expect(title, str, f"{path}.title", "title")
    return Block(
        title=title,
        kind=_kind(data, path),
        style=_style(data.get("style"), f"{path}.style"),
        title_style=_style(data.get("title_style"), f"{path}.title_style", TITLE_STYLE),
        borders=_expect(data.get("borders", True), bool, f"{path}.borders", "borders"),
    )


def parse_node(data: Any, path: str = "$") -> ContentNode:
    """Build a content node from decoded JSON."""
    _expect(data, dict, path, "node")
    node_type = data.get("type")
    if node_type == "split":
        return _split(data, path)
    if node_type == "layers":
        return Layers(tuple(_children(data, path)))
    if node_type == "block":
        return _block(data, path)
    raise ContentError(f"unknown node type {node_type!r}", f"{path}.type")


def parse_document(data: Any) -> list[Tab]:
    """Build the tab list from a decoded content document."""
    _expect(data, dict, "$", "document")
    entries = _expect(data.get("tabs"), list, "$.tabs", "tabs")
    if not entries:
        raise ContentError("at least one tab is required", "$.tabs")

    tabs: list[Tab] = []
    for i, entry in enumerate(entries):
        path = f"$.tabs[{i}]"
        _expect(entry, dict, path, "tab")
        title = _expect(entry.get("title"), str, f"{path}.title", "title")
        try:
            content = parse_node(entry.get("content"), f"{path}.content")
        except RecursionError:
            raise ContentError("content is nested too deeply", f"{path}.content") from None
        tabs.append(Tab(title, content))
    return tabs


def load_tabs(path: Union[str, Path]) -> list[Tab]:
    """Read and validate a JSON content file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ContentError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ContentError(f"invalid JSON in {path}: {exc.msg} (line {exc.lineno})") from exc
    except RecursionError:
        raise ContentError(f"invalid JSON in {path}: nested too deeply") from None
    tabs = parse_document(data)
    logger.info("Loaded %d tabs from %s", len(tabs), path)
    return tabs
