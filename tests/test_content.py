"""Tests for content documents and the built-in sample."""

import json
from pathlib import Path

import pytest

from tabdash.cli.core.layout import Direction, Fixed, Min, Percent
from tabdash.content import default_tabs, load_tabs, parse_document, parse_node
from tabdash.content.nodes import HIGHLIGHT_STYLE, Block, Gauge, Layers, Paragraph, SelectableList, Split
from tabdash.core.color import Color
from tabdash.core.style import Style
from tabdash.errors import ContentError

DOCUMENT = {
    "tabs": [
        {
            "title": "Home",
            "content": {
                "type": "split",
                "direction": "horizontal",
                "margin": 1,
                "constraints": ["percent:30", {"min": 0}],
                "children": [
                    {"type": "block", "title": "Intro",
                     "title_style": {"fg": "yellow", "mod": "bold"},
                     "paragraph": {"text": "{mod=bold Hi}", "wrap": False}},
                    {"type": "layers", "children": [
                        {"type": "block", "title": "Skills"},
                        {"type": "block", "borders": False, "style": {"fg": "magenta", "bg": "black"},
                         "gauge": {"percent": 80, "label": "80 / 100"}},
                    ]},
                ],
            },
        },
        {
            "title": "List",
            "content": {"type": "block", "list": {"items": ["a", "", "b"], "selected": 2}},
        },
    ]
}


def write(tmp_path: Path, data) -> Path:
    path = tmp_path / "content.json"
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return path


class TestLoader:
    """Tests for the JSON loader."""

    def test_load(self, tmp_path: Path) -> None:
        tabs = load_tabs(write(tmp_path, DOCUMENT))
        assert [t.title for t in tabs] == ["Home", "List"]

        home = tabs[0].content
        assert isinstance(home, Split)
        assert home.direction is Direction.HORIZONTAL
        assert home.constraints == (Percent(30), Min(0))
        assert home.margin == 1

        intro, layers = home.children
        assert intro.kind == Paragraph("{mod=bold Hi}", wrap=False)
        assert intro.title_style == Style(fg=Color.YELLOW, bold=True)
        assert isinstance(layers, Layers)
        gauge = layers.children[1]
        assert gauge.kind == Gauge(80, "80 / 100")
        assert gauge.borders is False
        assert gauge.style == Style(fg=Color.MAGENTA, bg=Color.BLACK)

        items = tabs[1].content.kind
        assert items == SelectableList(("a", "", "b"), 2, HIGHLIGHT_STYLE)

    def test_defaults(self) -> None:
        node = parse_node({"type": "block"})
        assert node == Block()

    @pytest.mark.parametrize("data, where", [
        ({"type": "split", "constraints": ["fixed:1"], "children": []}, "$"),
        ({"type": "split", "constraints": ["wide:1"], "children": [{"type": "block"}]}, "$.constraints[0]"),
        ({"type": "split", "direction": "diagonal", "constraints": [], "children": []}, "$.direction"),
        ({"type": "circle"}, "$.type"),
        ({"type": "block", "style": {"fg": "mauve"}}, "$.style"),
        ({"type": "block", "paragraph": {"text": "a"}, "gauge": {"percent": 1}}, "$"),
        ({"type": "block", "gauge": {"percent": "high"}}, "$.gauge.percent"),
        ({"type": "block", "list": {"items": ["a"], "selected": 3}}, "$.list.selected"),
        ({"type": "block", "list": {"items": ["a", 2]}}, "$.list.items[1]"),
        ({"type": "block", "borders": "yes"}, "$.borders"),
        ({"type": "layers", "children": [{"type": "block", "title": 5}]}, "$.children[0].title"),
        ([], "$"),
    ])
    def test_invalid_nodes(self, data, where: str) -> None:
        with pytest.raises(ContentError) as info:
            parse_node(data)
        assert info.value.path == where

    def test_needs_tabs(self) -> None:
        with pytest.raises(ContentError):
            parse_document({"tabs": []})
        with pytest.raises(ContentError):
            parse_document({})

    def test_error_path_points_into_tab(self) -> None:
        doc = {"tabs": [{"title": "x", "content": {"type": "block", "gauge": {}}}]}
        with pytest.raises(ContentError) as info:
            parse_document(doc)
        assert info.value.path == "$.tabs[0].content.gauge.percent"

    def test_infinite_constraint(self, tmp_path: Path) -> None:
        text = (
            '{"tabs": [{"title": "x", "content": {"type": "split",'
            ' "constraints": [{"fixed": Infinity}], "children": [{"type": "block"}]}}]}'
        )
        with pytest.raises(ContentError) as info:
            load_tabs(write(tmp_path, text))
        assert info.value.path == "$.tabs[0].content.constraints[0]"

    def test_deep_nesting(self) -> None:
        node = {"type": "block"}
        for _ in range(5000):
            node = {"type": "layers", "children": [node]}
        with pytest.raises(ContentError) as info:
            parse_document({"tabs": [{"title": "deep", "content": node}]})
        assert info.value.path == "$.tabs[0].content"

    def test_deep_json(self, tmp_path: Path) -> None:
        with pytest.raises(ContentError, match="nested too deeply"):
            load_tabs(write(tmp_path, "[" * 100000 + "]" * 100000))

    def test_invalid_json(self, tmp_path: Path) -> None:
        with pytest.raises(ContentError, match="invalid JSON"):
            load_tabs(write(tmp_path, "{not json"))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContentError, match="cannot read"):
            load_tabs(tmp_path / "missing.json")


class TestDefaultTabs:
    """Tests for the built-in sample dashboard."""

    def test_titles(self) -> None:
        titles = [t.title for t in default_tabs()]
        assert titles == ["Welcome", "Personal", "Skills", "Experience", "Courses", "Looking For"]

    def test_skill_gauges(self) -> None:
        skills = default_tabs()[2].content
        frame, gauges = skills.children[0].children
        assert frame.title == "Tech Stack"
        assert gauges.margin == 1
        assert all(c == Fixed(2) for c in gauges.constraints)
        assert all(isinstance(g.kind, Gauge) for g in gauges.children)
