"""Tests for the widget renderer."""

import re

import pytest

from tabdash.cli.core.layout import Fixed, Min
from tabdash.cli.widgets import block_inner, render, render_gauge, render_tab_bar
from tabdash.content import default_tabs
from tabdash.content.nodes import (
    GAUGE_STYLE,
    Block,
    Gauge,
    Layers,
    Paragraph,
    SelectableList,
    TabBar,
    vsplit,
)
from tabdash.core.canvas import Canvas
from tabdash.core.color import Color
from tabdash.core.rect import Rect
from tabdash.core.style import Style
from tabdash.render.terminal import TerminalRenderer


def rows(canvas: Canvas) -> list[str]:
    return [canvas.row_text(y) for y in range(canvas.height)]


def bare(kind) -> Block:
    return Block(kind=kind, borders=False)


class TestBlock:
    """Tests for borders and titles."""

    def test_border_and_title(self) -> None:
        canvas = Canvas(8, 3)
        render(Block(title="Hi"), canvas.bounds, canvas)
        assert rows(canvas) == ["┌Hi────┐", "│      │", "└──────┘"]

    def test_title_truncated(self) -> None:
        canvas = Canvas(8, 3)
        render(Block(title="Long title here"), canvas.bounds, canvas)
        assert rows(canvas)[0] == "┌Long t┐"

    def test_title_style(self) -> None:
        canvas = Canvas(8, 3)
        render(Block(title="Hi"), canvas.bounds, canvas)
        assert canvas[1, 0].style == Style(fg=Color.GREEN, bold=True)
        assert canvas[0, 0].style == Style()

    def test_inner(self) -> None:
        area = Rect(0, 0, 10, 5)
        assert block_inner(Block(), area) == Rect(1, 1, 8, 3)
        assert block_inner(Block(title="t", borders=False), area) == Rect(0, 1, 10, 4)
        assert block_inner(Block(borders=False), area) == area

    def test_tiny_block(self) -> None:
        canvas = Canvas(3, 3)
        render(Block(title="x", kind=Paragraph("hello")), Rect(0, 0, 1, 1), canvas)
        assert canvas[0, 0].char != ' '
        assert rows(canvas)[1:] == ["   ", "   "]

    def test_unknown_kind(self, canvas: Canvas) -> None:
        with pytest.raises(TypeError):
            render(Block(kind="oops"), canvas.bounds, canvas)

    def test_not_a_node(self, canvas: Canvas) -> None:
        with pytest.raises(TypeError):
            render("oops", canvas.bounds, canvas)


class TestParagraph:
    """Tests for paragraph rendering."""

    def test_wraps_inside_border(self) -> None:
        canvas = Canvas(9, 4)
        render(Block(title="P", kind=Paragraph("hello world")), canvas.bounds, canvas)
        assert rows(canvas)[1:3] == ["│hello  │", "│world  │"]

    def test_markup_styles_cells(self) -> None:
        canvas = Canvas(10, 1)
        render(bare(Paragraph("{mod=bold;fg=yellow Hi} you")), canvas.bounds, canvas)
        assert rows(canvas) == ["Hi you    "]
        assert canvas[0, 0].style == Style(fg=Color.YELLOW, bold=True)
        assert canvas[3, 0].style == Style()

    def test_malformed_markup_verbatim(self) -> None:
        canvas = Canvas(20, 1)
        render(bare(Paragraph("{mod=bold oops", wrap=False)), canvas.bounds, canvas)
        assert rows(canvas) == ["{mod=bold oops      "]

    def test_overflowing_rows_dropped(self) -> None:
        canvas = Canvas(5, 2)
        render(bare(Paragraph("a\nb\nc")), canvas.bounds, canvas)
        assert rows(canvas) == ["a    ", "b    "]

    def test_control_characters_never_reach_terminal(self) -> None:
        canvas = Canvas(5, 3)
        render(bare(Paragraph("ab\r\ncd\x1b[2J")), canvas.bounds, canvas)
        assert rows(canvas) == ["ab   ", "cd\ufffd[2", "J    "]

        out = TerminalRenderer().render(canvas)
        assert "\r" not in out
        assert "\x1b" not in re.sub(r"\x1b\[[0-9;]*[Hm]", "", out)


class TestGauge:
    """Tests for gauge rendering."""

    def test_fill_and_label(self) -> None:
        canvas = Canvas(10, 1)
        render_gauge(Gauge(50), canvas.bounds, canvas)
        assert rows(canvas) == ["   50%    "]
        assert [canvas[x, 0].style.bg for x in range(10)] == [Color.WHITE] * 5 + [Color.RESET] * 5

    def test_label_inverts_over_bar(self) -> None:
        canvas = Canvas(10, 1)
        render_gauge(Gauge(50), canvas.bounds, canvas)
        assert canvas[4, 0].style.fg is Color.RESET
        assert canvas[5, 0].style.fg is Color.WHITE

    def test_titled_gauge_in_block(self) -> None:
        canvas = Canvas(10, 2)
        node = Block(title="AWS", kind=Gauge(50, label="x"), style=GAUGE_STYLE, borders=False)
        render(node, canvas.bounds, canvas)
        assert rows(canvas) == ["AWS       ", "    x     "]
        assert canvas[0, 1].style.bg is Color.MAGENTA
        assert canvas[9, 1].style.bg is Color.BLACK

    def test_every_row_is_bar(self) -> None:
        canvas = Canvas(4, 3)
        render_gauge(Gauge(100, label=""), canvas.bounds, canvas)
        assert all(cell.style.bg is Color.WHITE for _, _, cell in canvas.cells())

    @pytest.mark.parametrize("over, clamped", [(150, 100), (-10, 0)])
    def test_percent_clamped(self, over: int, clamped: int) -> None:
        a, b = Canvas(12, 3), Canvas(12, 3)
        render(Block(title="g", kind=Gauge(over)), a.bounds, a)
        render(Block(title="g", kind=Gauge(clamped)), b.bounds, b)
        assert a.snapshot() == b.snapshot()

    def test_long_label_truncated(self) -> None:
        canvas = Canvas(4, 1)
        render_gauge(Gauge(0, label="abcdefgh"), canvas.bounds, canvas)
        assert rows(canvas) == ["abcd"]


class TestSelectableList:
    """Tests for list rendering."""

    def test_rows_and_selection(self) -> None:
        canvas = Canvas(5, 3)
        render(bare(SelectableList(["a", "", "b", "c"], selected=2)), canvas.bounds, canvas)
        assert rows(canvas) == ["a    ", "     ", "b    "]
        assert canvas[4, 2].style == Style(fg=Color.YELLOW, bold=True)
        assert canvas[4, 0].style == Style()

    def test_items_clipped_to_width(self) -> None:
        canvas = Canvas(4, 1)
        render(bare(SelectableList(["Prometheus"])), canvas.bounds, canvas)
        assert rows(canvas) == ["Prom"]

    def test_selection_out_of_view(self) -> None:
        canvas = Canvas(4, 1)
        render(bare(SelectableList(["a", "b"], selected=1)), canvas.bounds, canvas)
        assert canvas[0, 0].style == Style()


class TestTabBar:
    """Tests for the tab bar."""

    def test_titles_and_highlight(self) -> None:
        canvas = Canvas(12, 1)
        render_tab_bar(TabBar(("One", "Two"), selected=1), canvas.bounds, canvas)
        assert rows(canvas) == [" One │ Two  "]
        assert canvas[1, 0].style.fg is Color.GREEN
        assert canvas[7, 0].style.fg is Color.YELLOW

    def test_clipped(self) -> None:
        canvas = Canvas(6, 1)
        render_tab_bar(TabBar(("Welcome", "Personal")), canvas.bounds, canvas)
        assert rows(canvas) == [" Welco"]


class TestComposition:
    """Tests for splits, layers and general renderer guarantees."""

    def test_split(self) -> None:
        canvas = Canvas(10, 3)
        node = vsplit([Fixed(1), Min(0)], [bare(Paragraph("top")), bare(Paragraph("bottom"))])
        render(node, canvas.bounds, canvas)
        assert rows(canvas) == ["top       ", "bottom    ", "          "]

    def test_layers_paint_in_order(self) -> None:
        canvas = Canvas(12, 4)
        node = Layers([
            Block(title="Frame"),
            vsplit([Fixed(1)], [bare(Paragraph("inside"))], margin=1),
        ])
        render(node, canvas.bounds, canvas)
        assert rows(canvas)[:2] == ["┌Frame─────┐", "│inside    │"]

    def test_no_writes_outside_region(self) -> None:
        canvas = Canvas(40, 12)
        region = Rect(5, 2, 10, 4)
        text = "a very long paragraph " * 20
        render(Block(title="Overflowing title", kind=Paragraph(text)), region, canvas)
        for x, y, cell in canvas.cells():
            if not region.contains(x, y):
                assert cell.is_default(), (x, y)

    def test_zero_size_region_renders_nothing(self, canvas: Canvas) -> None:
        for area in (Rect(3, 3, 0, 5), Rect(3, 3, 5, 0)):
            render(Block(title="T", kind=Paragraph("x")), area, canvas)
            render(bare(Gauge(50)), area, canvas)
        assert all(cell.is_default() for _, _, cell in canvas.cells())

    @pytest.mark.parametrize("width, height", [(120, 40), (80, 24), (17, 5)])
    def test_render_is_idempotent(self, width: int, height: int) -> None:
        for tab in default_tabs():
            first, second = Canvas(width, height), Canvas(width, height)
            render(tab.content, first.bounds, first)
            render(tab.content, second.bounds, second)
            assert first.snapshot() == second.snapshot()
            render(tab.content, first.bounds, first)
            assert first.snapshot() == second.snapshot()
