"""The dashboard: tab header plus the selected tab's content tree."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from tabdash.cli.core.events import EventSource, Event, InputFailed, KeyPress, is_quit
from tabdash.cli.core.input import Key
from tabdash.cli.core.layout import Fixed, Min
from tabdash.cli.core.tabs import TabSet
from tabdash.cli.core.terminal import Terminal, TerminalSize
from tabdash.cli.widgets import render
from tabdash.content.nodes import Block, ContentNode, Tab, TabBar, vsplit
from tabdash.core.canvas import Canvas
from tabdash.errors import InputClosedError
from tabdash.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)

HEADER_HEIGHT = 3


def compose(tabs: TabSet, page: ContentNode) -> ContentNode:
    """Full-screen tree: a bordered tab bar above the page."""
    header = Block(title="Tabs", kind=TabBar(tabs.titles, tabs.selected))
    return vsplit([Fixed(HEADER_HEIGHT), Min(0)], [header, page])


def render_frame(tabs: TabSet, page: ContentNode, width: int, height: int) -> Canvas:
    """Render one frame off-screen."""
    canvas = Canvas(width, height)
    render(compose(tabs, page), canvas.bounds, canvas)
    return canvas


class DashboardApp:
    """
    Interactive tabbed dashboard.

    Each iteration samples the terminal size, redraws the whole frame,
    then blocks for one event. Left/Right change tab, q quits. Ticks
    only cause the next redraw.
    """

    def __init__(
        self,
        tabs: Sequence[Tab],
        selected: int = 0,
        events: Optional[EventSource] = None,
        terminal=Terminal,
    ) -> None:
        self.pages = [tab.content for tab in tabs]
        self.tabs = TabSet([tab.title for tab in tabs], selected)
        self.events = events if events is not None else EventSource()
        self.terminal = terminal
        self.renderer = TerminalRenderer()
        self.canvas = Canvas(0, 0)
        self.size: Optional[TerminalSize] = None
        self.running = False
        self.frames = 0
        self.failure: Optional[InputClosedError] = None

    def run(self) -> None:
        """
        Run until quit. The terminal is restored on every exit path;
        an input failure is re-raised after restoring it.
        """
        with self.terminal.managed_mode():
            self.events.start()
            self.running = True
            while self.running:
                self._sync_size()
                self._draw()
                self.handle_event(self.events.next_event())
        if self.failure is not None:
            raise self.failure

    def _sync_size(self) -> None:
        size = self.terminal.size()
        if size != self.size:
            logger.debug("Resize %s -> %s", self.size, size)
            self.size = size
            self.canvas.resize(size.width, size.height)

    def _draw(self) -> None:
        self.canvas.reset()
        render(compose(self.tabs, self.pages[self.tabs.selected]), self.canvas.bounds, self.canvas)
        self.terminal.write(self.renderer.render(self.canvas))
        self.frames += 1

    def handle_event(self, event: Event) -> None:
        if isinstance(event, KeyPress):
            if is_quit(event.key):
                self.running = False
            elif event.key.key is Key.LEFT:
                self.tabs.previous()
            elif event.key.key is Key.RIGHT:
                self.tabs.next()
        elif isinstance(event, InputFailed):
            self.failure = event.error
            self.running = False


def run_dashboard(tabs: Sequence[Tab], selected: int = 0, tick_rate: Optional[float] = None) -> None:
    """Launch the dashboard application."""
    events = EventSource(tick_rate=tick_rate) if tick_rate is not None else None
    app = DashboardApp(tabs, selected=selected, events=events)
    app.run()
