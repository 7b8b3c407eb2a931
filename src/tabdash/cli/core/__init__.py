"""Core TUI infrastructure - terminal I/O, input, events, layout, tabs."""

from tabdash.cli.core.terminal import Terminal, TerminalSize
from tabdash.cli.core.input import InputReader, KeyEvent, Key
from tabdash.cli.core.events import EventSource, Event, KeyPress, Tick, InputFailed
from tabdash.cli.core.layout import Direction, Fixed, Percent, Min, Constraint, split
from tabdash.cli.core.tabs import TabSet

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "EventSource",
    "Event",
    "KeyPress",
    "Tick",
    "InputFailed",
    "Direction",
    "Fixed",
    "Percent",
    "Min",
    "Constraint",
    "split",
    "TabSet",
]
