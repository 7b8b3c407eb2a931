"""Shared fixtures: fake terminal, scripted event source, keyboard pipes."""

import os
from contextlib import contextmanager
from typing import Iterator

import pytest

from tabdash.cli.core.input import InputReader
from tabdash.cli.core.terminal import TerminalSize
from tabdash.core.canvas import Canvas


class FakeTerminal:
    """Stands in for Terminal: records writes and mode changes."""

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.sizes = [TerminalSize(width, height)]
        self.writes: list[str] = []
        self.entered = False
        self.exited = False

    def size(self) -> TerminalSize:
        # Walk through queued sizes, then stay on the last one
        if len(self.sizes) > 1:
            return self.sizes.pop(0)
        return self.sizes[0]

    def write(self, text: str) -> None:
        self.writes.append(text)

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        self.entered = True
        try:
            yield
        finally:
            self.exited = True


class ScriptedEvents:
    """Event source that replays a fixed list of events."""

    def __init__(self, events: list) -> None:
        self.pending = list(events)
        self.started = False
        self.pulled = 0

    def start(self) -> None:
        self.started = True

    def next_event(self, timeout=None):
        if not self.pending:
            raise AssertionError("event script exhausted")
        self.pulled += 1
        event = self.pending.pop(0)
        if isinstance(event, Exception):
            raise event
        return event


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(40, 12)


@pytest.fixture
def keyboard() -> Iterator[tuple[InputReader, int]]:
    """InputReader on the read end of a pipe, plus the write end."""
    read_fd, write_fd = os.pipe()
    reader = InputReader(fd=read_fd)
    yield reader, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass
