"""Event stream: keyboard and ticker threads feeding one FIFO queue."""

from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

from tabdash.cli.core.input import InputReader, KeyEvent
from tabdash.errors import InputClosedError

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 0.2  # seconds
QUIT_CHAR = 'q'


@dataclass(frozen=True)
class KeyPress:
    key: KeyEvent


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class InputFailed:
    """The keyboard producer stopped because its input failed."""
    error: InputClosedError


Event = Union[KeyPress, Tick, InputFailed]


def is_quit(event: KeyEvent) -> bool:
    return event.char == QUIT_CHAR


class EventSource:
    """
    Merges keyboard input and a periodic tick into one ordered stream.

    Two daemon threads publish into an unbounded queue.Queue; the
    caller pulls with next_event(). Events come out in the order they
    reached the queue. There is no cancellation: the keyboard thread
    ends after publishing the quit key (or an input failure) and the
    ticker runs until the process exits.
    """

    def __init__(
        self,
        reader_factory: Callable[[], InputReader] = InputReader,
        tick_rate: float = DEFAULT_TICK_RATE,
    ) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate = tick_rate
        self._reader_factory = reader_factory
        self._queue: queue.Queue[Event] = queue.Queue()
        self._threads: list[threading.Thread] = []

    def start(self) -> None:
        """Spawn both producers. Call once."""
        if self._threads:
            raise RuntimeError("EventSource already started")
        reader = self._reader_factory()
        self._threads = [
            threading.Thread(target=self._read_keys, args=(reader,), name="tabdash-keys", daemon=True),
            threading.Thread(target=self._tick, name="tabdash-ticker", daemon=True),
        ]
        for thread in self._threads:
            thread.start()
        logger.info("Event producers started (tick every %.3fs)", self.tick_rate)

    def next_event(self, timeout: Optional[float] = None) -> Event:
        """Block until the next event. Raises queue.Empty on timeout."""
        return self._queue.get(timeout=timeout)

    def put(self, event: Event) -> None:
        self._queue.put(event)

    def _read_keys(self, reader: InputReader) -> None:
        while True:
            try:
                key = reader.read_blocking()
            except InputClosedError as exc:
                logger.error("Keyboard producer stopped: %s", exc)
                self.put(InputFailed(exc))
                return
            self.put(KeyPress(key))
            if is_quit(key):
                logger.info("Keyboard producer saw quit key")
                return

    def _tick(self) -> None:
        while True:
            self.put(Tick())
            time.sleep(self.tick_rate)
