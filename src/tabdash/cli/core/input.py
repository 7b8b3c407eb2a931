"""Raw keyboard decoding."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from tabdash.errors import InputClosedError

ESC = '\x1b'

# How long a lone ESC waits for the rest of a sequence
ESCAPE_TIMEOUT = 0.1


class Key(Enum):
    """Named (non-printable) keys."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key press."""
    key: Optional[Key] = None   # Named key if recognized
    char: Optional[str] = None  # Printable character
    raw: str = ""               # Bytes as received

    @property
    def is_char(self) -> bool:
        return self.char is not None and self.key is None

    def __str__(self) -> str:
        if self.key is not None:
            return self.key.name.lower()
        if self.char is not None:
            return self.char
        return repr(self.raw)


# Escape sequences, without the leading ESC
SEQUENCES: dict[str, Key] = {
    '[A': Key.UP,
    '[B': Key.DOWN,
    '[C': Key.RIGHT,
    '[D': Key.LEFT,
    'OA': Key.UP,
    'OB': Key.DOWN,
    'OC': Key.RIGHT,
    'OD': Key.LEFT,
    '[H': Key.HOME,
    '[F': Key.END,
    '[1~': Key.HOME,
    '[4~': Key.END,
    '[5~': Key.PAGE_UP,
    '[6~': Key.PAGE_DOWN,
    '[3~': Key.DELETE,
}

CONTROL_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


def _sequence_complete(rest: str) -> bool:
    if rest in SEQUENCES:
        return True
    if not rest:
        return False
    if rest[0] in '[O':
        # CSI / SS3: introducer, then parameters up to a final letter or ~
        return len(rest) > 1 and (rest[-1].isalpha() or rest[-1] == '~')
    return True  # ESC + one character (alt-modified key)


class InputReader:
    """
    Keyboard reader working directly on a file descriptor.

    os.read() is used instead of sys.stdin so that escape sequences
    are seen as soon as they arrive. End of input and read errors are
    raised as InputClosedError.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._pending = ""

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """Return the next key, or None if nothing arrives within timeout."""
        while True:
            if self._pending:
                event = self._decode()
                if event is not None:
                    return event
                continue
            if not self._wait(timeout):
                return None
            self._fill()
            if self._pending == ESC:
                self._finish_escape()

    def read_blocking(self) -> KeyEvent:
        """Block until a key arrives."""
        while True:
            event = self.read(timeout=1.0)
            if event is not None:
                return event

    def _fill(self) -> None:
        try:
            data = os.read(self._fd, 1024)
        except OSError as exc:
            raise InputClosedError(f"keyboard read failed: {exc}") from exc
        if not data:
            raise InputClosedError("keyboard input closed")
        self._pending += data.decode('utf-8', errors='replace')

    def _finish_escape(self) -> None:
        """A lone ESC may be the start of a sequence still in flight."""
        deadline = time.monotonic() + ESCAPE_TIMEOUT
        while not _sequence_complete(self._pending[1:]):
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not self._wait(min(remaining, 0.025)):
                return
            self._fill()

    def _wait(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError) as exc:
            raise InputClosedError(f"keyboard unavailable: {exc}") from exc
        return bool(ready)

    def _decode(self) -> Optional[KeyEvent]:
        """Take one key off the pending input; None if it was skipped."""
        first = self._pending[0]

        if first in CONTROL_KEYS:
            self._pending = self._pending[1:]
            return KeyEvent(key=CONTROL_KEYS[first], raw=first)

        if first == ESC:
            return self._decode_escape()

        self._pending = self._pending[1:]
        if first.isprintable():
            return KeyEvent(char=first, raw=first)
        return None  # unknown control character

    def _decode_escape(self) -> KeyEvent:
        rest = self._pending[1:]
        if not rest or rest[0] == ESC:
            self._pending = rest
            return KeyEvent(key=Key.ESCAPE, raw=ESC)

        start = 1 if rest[0] in '[O' else 0
        end = min(len(rest), start + 1)
        for i in range(start, len(rest)):
            if rest[i] == ESC:
                end = i
                break
            end = i + 1
            if rest[i].isalpha() or rest[i] == '~':
                break

        seq = rest[:end]
        self._pending = rest[end:]
        return KeyEvent(key=SEQUENCES.get(seq), raw=ESC + seq)
