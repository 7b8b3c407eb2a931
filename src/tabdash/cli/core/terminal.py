"""Low-level terminal operations."""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from tabdash.errors import TerminalInitError

logger = logging.getLogger(__name__)

CLEAR = '\x1b[2J\x1b[H'
RESET = '\x1b[0m'
HIDE_CURSOR = '\x1b[?25l'
SHOW_CURSOR = '\x1b[?25h'
ALT_SCREEN_ON = '\x1b[?1049h'
ALT_SCREEN_OFF = '\x1b[?1049l'


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions in cells."""
    width: int
    height: int


class Terminal:
    """Terminal I/O for the dashboard, writing to stdout."""

    @staticmethod
    def size() -> TerminalSize:
        """Current size, or 80x24 when stdout is not a terminal."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.columns, size.lines)
        except OSError:
            return TerminalSize(80, 24)

    @staticmethod
    def write(text: str) -> None:
        """Write text to the terminal and flush."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """
        Put stdin into raw mode for the duration of the block.

        Raises TerminalInitError if raw mode is unavailable (no termios,
        or stdin is not a terminal).
        """
        try:
            import termios
            import tty
        except ImportError as exc:
            raise TerminalInitError("raw terminal mode is not supported on this platform") from exc

        try:
            fd = sys.stdin.fileno()
            old_settings = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (OSError, ValueError, termios.error) as exc:
            raise TerminalInitError(f"cannot open raw mode: {exc}") from exc

        try:
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """
        Full-screen mode: raw input, alternate screen, hidden cursor.

        Raw mode is acquired first so a failure leaves the screen
        untouched. Everything is restored on every exit path.
        """
        with Terminal.raw_mode():
            logger.info("Terminal acquired")
            Terminal.write(ALT_SCREEN_ON + HIDE_CURSOR + CLEAR)
            try:
                yield
            finally:
                Terminal.write(RESET + CLEAR + SHOW_CURSOR + ALT_SCREEN_OFF)
                logger.info("Terminal released")
