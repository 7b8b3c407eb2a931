"""Exception types raised by tabdash."""


class TabdashError(Exception):
    """Base class for all tabdash errors."""


class TerminalInitError(TabdashError):
    """The terminal could not be switched into raw mode."""


class InputClosedError(TabdashError):
    """The keyboard input stream ended or failed mid-run."""


class ContentError(TabdashError):
    """A content document is malformed."""

    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
