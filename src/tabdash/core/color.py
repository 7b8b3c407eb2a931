"""Named terminal colors."""

from enum import Enum


class Color(Enum):
    """
    The 16 standard terminal colors plus the terminal default.

    Values are offsets from the SGR base codes, so 30 + value is the
    foreground code and 40 + value the background code.
    """
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    RESET = 9   # Terminal default (SGR 39 / 49)
    GRAY = 60
    LIGHT_RED = 61
    LIGHT_GREEN = 62
    LIGHT_YELLOW = 63
    LIGHT_BLUE = 64
    LIGHT_MAGENTA = 65
    LIGHT_CYAN = 66
    LIGHT_WHITE = 67

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a color by name ("yellow", "light-blue", "light_blue")."""
        if not isinstance(name, str):
            raise ValueError(f"Color name must be a string, got {name!r}")
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown color: {name!r}") from None

    def to_sgr_fg(self) -> str:
        return str(30 + self.value)

    def to_sgr_bg(self) -> str:
        return str(40 + self.value)
