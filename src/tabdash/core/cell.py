"""Cell - atomic unit of the screen buffer."""

from dataclasses import dataclass, field

from tabdash.core.style import Style


@dataclass(slots=True)
class Cell:
    """A single character position with its style."""
    char: str = ' '
    style: Style = field(default_factory=Style)

    def is_default(self) -> bool:
        """Check if this cell is blank and unstyled."""
        return self.char == ' ' and self.style == Style()
