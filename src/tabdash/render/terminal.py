"""Render a Canvas to terminal escape sequences."""

from tabdash.core.canvas import Canvas
from tabdash.core.style import Style


class TerminalRenderer:
    """
    Render a Canvas as one full-screen frame.

    Every row is positioned absolutely, so the output can be written
    over the previous frame without clearing. SGR codes are only
    emitted when the style changes.
    """

    def __init__(self, absolute: bool = True, reset_at_end: bool = True):
        self.absolute = absolute
        self.reset_at_end = reset_at_end

    def render(self, canvas: Canvas) -> str:
        """Render canvas to an ANSI string."""
        parts: list[str] = []
        last_style: Style | None = None

        for y, row in enumerate(canvas.rows()):
            if self.absolute:
                parts.append(f"\x1b[{y + 1};1H")
            elif y > 0:
                # Reset before the line break so colors don't bleed
                parts.append('\x1b[0m\n')
                last_style = None

            for cell in row:
                if cell.style != last_style:
                    parts.append(cell.style.to_sgr())
                    last_style = cell.style
                parts.append(cell.char)

        if self.reset_at_end:
            parts.append('\x1b[0m')

        return ''.join(parts)


def render_plain(canvas: Canvas) -> str:
    """Characters only, trailing blanks stripped from each row and the end."""
    lines = [canvas.row_text(y).rstrip() for y in range(canvas.height)]
    return '\n'.join(lines).rstrip('\n')
