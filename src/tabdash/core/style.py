"""Style - colors and text modifiers applied to a cell."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

from tabdash.core.color import Color

MODIFIERS = ("bold", "dim", "italic", "underline", "reverse")

# SGR "on" codes for each modifier
_MODIFIER_SGR = {
    "bold": "1",
    "dim": "2",
    "italic": "3",
    "underline": "4",
    "reverse": "7",
}


@dataclass(frozen=True)
class Style:
    """
    A partial style. Fields left as None inherit from whatever the
    style is patched over.
    """
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    bold: Optional[bool] = None
    dim: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    reverse: Optional[bool] = None

    def patch(self, other: Style) -> Style:
        """Return this style overridden by every field set in other."""
        values = {}
        for f in fields(self):
            value = getattr(other, f.name)
            values[f.name] = getattr(self, f.name) if value is None else value
        return Style(**values)

    def with_modifier(self, name: str) -> Style:
        if name not in MODIFIERS:
            raise ValueError(f"Unknown modifier: {name!r}")
        return self.patch(Style(**{name: True}))

    def to_sgr(self) -> str:
        """Full SGR escape selecting exactly this style from a reset state."""
        parts = ["0"]
        for name in MODIFIERS:
            if getattr(self, name):
                parts.append(_MODIFIER_SGR[name])
        if self.fg is not None and self.fg is not Color.RESET:
            parts.append(self.fg.to_sgr_fg())
        if self.bg is not None and self.bg is not Color.RESET:
            parts.append(self.bg.to_sgr_bg())
        return f"\x1b[{';'.join(parts)}m"

    @classmethod
    def parse(cls, spec: dict) -> Style:
        """
        Build a style from a mapping such as
        {"fg": "green", "bg": "black", "mod": "bold"}.

        "mod" may be a single modifier name or a list of them.
        """
        style = cls()
        for key, value in spec.items():
            if key == "fg":
                style = style.patch(cls(fg=Color.from_name(value)))
            elif key == "bg":
                style = style.patch(cls(bg=Color.from_name(value)))
            elif key == "mod":
                names = [value] if isinstance(value, str) else value
                if not isinstance(names, list):
                    raise ValueError(f"mod must be a name or a list of names, got {value!r}")
                for name in names:
                    style = style.with_modifier(name)
            else:
                raise ValueError(f"Unknown style key: {key!r}")
        return style
