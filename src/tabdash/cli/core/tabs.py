"""Tab selection state."""

from __future__ import annotations

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


class TabSet:
    """
    Ordered tab titles plus the selected index.

    Invariant: 0 <= selected < len(titles). next() and previous()
    wrap around at either end.
    """

    def __init__(self, titles: Sequence[str], selected: int = 0) -> None:
        if not titles:
            raise ValueError("TabSet needs at least one title")
        if not 0 <= selected < len(titles):
            raise ValueError(f"selected={selected} out of range for {len(titles)} tabs")
        self.titles: tuple[str, ...] = tuple(titles)
        self.selected = selected

    def __len__(self) -> int:
        return len(self.titles)

    @property
    def current(self) -> str:
        """Title of the selected tab."""
        return self.titles[self.selected]

    def next(self) -> int:
        """Select the next tab, wrapping to the first."""
        self.selected = (self.selected + 1) % len(self.titles)
        logger.debug("Tab -> %d (%s)", self.selected, self.current)
        return self.selected

    def previous(self) -> int:
        """Select the previous tab, wrapping to the last."""
        if self.selected > 0:
            self.selected -= 1
        else:
            self.selected = len(self.titles) - 1
        logger.debug("Tab -> %d (%s)", self.selected, self.current)
        return self.selected
