"""Cursor and scroll-window controller for a fixed-height listing.

The window recenters around the cursor: it shifts by one row whenever the
cursor crosses the window midpoint and there is more content in that
direction, instead of waiting for the cursor to hit the window edge.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_VIEW_HEIGHT = 10


@dataclass
class CursorViewport:
    """Cursor index plus inclusive visible range ``[view_min, view_max]``."""

    cursor: int = 0
    view_min: int = 0
    view_max: int = 0
    max_height: int = MAX_VIEW_HEIGHT

    def __post_init__(self) -> None:
        self.max_height = max(1, self.max_height)

    def reset(self, entry_count: int) -> None:
        """Put cursor on the first entry and the window at the head of the listing."""
        self.cursor = 0
        self.view_min = 0
        self.view_max = max(0, min(self.max_height, entry_count) - 1)

    def _step_down(self, entry_count: int) -> None:
        self.cursor = min(self.cursor + 1, entry_count - 1)
        # cursor > (view_min + view_max) / 2, kept in integers
        if self.view_max < entry_count - 1 and 2 * self.cursor > self.view_min + self.view_max:
            self.view_min += 1
            self.view_max += 1

    def _step_up(self) -> None:
        self.cursor = max(self.cursor - 1, 0)
        if self.view_min > 0 and 2 * self.cursor < self.view_min + self.view_max:
            self.view_min -= 1
            self.view_max -= 1

    def move(self, delta: int, entry_count: int) -> None:
        """Move ``|delta|`` single steps, scrolling the window as each step requires."""
        if entry_count <= 0:
            return
        if delta > 0:
            for _ in range(delta):
                self._step_down(entry_count)
        else:
            for _ in range(-delta):
                self._step_up()

    def to_top(self, entry_count: int) -> None:
        self.move(-entry_count, entry_count)

    def to_bottom(self, entry_count: int) -> None:
        self.move(entry_count, entry_count)

    def visible_range(self) -> range:
        return range(self.view_min, self.view_max + 1)

    def has_more_above(self) -> bool:
        return self.view_min > 0

    def has_more_below(self, entry_count: int) -> bool:
        return self.view_max < entry_count - 1
