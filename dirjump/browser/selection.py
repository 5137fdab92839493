"""Bounded, insertion-ordered set of selected directories (the jump list)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

MAX_SELECTIONS = 10


class SelectionSet:
    """Duplicate-free ordered paths with a hard capacity.

    Positions double as jump indices, so removal compacts the list and
    shifts every later index down by one.
    """

    def __init__(self, paths: Iterable[Path] = (), capacity: int = MAX_SELECTIONS) -> None:
        """Create a selection, keeping the first ``capacity`` distinct ``paths``."""
        self.capacity = max(1, capacity)
        self._paths: list[Path] = []
        for path in paths:
            if path not in self._paths and len(self._paths) < self.capacity:
                self._paths.append(path)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(tuple(self._paths))

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(self._paths)

    def is_full(self) -> bool:
        return len(self._paths) >= self.capacity

    def toggle(self, path: Path) -> bool:
        """Remove ``path`` if present, else append it when there is room.

        Returns whether the selection changed; a full selection silently
        rejects additions.
        """
        for pos, existing in enumerate(self._paths):
            if existing == path:
                del self._paths[pos]
                logger.debug("Removed selected dir at pos {}", pos)
                return True
        if self.is_full():
            logger.info("Selection full ({}); ignoring {}", self.capacity, path)
            return False
        self._paths.append(path)
        logger.debug("Added {} to selected dirs", path)
        return True

    def get(self, index: int) -> Path | None:
        """Return the path at jump index ``index`` or ``None`` when out of range."""
        if index < 0 or index >= min(len(self._paths), self.capacity):
            return None
        return self._paths[index]
