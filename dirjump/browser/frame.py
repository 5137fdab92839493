"""Immutable directory frame: the listing currently on screen."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PARENT_ENTRY = ".."


@dataclass(frozen=True)
class Frame:
    """One loaded directory plus its sentinel-prefixed child names."""

    path: Path
    entries: tuple[str, ...]
    show_hidden: bool = False

    @classmethod
    def from_listing(cls, path: Path, names: list[str] | tuple[str, ...], show_hidden: bool) -> Frame:
        """Build a frame whose first entry is always the parent sentinel."""
        return cls(path=path, entries=(PARENT_ENTRY, *names), show_hidden=show_hidden)

    @classmethod
    def placeholder(cls, root: Path, show_hidden: bool = False) -> Frame:
        """Frame shown before the first listing arrives."""
        return cls(path=root, entries=(PARENT_ENTRY,), show_hidden=show_hidden)

    def __len__(self) -> int:
        return len(self.entries)

    def child_path(self, index: int) -> Path:
        """Absolute path for ``entries[index]``; index 0 is not a child."""
        return self.path / self.entries[index]

    def index_of(self, name: str) -> int | None:
        """Linear scan for ``name``; ``None`` when it is not listed."""
        for idx, entry in enumerate(self.entries):
            if entry == name:
                return idx
        return None
