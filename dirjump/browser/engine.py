"""Navigation state machine for the directory browser.

``NavigationEngine`` owns every piece of session state: the displayed frame,
cursor/viewport, selection, hidden-entry preference and the generation
counter used to discard stale directory loads. It performs no I/O. Each
navigation returns a ``LoadRequest`` for the caller to execute; the result
comes back through ``apply`` as a ``LoadResult``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .frame import PARENT_ENTRY, Frame
from .selection import MAX_SELECTIONS, SelectionSet
from .viewport import MAX_VIEW_HEIGHT, CursorViewport


@dataclass(frozen=True)
class LoadRequest:
    """One directory-load job tagged with the generation that issued it."""

    generation: int
    path: Path
    restore_name: str = PARENT_ENTRY
    show_hidden: bool = False


@dataclass(frozen=True)
class LoadResult:
    """Completed load: subdirectory names or the error that stopped the scan."""

    request: LoadRequest
    entries: tuple[str, ...] = ()
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LoadOutcome(enum.Enum):
    APPLIED = "applied"
    STALE = "stale"
    FAILED = "failed"


class NavigationEngine:
    """Idle/Loading state machine over frames, cursor and selection."""

    def __init__(
        self,
        root: Path,
        *,
        show_hidden: bool = False,
        max_view_height: int = MAX_VIEW_HEIGHT,
        max_selections: int = MAX_SELECTIONS,
    ) -> None:
        self.root = root
        self.show_hidden = show_hidden
        self.frame = Frame.placeholder(root, show_hidden)
        self.viewport = CursorViewport(max_height=max_view_height)
        self.viewport.reset(len(self.frame))
        self.selection = SelectionSet(capacity=max_selections)
        self.generation = 0
        self.pending: LoadRequest | None = None
        self.last_error: Exception | None = None
        self.hidden_toggled = False

    @property
    def cursor(self) -> int:
        return self.viewport.cursor

    @property
    def is_loading(self) -> bool:
        return self.pending is not None

    def entry_at_cursor(self) -> str:
        return self.frame.entries[self.viewport.cursor]

    def _request(self, path: Path, restore_name: str) -> LoadRequest:
        """Issue a new load, superseding any request still in flight."""
        self.generation += 1
        request = LoadRequest(
            generation=self.generation,
            path=path,
            restore_name=restore_name,
            show_hidden=self.show_hidden,
        )
        self.pending = request
        logger.debug("Load #{} requested for {} (restore {!r})", request.generation, path, restore_name)
        return request

    def start(self) -> LoadRequest:
        return self._request(self.root, PARENT_ENTRY)

    def at_root(self) -> bool:
        path = self.frame.path
        return path == self.root or path.parent == path

    def ascend(self) -> LoadRequest | None:
        """Load the parent directory, restoring the cursor onto the one we left."""
        if self.at_root():
            return None
        return self._request(self.frame.path.parent, self.frame.path.name)

    def descend(self) -> LoadRequest | None:
        """Explore the entry under the cursor; the sentinel means ascend."""
        if self.viewport.cursor == 0:
            return self.ascend()
        return self._request(self.frame.child_path(self.viewport.cursor), PARENT_ENTRY)

    def jump_to(self, index: int) -> LoadRequest | None:
        """Open the parent of selection ``index`` with the cursor on the selection."""
        target = self.selection.get(index)
        if target is None:
            logger.debug("Jump index {} out of range ({} selected)", index, len(self.selection))
            return None
        return self._request(target.parent, target.name)

    def jump_home(self) -> LoadRequest:
        return self._request(self.root, PARENT_ENTRY)

    def toggle_hidden(self) -> LoadRequest:
        """Flip the hidden-entry filter and reload in place, restoring by name."""
        self.show_hidden = not self.show_hidden
        self.hidden_toggled = True
        return self._request(self.frame.path, self.entry_at_cursor())

    def move_cursor(self, delta: int) -> None:
        self.viewport.move(delta, len(self.frame))

    def cursor_up(self) -> None:
        self.move_cursor(-1)

    def cursor_down(self) -> None:
        self.move_cursor(1)

    def cursor_to_top(self) -> None:
        self.viewport.to_top(len(self.frame))

    def cursor_to_bottom(self) -> None:
        self.viewport.to_bottom(len(self.frame))

    def toggle_select_at_cursor(self) -> bool:
        """Toggle the directory under the cursor; the sentinel is never selectable."""
        if self.viewport.cursor == 0:
            return False
        candidate = self.frame.child_path(self.viewport.cursor)
        logger.debug("Candidate for toggling: {}", candidate)
        return self.selection.toggle(candidate)

    def apply(self, result: LoadResult) -> LoadOutcome:
        """Install a completed load unless a newer request has superseded it."""
        request = result.request
        if request.generation != self.generation:
            logger.debug("Discarding stale load #{} for {}", request.generation, request.path)
            return LoadOutcome.STALE

        self.pending = None
        if result.error is not None:
            self.last_error = result.error
            self.show_hidden = self.frame.show_hidden
            logger.warning("Cannot list {}: {}", request.path, result.error)
            return LoadOutcome.FAILED

        self.last_error = None
        self.frame = Frame.from_listing(request.path, result.entries, request.show_hidden)
        self.viewport.reset(len(self.frame))
        restore_idx = self.frame.index_of(request.restore_name)
        if restore_idx is not None:
            self.move_cursor(restore_idx)
        return LoadOutcome.APPLIED

    @property
    def selected_paths(self) -> list[Path]:
        return list(self.selection.paths)
