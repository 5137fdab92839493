"""Navigation and viewport engine.

Pure state: no filesystem or terminal access happens in this package.
"""

from __future__ import annotations

from .actions import Action, ActionOutcome, dispatch_action
from .engine import LoadOutcome, LoadRequest, LoadResult, NavigationEngine
from .frame import PARENT_ENTRY, Frame
from .selection import MAX_SELECTIONS, SelectionSet
from .viewport import MAX_VIEW_HEIGHT, CursorViewport

__all__ = [
    "Action",
    "ActionOutcome",
    "CursorViewport",
    "Frame",
    "LoadOutcome",
    "LoadRequest",
    "LoadResult",
    "MAX_SELECTIONS",
    "MAX_VIEW_HEIGHT",
    "NavigationEngine",
    "PARENT_ENTRY",
    "SelectionSet",
    "dispatch_action",
]
