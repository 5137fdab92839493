"""Main interactive event loop for the directory browser.

One thread owns all browser state. Each iteration applies finished
directory loads, repaints when something changed, then reads and dispatches
at most one key. Directory reads happen on the scheduler's worker thread
and only come back here as ``LoadResult`` messages.
"""

from __future__ import annotations

import shutil
import time
from dataclasses import dataclass

from loguru import logger

from ..browser.actions import Action, dispatch_action
from ..browser.engine import LoadOutcome, NavigationEngine
from ..input.keymap import KeyMap
from ..input.keys import read_key
from ..render import build_view_lines, render_view
from .loader import DirectoryLoadScheduler
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 50
    status_message_seconds: float = 2.5


def apply_load_results(engine: NavigationEngine, scheduler: DirectoryLoadScheduler) -> bool:
    """Feed completed loads to ``engine``; return whether the display changed."""
    changed = False
    for result in scheduler.drain_results():
        outcome = engine.apply(result)
        if outcome is not LoadOutcome.STALE:
            changed = True
    return changed


def run_main_loop(
    engine: NavigationEngine,
    terminal: TerminalController,
    stdin_fd: int,
    scheduler: DirectoryLoadScheduler,
    keymap: KeyMap,
    timing: RuntimeLoopTiming,
    no_color: bool = False,
) -> None:
    """Run the browser until a quit action arrives."""
    dirty = True
    was_loading = engine.is_loading
    status_message = ""
    status_message_until = 0.0

    def set_status(message: str) -> None:
        nonlocal status_message, status_message_until
        status_message = message
        status_message_until = time.monotonic() + timing.status_message_seconds

    with terminal.raw_mode():
        while True:
            if apply_load_results(engine, scheduler):
                dirty = True
            if engine.is_loading != was_loading:
                was_loading = engine.is_loading
                dirty = True
            if status_message and time.monotonic() >= status_message_until:
                status_message = ""
                dirty = True

            if dirty:
                term = shutil.get_terminal_size((80, 24))
                lines = build_view_lines(engine, keymap, term.columns, status_message, no_color)
                render_view(lines, max(1, term.lines - 1))
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            resolved = keymap.resolve(key)
            if resolved is None:
                continue
            action, argument = resolved
            outcome = dispatch_action(engine, action, argument)
            if outcome.quit:
                logger.info("Quit with {} selected", len(engine.selection))
                return
            if outcome.request is not None:
                scheduler.schedule(outcome.request)
            if action is Action.TOGGLE_SELECT and not outcome.changed and engine.cursor != 0:
                set_status(f"selection full ({engine.selection.capacity} max)")
            dirty = True
