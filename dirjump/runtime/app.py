"""Browser bootstrap: wires engine, scheduler, key map and terminal together."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from loguru import logger

from ..browser.engine import NavigationEngine
from ..input.keymap import KeyMap
from .config import load_keybinding_overrides, load_show_hidden, load_view_height, save_show_hidden
from .loader import DirectoryLoadScheduler
from .loop import RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController


def build_engine(root: Path, show_hidden: bool | None = None, view_height: int | None = None) -> NavigationEngine:
    """Create an engine rooted at ``root``; ``None`` arguments fall back to config."""
    return NavigationEngine(
        root,
        show_hidden=load_show_hidden() if show_hidden is None else show_hidden,
        max_view_height=load_view_height() if view_height is None else view_height,
    )


def build_keymap() -> KeyMap:
    overrides = load_keybinding_overrides()
    keymap = KeyMap()
    return keymap.with_overrides(overrides) if overrides else keymap


def run_browser(
    root: Path,
    show_hidden: bool | None = None,
    view_height: int | None = None,
    no_color: bool = False,
) -> list[Path]:
    """Browse from ``root`` until the user quits and return the selected directories."""
    if not os.isatty(sys.stdin.fileno()):
        raise SystemExit("dirjump needs an interactive terminal on stdin.")

    engine = build_engine(root, show_hidden, view_height)
    keymap = build_keymap()
    scheduler = DirectoryLoadScheduler()
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())

    logger.info("Browsing from {} (hidden={})", root, engine.show_hidden)
    scheduler.schedule(engine.start())
    run_main_loop(
        engine,
        terminal,
        stdin_fd,
        scheduler,
        keymap,
        RuntimeLoopTiming(),
        no_color=no_color,
    )
    if engine.hidden_toggled:
        save_show_hidden(engine.frame.show_hidden)
    return engine.selected_paths
