"""Terminal rendering for the directory browser.

``build_view_lines`` is pure and returns styled rows for one frame;
``render_view`` writes them to the terminal as a full-screen repaint.
Plain text is clipped to the terminal width before styling is applied, so
escape sequences never count toward the width.
"""

from __future__ import annotations

import os
import re
import sys
import unicodedata
from dataclasses import dataclass

from .browser.engine import NavigationEngine
from .browser.frame import PARENT_ENTRY
from .input.keymap import KeyMap

MARK_CHECKED = "✓"
MARK_EMPTY = " "
CURSOR_ARROW = "→"
UP_ARROW = "↑"
DOWN_ARROW = "↓"
ENTRY_INDENT = 2

STYLE_RESET = "\033[0m"
STYLE_HEADER = "\033[1;38;5;81m"
STYLE_CURSOR = "\033[7m"
STYLE_JUMP_INDEX = "\033[38;5;229m"
STYLE_ERROR = "\033[38;5;203m"
STYLE_DIM = "\033[2m"

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class ViewRow:
    """One screen row: plain text plus the SGR prefix used to style it."""

    text: str
    style: str = ""


def char_display_width(ch: str) -> int:
    """Terminal cell width of ``ch``: 0 for combining marks, 2 for wide glyphs."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_terminal_text(text: str) -> str:
    """Escape control bytes so names cannot move the cursor or retitle the terminal.

    Rows are single-line, so newlines and tabs are escaped too.
    """
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim unstyled ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def _entry_row(engine: NavigationEngine, index: int) -> ViewRow:
    name = engine.frame.entries[index]
    pointer = CURSOR_ARROW if index == engine.cursor else " "
    if index == 0:
        # The parent sentinel is never selectable, so it gets no checkbox.
        text = f"{pointer}     {PARENT_ENTRY}"
    else:
        mark = MARK_CHECKED if engine.frame.child_path(index) in engine.selection else MARK_EMPTY
        text = f"{pointer} [{mark}] {name}"
    return ViewRow(" " * ENTRY_INDENT + text, STYLE_CURSOR if index == engine.cursor else "")


def _status_row(engine: NavigationEngine, status: str) -> ViewRow:
    if engine.is_loading:
        return ViewRow("loading…", STYLE_DIM)
    if engine.last_error is not None:
        return ViewRow(f"error: {engine.last_error}", STYLE_ERROR)
    return ViewRow(status, STYLE_DIM if status else "")


def help_footer(keymap: KeyMap) -> str:
    return " • ".join(f"{keys} {text}" for keys, text in keymap.help_entries())


def build_view_rows(engine: NavigationEngine, keymap: KeyMap, status: str = "") -> list[ViewRow]:
    header = str(engine.frame.path)
    if engine.frame.show_hidden:
        header += "  [hidden]"
    rows = [ViewRow(header, STYLE_HEADER)]

    for idx, path in enumerate(engine.selection):
        rows.append(ViewRow(f"{idx}: {path}", STYLE_JUMP_INDEX))
    rows.append(ViewRow(""))

    entry_count = len(engine.frame)
    viewport = engine.viewport
    rows.append(ViewRow(" " * ENTRY_INDENT + UP_ARROW if viewport.has_more_above() else ""))
    for idx in viewport.visible_range():
        if idx < entry_count:
            rows.append(_entry_row(engine, idx))
    rows.append(ViewRow(" " * ENTRY_INDENT + DOWN_ARROW if viewport.has_more_below(entry_count) else ""))

    rows.append(_status_row(engine, status))
    rows.append(ViewRow(help_footer(keymap), STYLE_DIM))
    return rows


def build_view_lines(
    engine: NavigationEngine,
    keymap: KeyMap,
    width: int,
    status: str = "",
    no_color: bool = False,
) -> list[str]:
    """Return clipped, optionally styled screen rows for the current state."""
    lines: list[str] = []
    for row in build_view_rows(engine, keymap, status):
        text = clip_text(sanitize_terminal_text(row.text), width)
        if row.style and text and not no_color:
            text = f"{row.style}{text}{STYLE_RESET}"
        lines.append(text)
    return lines


def render_view(lines: list[str], max_lines: int) -> None:
    """Repaint the whole screen with ``lines`` (at most ``max_lines`` rows)."""
    out = ["\033[H"]
    for row in lines[: max(1, max_lines)]:
        out.append(row)
        out.append("\033[K\r\n")
    out.append("\033[J")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
