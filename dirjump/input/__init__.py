"""Keyboard input: raw key decoding and the action key table."""

from __future__ import annotations

from .keymap import DEFAULT_BINDINGS, DIGIT_KEYS, KeyBinding, KeyMap
from .keys import read_key

__all__ = [
    "DEFAULT_BINDINGS",
    "DIGIT_KEYS",
    "KeyBinding",
    "KeyMap",
    "read_key",
]
