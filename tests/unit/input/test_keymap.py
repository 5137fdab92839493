"""Tests for the action key table and config overrides."""

from __future__ import annotations

import unittest

from dirjump.browser.actions import Action
from dirjump.input.keymap import DIGIT_KEYS, KeyMap


class KeyMapTests(unittest.TestCase):
    def test_default_bindings_cover_every_action(self) -> None:
        keymap = KeyMap()
        bound = {binding.action for binding in keymap.bindings}
        self.assertEqual(bound, set(Action))

    def test_resolve_default_tokens(self) -> None:
        keymap = KeyMap()
        self.assertEqual(keymap.resolve("k"), (Action.CURSOR_UP, None))
        self.assertEqual(keymap.resolve("DOWN"), (Action.CURSOR_DOWN, None))
        self.assertEqual(keymap.resolve("ENTER"), (Action.DESCEND, None))
        self.assertEqual(keymap.resolve("CTRL_B"), (Action.ASCEND, None))
        self.assertEqual(keymap.resolve("SPACE"), (Action.TOGGLE_SELECT, None))
        self.assertEqual(keymap.resolve("~"), (Action.JUMP_HOME, None))
        self.assertEqual(keymap.resolve("CTRL_C"), (Action.QUIT, None))
        self.assertIsNone(keymap.resolve("z"))

    def test_digits_resolve_to_jump_index(self) -> None:
        keymap = KeyMap()
        for digit in DIGIT_KEYS:
            self.assertEqual(keymap.resolve(digit), (Action.JUMP_TO_SELECTION, int(digit)))

    def test_overrides_replace_keys_and_help(self) -> None:
        keymap = KeyMap().with_overrides({"quit": ["x"], "descend": ["o", "ENTER"]})
        self.assertIsNone(keymap.resolve("q"))
        self.assertEqual(keymap.resolve("x"), (Action.QUIT, None))
        self.assertEqual(keymap.resolve("o"), (Action.DESCEND, None))
        self.assertIsNone(keymap.resolve("l"))
        self.assertIn(("o/ENTER", "explore this directory"), keymap.help_entries())

    def test_overrides_ignore_unknown_actions_and_digit_jumps(self) -> None:
        keymap = KeyMap().with_overrides({"fly": ["f"], "jump_to_selection": ["a"], "cursor_up": []})
        self.assertIsNone(keymap.resolve("f"))
        self.assertIsNone(keymap.resolve("a"))
        self.assertEqual(keymap.resolve("3"), (Action.JUMP_TO_SELECTION, 3))
        self.assertEqual(keymap.resolve("UP"), (Action.CURSOR_UP, None))


if __name__ == "__main__":
    unittest.main()
