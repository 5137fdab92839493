"""Static key table mapping key tokens to browser actions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

from loguru import logger

from ..browser.actions import Action

DIGIT_KEYS: tuple[str, ...] = tuple(str(digit) for digit in range(10))


@dataclass(frozen=True)
class KeyBinding:
    """Key tokens for one action plus the label shown in the help footer."""

    action: Action
    keys: tuple[str, ...]
    help_keys: str
    help_text: str


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(Action.CURSOR_UP, ("k", "UP", "CTRL_P"), "k/↑/ctrl+p", "previous line"),
    KeyBinding(Action.CURSOR_DOWN, ("j", "DOWN", "CTRL_N"), "j/↓/ctrl+n", "next line"),
    KeyBinding(Action.JUMP_TO_TOP, ("g", "HOME"), "g/home", "first line"),
    KeyBinding(Action.JUMP_TO_BOTTOM, ("G", "END"), "G/end", "last line"),
    KeyBinding(Action.ASCEND, ("h", "LEFT", "CTRL_B"), "h/←/ctrl+b", "go to parent directory"),
    KeyBinding(Action.DESCEND, ("l", "RIGHT", "ENTER"), "l/→/enter", "explore this directory"),
    KeyBinding(Action.TOGGLE_SELECT, ("SPACE",), "spacebar", "toggle selection"),
    KeyBinding(Action.TOGGLE_HIDDEN, (".",), ".", "show/hide hidden"),
    KeyBinding(Action.JUMP_TO_SELECTION, DIGIT_KEYS, "0-9", "jump to selection"),
    KeyBinding(Action.JUMP_HOME, ("~",), "~", "jump back to root directory"),
    KeyBinding(Action.QUIT, ("q", "CTRL_C"), "q/ctrl+c", "quit"),
)


class KeyMap:
    """Lookup table from key token to ``(action, argument)``.

    Later bindings win when two of them claim the same token.
    """

    def __init__(self, bindings: Iterable[KeyBinding] = DEFAULT_BINDINGS) -> None:
        self.bindings: tuple[KeyBinding, ...] = tuple(bindings)
        self._actions: dict[str, Action] = {}
        for binding in self.bindings:
            for key in binding.keys:
                self._actions[key] = binding.action

    def resolve(self, key: str) -> tuple[Action, int | None] | None:
        """Return the bound action and its argument, or ``None`` for unbound keys."""
        action = self._actions.get(key)
        if action is None:
            return None
        if action is Action.JUMP_TO_SELECTION:
            return action, int(key)
        return action, None

    def help_entries(self) -> list[tuple[str, str]]:
        return [(binding.help_keys, binding.help_text) for binding in self.bindings]

    def with_overrides(self, overrides: Mapping[str, list[str]]) -> KeyMap:
        """Return a key map with the key tokens of named actions replaced.

        ``overrides`` maps action values (``"cursor_up"``) to key tokens.
        Unknown actions, empty key lists and the digit-indexed jump binding
        are ignored.
        """
        by_name = {action.value: action for action in Action}
        replaced: dict[Action, tuple[str, ...]] = {}
        for name, keys in overrides.items():
            action = by_name.get(name)
            if action is None or action is Action.JUMP_TO_SELECTION:
                logger.warning("Ignoring key override for {!r}", name)
                continue
            tokens = tuple(key for key in keys if isinstance(key, str) and key)
            if tokens:
                replaced[action] = tokens

        bindings = [
            replace(binding, keys=replaced[binding.action], help_keys="/".join(replaced[binding.action]))
            if binding.action in replaced
            else binding
            for binding in self.bindings
        ]
        return KeyMap(bindings)
