"""Abstract user actions and their mapping onto engine transitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .engine import LoadRequest, NavigationEngine


class Action(enum.Enum):
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    JUMP_TO_TOP = "jump_to_top"
    JUMP_TO_BOTTOM = "jump_to_bottom"
    ASCEND = "ascend"
    DESCEND = "descend"
    TOGGLE_SELECT = "toggle_select"
    TOGGLE_HIDDEN = "toggle_hidden"
    JUMP_TO_SELECTION = "jump_to_selection"
    JUMP_HOME = "jump_home"
    QUIT = "quit"


@dataclass(frozen=True)
class ActionOutcome:
    """What one action did: a load to dispatch, a redraw, or a quit."""

    request: LoadRequest | None = None
    changed: bool = False
    quit: bool = False


def dispatch_action(engine: NavigationEngine, action: Action, argument: int | None = None) -> ActionOutcome:
    """Run ``action`` against ``engine``.

    ``argument`` is the jump index for ``JUMP_TO_SELECTION`` and is ignored
    otherwise. Cursor moves mutate synchronously; navigations return the
    request the caller must schedule.
    """
    if action is Action.QUIT:
        return ActionOutcome(quit=True)

    if action is Action.CURSOR_UP:
        engine.cursor_up()
        return ActionOutcome(changed=True)
    if action is Action.CURSOR_DOWN:
        engine.cursor_down()
        return ActionOutcome(changed=True)
    if action is Action.JUMP_TO_TOP:
        engine.cursor_to_top()
        return ActionOutcome(changed=True)
    if action is Action.JUMP_TO_BOTTOM:
        engine.cursor_to_bottom()
        return ActionOutcome(changed=True)
    if action is Action.TOGGLE_SELECT:
        return ActionOutcome(changed=engine.toggle_select_at_cursor())

    if action is Action.ASCEND:
        request = engine.ascend()
    elif action is Action.DESCEND:
        request = engine.descend()
    elif action is Action.JUMP_TO_SELECTION:
        request = engine.jump_to(argument) if argument is not None else None
    elif action is Action.JUMP_HOME:
        request = engine.jump_home()
    elif action is Action.TOGGLE_HIDDEN:
        request = engine.toggle_hidden()
    else:
        raise ValueError(f"unhandled action: {action!r}")
    return ActionOutcome(request=request, changed=request is not None)
