"""Input Handler - maps raw input events to actions.

The window turns raylib's polled input into InputEvents; event_action()
translates each one into an Action, tracking shift state along the way so
the same key can mean a single step or a skip.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict

from .state import InputState
from .types import Action
from .config import (
    NEXT_KEYS, PREV_KEYS,
    KEY_SKIP_FORWARD, KEY_SKIP_BACK,
    KEY_FIRST_IMAGE, KEY_LAST_IMAGE, KEY_JUMP,
    KEY_COPY_IMAGE, KEY_MOVE_IMAGE,
    KEY_DELETE_IMAGE, KEY_DELETE_IMAGE_ALT,
    KEY_RERENDER, KEY_RERENDER_ALT,
    KEY_CLOSE, KEY_CLOSE_ALT,
)


class EventKind(Enum):
    """Kinds of raw input the window reports."""
    CLOSE = auto()
    RESIZE = auto()
    KEY_DOWN = auto()
    KEY_UP = auto()


@dataclass(frozen=True)
class InputEvent:
    """A single raw input event."""
    kind: EventKind
    key: int = 0


# Keys whose meaning does not depend on modifiers
KEY_ACTIONS: Dict[int, Action] = {
    KEY_SKIP_FORWARD: Action.SKIP_FORWARD,
    KEY_SKIP_BACK: Action.SKIP_BACK,
    KEY_FIRST_IMAGE: Action.FIRST,
    KEY_LAST_IMAGE: Action.LAST,
    KEY_COPY_IMAGE: Action.COPY,
    KEY_MOVE_IMAGE: Action.MOVE,
    KEY_DELETE_IMAGE: Action.DELETE,
    KEY_DELETE_IMAGE_ALT: Action.DELETE,
    KEY_RERENDER: Action.RE_RENDER,
    KEY_RERENDER_ALT: Action.RE_RENDER,
    KEY_CLOSE: Action.QUIT,
    KEY_CLOSE_ALT: Action.QUIT,
}


def key_action(state: InputState, key: int) -> Action:
    """Action for a key press given the held modifiers."""
    if key in NEXT_KEYS:
        return Action.SKIP_FORWARD if state.shift else Action.NEXT
    if key in PREV_KEYS:
        return Action.SKIP_BACK if state.shift else Action.PREV
    if key == KEY_JUMP:
        return Action.LAST if state.shift else Action.FIRST
    return KEY_ACTIONS.get(key, Action.NOOP)


def event_action(state: InputState, event: InputEvent) -> Action:
    """Translate one raw event into an Action, updating modifier state."""
    if event.kind is EventKind.CLOSE:
        return Action.QUIT
    if event.kind is EventKind.RESIZE:
        return Action.RE_RENDER
    if event.kind is EventKind.KEY_UP:
        state.update_modifier(event.key, False)
        return Action.NOOP
    if state.update_modifier(event.key, True):
        return Action.NOOP
    return key_action(state, event.key)
