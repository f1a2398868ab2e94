"""Keyboard and mouse button state that announces changes as events."""

from __future__ import annotations

import enum

from emberframe.event import EventContext, EventType

__all__ = [
    "Key",
    "MouseButton",
    "InputState",
    "MAX_INPUT_KEYS",
    "MAX_INPUT_MOUSE_BUTTONS",
]

MAX_INPUT_KEYS = 512


class Key(enum.IntEnum):
    NONE = 0
    ESC = 27
    SPACE = 32
    NUM_0 = 48
    NUM_1 = 49
    NUM_2 = 50
    NUM_3 = 51
    NUM_4 = 52
    NUM_5 = 53
    NUM_6 = 54
    NUM_7 = 55
    NUM_8 = 56
    NUM_9 = 57
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90


class MouseButton(enum.IntEnum):
    NONE = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


MAX_INPUT_MOUSE_BUTTONS = len(MouseButton)


def _valid_key(key):
    return 0 < key < MAX_INPUT_KEYS


def _valid_mouse_button(button):
    return 0 < button < MAX_INPUT_MOUSE_BUTTONS


class InputState:
    """Pressed state of keys and mouse buttons.

    Each change of state is dispatched on the given event bus with the key or
    button code in the first ``u16`` field of the context.
    """

    def __init__(self, events=None):
        self._events = events
        self._keys = [False] * MAX_INPUT_KEYS
        self._mouse_buttons = [False] * MAX_INPUT_MOUSE_BUTTONS
        self._previous_keys = list(self._keys)
        self._previous_mouse_buttons = list(self._mouse_buttons)
        self._active = True

    def update(self):
        """Carry the current state over as the previous frame's state."""
        if not self._active:
            return
        self._previous_keys = list(self._keys)
        self._previous_mouse_buttons = list(self._mouse_buttons)

    def destroy(self):
        """Stop tracking input; all queries answer False afterwards."""
        self._active = False

    def process_key(self, key, pressed):
        """Record a key's state and dispatch an event if it changed."""
        if not self._active or not _valid_key(key):
            return
        pressed = bool(pressed)
        if self._keys[key] != pressed:
            self._keys[key] = pressed
            self._announce(
                EventType.KEY_PRESSED if pressed else EventType.KEY_RELEASED, key
            )

    def is_key_down(self, key):
        return self._active and _valid_key(key) and self._keys[key]

    def is_key_up(self, key):
        return self._active and _valid_key(key) and not self._keys[key]

    def process_mouse_button(self, button, pressed):
        """Record a mouse button's state and dispatch an event if it changed."""
        if not self._active or not _valid_mouse_button(button):
            return
        pressed = bool(pressed)
        if self._mouse_buttons[button] != pressed:
            self._mouse_buttons[button] = pressed
            self._announce(
                EventType.MOUSE_BUTTON_PRESSED if pressed else EventType.MOUSE_BUTTON_RELEASED,
                button,
            )

    def is_mouse_button_down(self, button):
        return self._active and _valid_mouse_button(button) and self._mouse_buttons[button]

    def is_mouse_button_up(self, button):
        return self._active and _valid_mouse_button(button) and not self._mouse_buttons[button]

    def _announce(self, event_type, code):
        if self._events is None:
            return
        self._events.dispatch(event_type, EventContext.from_values("u16", [int(code)]))