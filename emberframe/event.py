"""Listener registration and dispatch of typed events with a 16-byte payload."""

from __future__ import annotations

import enum
import operator
import struct
from dataclasses import dataclass
from typing import Callable

from emberframe.array import DynamicArray

__all__ = [
    "EventType",
    "EventContext",
    "EventBus",
    "MAX_EVENT_LIST",
    "MAX_EVENT_TYPES",
    "CONTEXT_SIZE",
]

MAX_EVENT_LIST = 16384
CONTEXT_SIZE = 16
_SUBSCRIPTION_STRIDE = 16  # a listener reference and a callback reference


class EventType(enum.IntEnum):
    EXIT = 0
    KEY_PRESSED = 1
    KEY_RELEASED = 2
    MOUSE_BUTTON_PRESSED = 3
    MOUSE_BUTTON_RELEASED = 4


MAX_EVENT_TYPES = len(EventType)

_FORMATS = {
    "i64": "q",
    "u64": "Q",
    "f64": "d",
    "i32": "i",
    "u32": "I",
    "f32": "f",
    "i16": "h",
    "u16": "H",
    "i8": "b",
    "u8": "B",
    "c": "c",
}


def _format(kind):
    try:
        return "<" + _FORMATS[kind]
    except KeyError:
        raise ValueError(f"unknown context field kind: {kind!r}") from None


@dataclass(frozen=True)
class EventContext:
    """Sixteen bytes of payload, readable as arrays of various numeric kinds."""

    data: bytes = bytes(CONTEXT_SIZE)

    def __post_init__(self):
        data = bytes(self.data)
        if len(data) != CONTEXT_SIZE:
            raise ValueError(f"event context holds exactly {CONTEXT_SIZE} bytes, got {len(data)}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_values(cls, kind, values):
        """Build a context whose leading fields of ``kind`` hold ``values``; the rest is zero."""
        fmt = _format(kind)
        width = struct.calcsize(fmt)
        values = list(values)
        if len(values) > CONTEXT_SIZE // width:
            raise ValueError(f"at most {CONTEXT_SIZE // width} values of kind {kind!r} fit")
        buffer = bytearray(CONTEXT_SIZE)
        try:
            for position, value in enumerate(values):
                struct.pack_into(fmt, buffer, position * width, value)
        except struct.error as exc:
            raise ValueError(str(exc)) from None
        return cls(bytes(buffer))

    def get(self, kind, index):
        """Read field ``index`` of the payload viewed as an array of ``kind``."""
        fmt = _format(kind)
        width = struct.calcsize(fmt)
        count = CONTEXT_SIZE // width
        if not 0 <= index < count:
            raise IndexError(f"index {index} out of range for {count} fields of kind {kind!r}")
        return struct.unpack_from(fmt, self.data, index * width)[0]


@dataclass(frozen=True)
class _Subscription:
    listener: object
    callback: Callable


def _slot(event_type):
    index = operator.index(event_type)
    if not 0 <= index < MAX_EVENT_LIST:
        raise ValueError(f"event type out of range: {index}")
    return index


def _as_type(index):
    try:
        return EventType(index)
    except ValueError:
        return index


class EventBus:
    """Per-type listener lists; each listener may be registered once per type."""

    def __init__(self, tracker=None):
        self._tracker = tracker
        self._lists: dict[int, DynamicArray] = {}

    def register(self, event_type, listener, callback):
        """Add ``callback`` for ``listener``; False if the listener is already registered."""
        slot = _slot(event_type)
        subscriptions = self._lists.get(slot)
        if subscriptions is None:
            subscriptions = DynamicArray(_SUBSCRIPTION_STRIDE, tracker=self._tracker)
            self._lists[slot] = subscriptions
        if any(entry.listener is listener for entry in subscriptions):
            return False
        subscriptions.push(_Subscription(listener, callback))
        return True

    def unregister(self, event_type, listener, callback):
        """Remove the matching listener and callback pair; False if none matched."""
        subscriptions = self._lists.get(_slot(event_type))
        if subscriptions is None:
            return False
        for index, entry in enumerate(subscriptions):
            if entry.listener is listener and entry.callback == callback:
                subscriptions.pop_at(index)
                return True
        return False

    def dispatch(self, event_type, ctx=None):
        """Call handlers in registration order until one returns true; report whether one did."""
        slot = _slot(event_type)
        subscriptions = self._lists.get(slot)
        if subscriptions is None:
            return False
        if ctx is None:
            ctx = EventContext()
        kind = _as_type(slot)
        for entry in list(subscriptions):
            if entry.callback(kind, entry.listener, ctx):
                return True
        return False

    def destroy(self):
        """Drop every registration and release its memory."""
        for subscriptions in self._lists.values():
            subscriptions.destroy()
        self._lists.clear()