# emberframe

A small core for interactive applications, in plain Python with no third-party dependencies.

## Modules

### `emberframe.log`

Levelled logging with printf-style formatting.

- `LogLevel`: `INFO`, `DEBUG`, `WARNING`, `ERROR`, `FATAL`.
- `log_output(level, fmt, *args)` formats `fmt % args`, puts a `[LEVEL] ` prefix in front and writes the result. `INFO` and `DEBUG` go to standard output. `WARNING` and the levels above it go to standard error. The function returns the text it wrote, or `None` if the level is unknown. A message is cut to `MAX_MESSAGE_LENGTH` (4095) characters, prefix included.
- `info`, `debug`, `warning` and `error` call `log_output` with the matching level.
- `fatal` logs at `FATAL` level and then raises `SystemExit(1)`.

### `emberframe.memory`

- `MemoryTag`: `UNKNOWN`, `ARRAY`.
- `MemoryTracker` counts the bytes allocated, in total and for each tag:
  - `allocate(size, tag)` records an allocation.
  - `release(size, tag)` records a release.
  - `total_usage()` and `usage_by_tag(tag)` report the current counts.

  Using the `UNKNOWN` tag logs a warning. A negative size raises `ValueError`. So does releasing more than is allocated under a tag.
- `default_tracker` is a shared tracker. It is used when no tracker is given.

### `emberframe.array`

`DynamicArray(stride, capacity=1, tracker=None)` is a growable array of elements that are `stride` bytes each. Its reserved size, `size`, is `HEADERS_SIZE` (24) plus `capacity * stride`. That size is reported to the tracker under `MemoryTag.ARRAY`. When the array is full its capacity doubles (`RESIZE_FACTOR`).

- `push(value)` appends an element.
- `pop()` removes and returns the last element. It raises `IndexError` if the array is empty.
- `pop_at(index)` removes and returns the element at `index`, shifting the later elements down.
- `insert_at(index, value)` inserts `value` before the existing element at `index`. For both `pop_at` and `insert_at`, `index` must satisfy `0 <= index < len(array)`, otherwise they raise `IndexError`.
- `clear()` empties the array and keeps its capacity.
- `len()`, indexing and iteration work as usual.
- `destroy()` releases the array's memory from the tracker. Any later use raises `RuntimeError`.

### `emberframe.event`

- `EventType`: `EXIT`, `KEY_PRESSED`, `KEY_RELEASED`, `MOUSE_BUTTON_PRESSED`, `MOUSE_BUTTON_RELEASED`. Any integer from 0 to 16383 (`MAX_EVENT_LIST - 1`) may also be used as an event type. Values outside that range raise `ValueError`.
- `EventContext` is an immutable 16-byte payload:
  - `EventContext.from_values(kind, values)` packs values into the leading fields.
  - `ctx.get(kind, index)` reads one field back.
  - The kinds are `i64`, `u64`, `f64`, `i32`, `u32`, `f32`, `i16`, `u16`, `i8`, `u8` and `c`. Fields are little-endian.
- `EventBus(tracker=None)` keeps a list of listener/callback pairs for each event type:
  - `register(event_type, listener, callback)` adds a pair. It returns `False` if that listener object is already registered for the type.
  - `unregister(event_type, listener, callback)` removes the pair whose listener and callback both match. It returns `False` if none does.
  - `dispatch(event_type, ctx=None)` calls `callback(event_type, listener, ctx)` in registration order and stops at the first callback that returns a true value. It returns whether any callback did.
  - `destroy()` drops every registration.

### `emberframe.input`

- `Key`: `ESC`, `SPACE`, `NUM_0` to `NUM_9`, and `A` to `Z`.
- `MouseButton`: `LEFT`, `MIDDLE`, `RIGHT`.
- `InputState(events=None)` tracks which keys (codes 1 to 511) and mouse buttons are down:
  - `process_key(key, pressed)` and `process_mouse_button(button, pressed)` record a new state. When the state changes, they dispatch the matching `EventType` on the given `EventBus`, with the code in the context's first `u16` field. Invalid codes are ignored.
  - `is_key_down`, `is_key_up`, `is_mouse_button_down` and `is_mouse_button_up` query the state. They return `False` for invalid codes.
  - `update()` keeps the current state as the previous frame's state.
  - `destroy()` stops tracking. After it, every query returns `False`.

## Example

```python
from emberframe.event import EventBus, EventType
from emberframe.input import InputState, Key

bus = EventBus()
pressed = []

def on_key(event_type, listener, ctx):
    pressed.append(ctx.get("u16", 0))
    return True

bus.register(EventType.KEY_PRESSED, None, on_key)

state = InputState(bus)
state.process_key(Key.ESC, True)
assert state.is_key_down(Key.ESC)
assert pressed == [Key.ESC]

state.update()
bus.destroy()
state.destroy()
```

## What it does not do

emberframe is a library only and has no command. It opens no window and runs no message loop. It does no rendering. It does not read the keyboard or mouse itself: your application must feed key and button changes to `InputState`.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```