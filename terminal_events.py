import curses
from dataclasses import dataclass, field
from typing import FrozenSet, Union


NO_MODIFIERS: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class KeyEvent:
    key: str
    modifiers: FrozenSet[str] = field(default=NO_MODIFIERS)


@dataclass(frozen=True)
class MouseEvent:
    kind: str  # down | up | move | other
    button: int
    col: int
    row: int
    modifiers: FrozenSet[str] = field(default=NO_MODIFIERS)


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


TerminalEvent = Union[KeyEvent, MouseEvent, ResizeEvent]

_BUTTONS = (
    (1, "BUTTON1_PRESSED", "BUTTON1_RELEASED"),
    (2, "BUTTON2_PRESSED", "BUTTON2_RELEASED"),
    (3, "BUTTON3_PRESSED", "BUTTON3_RELEASED"),
)

_MOUSE_MODIFIERS = (
    ("shift", "BUTTON_SHIFT"),
    ("ctrl", "BUTTON_CTRL"),
    ("alt", "BUTTON_ALT"),
)


def _mouse_event(x, y, bstate) -> MouseEvent:
    mods = frozenset(
        name for name, attr in _MOUSE_MODIFIERS if bstate & getattr(curses, attr, 0)
    )
    # drag reports carry the held button's bit as well
    if bstate & getattr(curses, "REPORT_MOUSE_POSITION", 0):
        return MouseEvent("move", 0, x, y, mods)
    for button, pressed, released in _BUTTONS:
        if bstate & getattr(curses, pressed, 0):
            return MouseEvent("down", button, x, y, mods)
        if bstate & getattr(curses, released, 0):
            return MouseEvent("up", button, x, y, mods)
    return MouseEvent("other", 0, x, y, mods)


def _key_event(ch: int) -> KeyEvent:
    if ch in (10, 13, curses.KEY_ENTER):
        return KeyEvent("enter")
    if ch == 9:
        return KeyEvent("tab")
    if ch in (8, 127, curses.KEY_BACKSPACE):
        return KeyEvent("backspace")
    if 1 <= ch <= 26:
        return KeyEvent(chr(ch + 96), frozenset({"ctrl"}))
    if 0 <= ch < 256:
        text = chr(ch)
        if "A" <= text <= "Z":
            return KeyEvent(text, frozenset({"shift"}))
        return KeyEvent(text)
    try:
        name = curses.keyname(ch).decode("ascii", errors="replace")
    except (curses.error, ValueError):
        name = f"key_{ch}"
    return KeyEvent(name)


def _read_alt_chord(win) -> KeyEvent:
    # ESC followed by a key within ESCDELAY is Alt+key
    win.nodelay(True)
    try:
        nxt = win.getch()
    finally:
        win.nodelay(False)
    if nxt == -1:
        return KeyEvent("escape")
    base = _key_event(nxt)
    return KeyEvent(base.key, base.modifiers | {"alt"})


def translate(win, ch):
    """Turn one getch() code into an event, or None when there is nothing to report."""
    if ch == -1:
        return None
    if ch == curses.KEY_RESIZE:
        try:
            curses.update_lines_cols()
        except curses.error:
            pass
        h, w = win.getmaxyx()
        return ResizeEvent(w, h)
    if ch == curses.KEY_MOUSE:
        try:
            _id, x, y, _z, bstate = curses.getmouse()
        except curses.error:
            return None
        return _mouse_event(x, y, bstate)
    if ch == 27:
        return _read_alt_chord(win)
    return _key_event(ch)


def read_event(win) -> TerminalEvent:
    """Block until the terminal produces an event."""
    while True:
        event = translate(win, win.getch())
        if event is not None:
            return event
