"""Key values and input classification.

A key is either a single printable character (``"a"``, ``" "``) or a
member of Key for everything else. Handlers compare against the
constants below rather than raw literals.
"""

from enum import Enum
from typing import Union


class Key(str, Enum):
    """Non-character keys."""

    ENTER = "enter"
    ESCAPE = "escape"
    TAB = "tab"
    SHIFT_TAB = "shift_tab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"
    DELETE = "delete"
    CTRL_C = "ctrl_c"


KeyInput = Union[Key, str]

KEY_QUIT = "q"
KEY_BACK = "b"
KEY_ADD = "a"
KEY_EDIT = "e"
KEY_DELETE = "d"
KEY_TOGGLE = "c"
KEY_FILTER = "f"
KEY_PROJECTS = "p"
KEY_CATEGORIES = "g"
KEY_UP_VI = "k"
KEY_DOWN_VI = "j"
KEY_YES = "y"
KEY_NO = "n"
KEY_SPACE = " "

_KEY_NAMES = {
    Key.ENTER: "Enter",
    Key.ESCAPE: "Esc",
    Key.TAB: "Tab",
    Key.SHIFT_TAB: "Shift-Tab",
    Key.UP: "↑",
    Key.DOWN: "↓",
    Key.LEFT: "←",
    Key.RIGHT: "→",
    Key.BACKSPACE: "Backspace",
    Key.DELETE: "Del",
    Key.CTRL_C: "Ctrl-C",
}


def _is_char(key: KeyInput, char: str) -> bool:
    return not isinstance(key, Key) and key == char


def is_interrupt_key(key: KeyInput) -> bool:
    return key is Key.CTRL_C


def is_quit_key(key: KeyInput) -> bool:
    """q or Ctrl-C. Text-entry screens check is_interrupt_key instead."""
    return is_interrupt_key(key) or _is_char(key, KEY_QUIT)


def is_confirm_key(key: KeyInput) -> bool:
    return key is Key.ENTER


def is_cancel_key(key: KeyInput) -> bool:
    return key is Key.ESCAPE


def is_back_key(key: KeyInput) -> bool:
    return is_cancel_key(key) or _is_char(key, KEY_BACK)


def is_up_key(key: KeyInput) -> bool:
    return key is Key.UP or _is_char(key, KEY_UP_VI)


def is_down_key(key: KeyInput) -> bool:
    return key is Key.DOWN or _is_char(key, KEY_DOWN_VI)


def is_navigation_key(key: KeyInput) -> bool:
    return (
        is_up_key(key)
        or is_down_key(key)
        or key in (Key.LEFT, Key.RIGHT, Key.TAB, Key.SHIFT_TAB)
    )


def navigation_direction(key: KeyInput) -> int:
    """-1 for up-like keys, +1 for down-like keys, 0 otherwise."""
    if is_up_key(key):
        return -1
    if is_down_key(key):
        return 1
    return 0


def is_printable_char(key: KeyInput) -> bool:
    return not isinstance(key, Key) and len(key) == 1 and key.isprintable()


def is_char(key: KeyInput, char: str) -> bool:
    """True if key is exactly the given character."""
    return _is_char(key, char)


def key_to_string(key: KeyInput) -> str:
    """Human readable key name for legends and logs."""
    if isinstance(key, Key):
        return _KEY_NAMES[key]
    if key == KEY_SPACE:
        return "Space"
    return key
