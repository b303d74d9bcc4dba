"""Decoding of raw terminal input into the keys the selector reacts to."""

from __future__ import annotations

from enum import Enum


class Key(Enum):
    """A key press the selector knows about."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    SPACE = "space"
    RESET = "reset"
    SELECT_ALL = "select_all"
    DESELECT_ALL = "deselect_all"
    ENTER = "enter"
    ESCAPE = "escape"


_DELETE_SEQUENCE = b"\x1b[3~"

_ARROWS = {
    b"\x1b[D": Key.LEFT,
    b"\x1b[C": Key.RIGHT,
    b"\x1b[A": Key.UP,
    b"\x1b[B": Key.DOWN,
    b"\x1b[H": Key.HOME,
    b"\x1b[F": Key.END,
}

_SINGLE = {
    b" ": Key.SPACE,
    b"r": Key.RESET,
    b"\x7f": Key.DELETE,
    b"\n": Key.ENTER,
    b"*": Key.SELECT_ALL,
    b"-": Key.DESELECT_ALL,
    b"\x1b": Key.ESCAPE,
}


def decode_key(data: bytes | str) -> Key | None:
    """Return the key a single read of input stands for, or None if it means nothing."""
    if isinstance(data, str):
        data = data.encode()
    if data.startswith(_DELETE_SEQUENCE):
        return Key.DELETE
    arrow = _ARROWS.get(data[:3])
    if arrow is not None:
        return arrow
    return _SINGLE.get(data)