"""Keyboard and mouse codes, decoded into platform-independent names."""

from __future__ import annotations

import sys
from enum import Enum


class Key(Enum):
    """Keys the viewer reacts to."""

    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    Q = "q"
    W = "w"
    E = "e"
    A = "a"
    S = "s"
    D = "d"
    L = "l"


class MouseButton(Enum):
    """Mouse buttons and scroll directions."""

    LEFT_CLICK = "left_click"
    SCROLL_CLICK = "scroll_click"
    RIGHT_CLICK = "right_click"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


_LINUX_KEYS = {
    65307: Key.ESC,
    65362: Key.UP,
    65364: Key.DOWN,
    65363: Key.RIGHT,
    65361: Key.LEFT,
    48: Key.ZERO,
    49: Key.ONE,
    50: Key.TWO,
    51: Key.THREE,
    52: Key.FOUR,
    113: Key.Q,
    119: Key.W,
    97: Key.A,
    115: Key.S,
    108: Key.L,
}

_MACOS_KEYS = {
    53: Key.ESC,
    126: Key.UP,
    125: Key.DOWN,
    123: Key.LEFT,
    124: Key.RIGHT,
    29: Key.ZERO,
    18: Key.ONE,
    19: Key.TWO,
    20: Key.THREE,
    21: Key.FOUR,
    12: Key.Q,
    13: Key.W,
    14: Key.E,
    0: Key.A,
    1: Key.S,
    2: Key.D,
    37: Key.L,
}

_LINUX_BUTTONS = {
    1: MouseButton.LEFT_CLICK,
    2: MouseButton.SCROLL_CLICK,
    3: MouseButton.RIGHT_CLICK,
    4: MouseButton.SCROLL_UP,
    5: MouseButton.SCROLL_DOWN,
}

_MACOS_BUTTONS = {
    1: MouseButton.LEFT_CLICK,
    2: MouseButton.RIGHT_CLICK,
    3: MouseButton.SCROLL_CLICK,
    4: MouseButton.SCROLL_DOWN,
    5: MouseButton.SCROLL_UP,
}


def _is_linux(platform: str | None) -> bool:
    return (platform if platform is not None else sys.platform).startswith("linux")


def decode_key(code: int, platform: str | None = None) -> Key | None:
    """Return the key for a raw key code, or None if it is not one we use.

    ``platform`` follows ``sys.platform`` naming; anything not starting
    with "linux" uses the macOS key codes.
    """
    table = _LINUX_KEYS if _is_linux(platform) else _MACOS_KEYS
    return table.get(code)


def decode_button(code: int, platform: str | None = None) -> MouseButton | None:
    """Return the mouse button for a raw button number, or None."""
    table = _LINUX_BUTTONS if _is_linux(platform) else _MACOS_BUTTONS
    return table.get(code)