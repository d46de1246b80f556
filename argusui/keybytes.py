"""Key events and their raw terminal byte sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Kinds of key events; each value is the key's display name."""

    RUNES = "runes"
    SPACE = " "
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    SHIFT_TAB = "shift+tab"
    ESCAPE = "esc"
    HOME = "home"
    END = "end"
    PGUP = "pgup"
    PGDOWN = "pgdown"
    DELETE = "delete"
    INSERT = "insert"
    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"
    SHIFT_UP = "shift+up"
    SHIFT_DOWN = "shift+down"
    SHIFT_RIGHT = "shift+right"
    SHIFT_LEFT = "shift+left"
    SHIFT_HOME = "shift+home"
    SHIFT_END = "shift+end"
    CTRL_UP = "ctrl+up"
    CTRL_DOWN = "ctrl+down"
    CTRL_RIGHT = "ctrl+right"
    CTRL_LEFT = "ctrl+left"
    CTRL_A = "ctrl+a"
    CTRL_B = "ctrl+b"
    CTRL_C = "ctrl+c"
    CTRL_D = "ctrl+d"
    CTRL_E = "ctrl+e"
    CTRL_F = "ctrl+f"
    CTRL_G = "ctrl+g"
    CTRL_H = "ctrl+h"
    CTRL_J = "ctrl+j"
    CTRL_K = "ctrl+k"
    CTRL_L = "ctrl+l"
    CTRL_N = "ctrl+n"
    CTRL_O = "ctrl+o"
    CTRL_P = "ctrl+p"
    CTRL_Q = "ctrl+q"
    CTRL_R = "ctrl+r"
    CTRL_S = "ctrl+s"
    CTRL_T = "ctrl+t"
    CTRL_U = "ctrl+u"
    CTRL_V = "ctrl+v"
    CTRL_W = "ctrl+w"
    CTRL_X = "ctrl+x"
    CTRL_Y = "ctrl+y"
    CTRL_Z = "ctrl+z"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"


@dataclass(frozen=True)
class KeyMsg:
    """A key press: its type, typed characters for RUNES, and the Alt modifier."""

    type: KeyType
    runes: str = ""
    alt: bool = False

    def __str__(self) -> str:
        prefix = "alt+" if self.alt else ""
        if self.type is KeyType.RUNES:
            return prefix + self.runes
        return prefix + self.type.value


_KEY_BYTES: dict[KeyType, bytes] = {
    KeyType.SPACE: b" ",
    KeyType.ENTER: b"\r",
    KeyType.BACKSPACE: b"\x7f",
    KeyType.TAB: b"\t",
    KeyType.SHIFT_TAB: b"\x1b[Z",
    KeyType.ESCAPE: b"\x1b",
    KeyType.HOME: b"\x1b[H",
    KeyType.END: b"\x1b[F",
    KeyType.PGUP: b"\x1b[5~",
    KeyType.PGDOWN: b"\x1b[6~",
    KeyType.DELETE: b"\x1b[3~",
    KeyType.CTRL_A: b"\x01",
    KeyType.CTRL_B: b"\x02",
    KeyType.CTRL_C: b"\x03",
    KeyType.CTRL_D: b"\x04",
    KeyType.CTRL_E: b"\x05",
    KeyType.CTRL_F: b"\x06",
    KeyType.CTRL_G: b"\x07",
    KeyType.CTRL_H: b"\x08",
    KeyType.CTRL_K: b"\x0b",
    KeyType.CTRL_L: b"\x0c",
    KeyType.CTRL_N: b"\x0e",
    KeyType.CTRL_O: b"\x0f",
    KeyType.CTRL_P: b"\x10",
    KeyType.CTRL_R: b"\x12",
    KeyType.CTRL_S: b"\x13",
    KeyType.CTRL_T: b"\x14",
    KeyType.CTRL_U: b"\x15",
    KeyType.CTRL_V: b"\x16",
    KeyType.CTRL_W: b"\x17",
    KeyType.CTRL_X: b"\x18",
    KeyType.CTRL_Y: b"\x19",
    KeyType.CTRL_Z: b"\x1a",
    KeyType.F1: b"\x1bOP",
    KeyType.F2: b"\x1bOQ",
    KeyType.F3: b"\x1bOR",
    KeyType.F4: b"\x1bOS",
    KeyType.F5: b"\x1b[15~",
    KeyType.F6: b"\x1b[17~",
    KeyType.F7: b"\x1b[18~",
    KeyType.F8: b"\x1b[19~",
    KeyType.F9: b"\x1b[20~",
    KeyType.F10: b"\x1b[21~",
    KeyType.F11: b"\x1b[23~",
    KeyType.F12: b"\x1b[24~",
}

_ALT_ARROWS: dict[KeyType, bytes] = {
    KeyType.UP: b"\x1b[1;3A",
    KeyType.DOWN: b"\x1b[1;3B",
    KeyType.RIGHT: b"\x1b[1;3C",
    KeyType.LEFT: b"\x1b[1;3D",
}

_ARROWS: dict[KeyType, bytes] = {
    KeyType.UP: b"\x1b[A",
    KeyType.DOWN: b"\x1b[B",
    KeyType.RIGHT: b"\x1b[C",
    KeyType.LEFT: b"\x1b[D",
}


def key_msg_to_bytes(msg: KeyMsg) -> bytes:
    """Convert a key event to the bytes a terminal would send for it."""
    if msg.type is KeyType.RUNES:
        encoded = msg.runes.encode("utf-8")
        return b"\x1b" + encoded if msg.alt else encoded

    if msg.alt and msg.type in _ALT_ARROWS:
        return _ALT_ARROWS[msg.type]

    for table in (_ARROWS, _KEY_BYTES):
        seq = table.get(msg.type)
        if seq is not None:
            return b"\x1b" + seq if msg.alt else seq

    return str(msg).encode("utf-8")