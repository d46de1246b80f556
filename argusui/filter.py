"""Translation of Super-modified arrow sequences into Alt-modified key events."""

from __future__ import annotations

from typing import Any

from argusui.keybytes import KeyMsg, KeyType

_SUPER_PREFIX = b"\x1b[1;9"
_SUPER_ARROWS = {
    ord("A"): KeyType.UP,
    ord("B"): KeyType.DOWN,
    ord("C"): KeyType.RIGHT,
    ord("D"): KeyType.LEFT,
}


def super_to_alt_filter(msg: Any) -> Any:
    """Turn a raw Cmd+arrow CSI sequence into an Alt+arrow key event.

    Anything else is returned unchanged.
    """
    if not isinstance(msg, (bytes, bytearray)):
        return msg
    raw = bytes(msg)
    if len(raw) == 6 and raw.startswith(_SUPER_PREFIX):
        key_type = _SUPER_ARROWS.get(raw[5])
        if key_type is not None:
            return KeyMsg(key_type, alt=True)
    return msg