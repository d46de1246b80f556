import pytest

from argusui.keybytes import KeyMsg, KeyType, key_msg_to_bytes


def test_runes():
    assert key_msg_to_bytes(KeyMsg(KeyType.RUNES, "a")) == b"a"


def test_space():
    assert key_msg_to_bytes(KeyMsg(KeyType.SPACE)) == b" "


def test_enter():
    assert key_msg_to_bytes(KeyMsg(KeyType.ENTER)) == b"\r"


def test_backspace():
    assert key_msg_to_bytes(KeyMsg(KeyType.BACKSPACE)) == b"\x7f"


@pytest.mark.parametrize(
    "key_type, want",
    [
        (KeyType.UP, b"\x1b[A"),
        (KeyType.DOWN, b"\x1b[B"),
        (KeyType.RIGHT, b"\x1b[C"),
        (KeyType.LEFT, b"\x1b[D"),
    ],
)
def test_arrow_keys(key_type, want):
    assert key_msg_to_bytes(KeyMsg(key_type)) == want


def test_alt_arrow():
    assert key_msg_to_bytes(KeyMsg(KeyType.UP, alt=True)) == b"\x1b[1;3A"


@pytest.mark.parametrize(
    "key_type, want",
    [
        (KeyType.CTRL_A, b"\x01"),
        (KeyType.CTRL_C, b"\x03"),
        (KeyType.CTRL_D, b"\x04"),
        (KeyType.CTRL_Z, b"\x1a"),
    ],
)
def test_ctrl_keys(key_type, want):
    assert key_msg_to_bytes(KeyMsg(key_type)) == want


@pytest.mark.parametrize(
    "key_type, want",
    [
        (KeyType.F1, b"\x1bOP"),
        (KeyType.F2, b"\x1bOQ"),
        (KeyType.F5, b"\x1b[15~"),
        (KeyType.F12, b"\x1b[24~"),
    ],
)
def test_function_keys(key_type, want):
    assert key_msg_to_bytes(KeyMsg(key_type)) == want


def test_tab():
    assert key_msg_to_bytes(KeyMsg(KeyType.TAB)) == b"\t"


def test_escape():
    assert key_msg_to_bytes(KeyMsg(KeyType.ESCAPE)) == b"\x1b"


@pytest.mark.parametrize(
    "key_type, want",
    [
        (KeyType.HOME, b"\x1b[H"),
        (KeyType.END, b"\x1b[F"),
        (KeyType.PGUP, b"\x1b[5~"),
        (KeyType.PGDOWN, b"\x1b[6~"),
        (KeyType.DELETE, b"\x1b[3~"),
        (KeyType.SHIFT_TAB, b"\x1b[Z"),
    ],
)
def test_special_keys(key_type, want):
    assert key_msg_to_bytes(KeyMsg(key_type)) == want


def test_alt_backspace():
    assert key_msg_to_bytes(KeyMsg(KeyType.BACKSPACE, alt=True)) == b"\x1b\x7f"


def test_alt_delete():
    assert key_msg_to_bytes(KeyMsg(KeyType.DELETE, alt=True)) == b"\x1b\x1b[3~"


def test_alt_runes():
    assert key_msg_to_bytes(KeyMsg(KeyType.RUNES, "b", alt=True)) == b"\x1bb"
    assert key_msg_to_bytes(KeyMsg(KeyType.RUNES, "f", alt=True)) == b"\x1bf"
    assert key_msg_to_bytes(KeyMsg(KeyType.RUNES, "b")) == b"b"


def test_alt_arrows():
    assert key_msg_to_bytes(KeyMsg(KeyType.LEFT, alt=True)) == b"\x1b[1;3D"
    assert key_msg_to_bytes(KeyMsg(KeyType.RIGHT, alt=True)) == b"\x1b[1;3C"
    assert key_msg_to_bytes(KeyMsg(KeyType.LEFT)) == b"\x1b[D"


def test_unicode_runes_encode_as_utf8():
    assert key_msg_to_bytes(KeyMsg(KeyType.RUNES, "é")) == "é".encode("utf-8")


def test_unmapped_key_falls_back_to_name():
    assert key_msg_to_bytes(KeyMsg(KeyType.CTRL_Q)) == b"ctrl+q"


@pytest.mark.parametrize(
    "msg, text",
    [
        (KeyMsg(KeyType.CTRL_Q), "ctrl+q"),
        (KeyMsg(KeyType.SHIFT_UP), "shift+up"),
        (KeyMsg(KeyType.LEFT, alt=True), "alt+left"),
        (KeyMsg(KeyType.RUNES, "k"), "k"),
        (KeyMsg(KeyType.ESCAPE), "esc"),
        (KeyMsg(KeyType.ENTER), "enter"),
    ],
)
def test_key_msg_str(msg, text):
    assert str(msg) == text