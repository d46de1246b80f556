import pytest

from argusui.filter import super_to_alt_filter
from argusui.keybytes import KeyMsg, KeyType


@pytest.mark.parametrize(
    "raw, key_type",
    [
        (b"\x1b[1;9A", KeyType.UP),
        (b"\x1b[1;9B", KeyType.DOWN),
        (b"\x1b[1;9C", KeyType.RIGHT),
        (b"\x1b[1;9D", KeyType.LEFT),
    ],
)
def test_cmd_arrows(raw, key_type):
    assert super_to_alt_filter(raw) == KeyMsg(key_type, alt=True)


def test_bytearray_is_accepted():
    assert super_to_alt_filter(bytearray(b"\x1b[1;9C")) == KeyMsg(KeyType.RIGHT, alt=True)


def test_normal_key_msg_passes_through():
    msg = KeyMsg(KeyType.LEFT)
    result = super_to_alt_filter(msg)
    assert result is msg
    assert result.alt is False


def test_wrong_length_not_converted():
    assert super_to_alt_filter(b"\x1b[1;9") == b"\x1b[1;9"


def test_wrong_modifier_not_converted():
    assert super_to_alt_filter(b"\x1b[1;3C") == b"\x1b[1;3C"


def test_unknown_final_letter_not_converted():
    assert super_to_alt_filter(b"\x1b[1;9Z") == b"\x1b[1;9Z"


def test_other_message_passes_through():
    msg = {"width": 80, "height": 24}
    assert super_to_alt_filter(msg) is msg