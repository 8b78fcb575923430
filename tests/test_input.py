import io

import pytest

from chipeight.input import Input


def test_set_and_query_key():
    keys = Input()
    keys.set_key(4, True)
    assert keys.is_key_pressed(4)
    keys.set_key(4, False)
    assert not keys.is_key_pressed(4)


@pytest.mark.parametrize("key", [16, 255, -1])
def test_out_of_range_keys(key):
    keys = Input()
    keys.set_key(key, True)
    assert not keys.is_key_pressed(key)
    assert keys.keypad_state() == (False,) * 16


@pytest.mark.parametrize("char, expected", [("a", 0xA), ("F", 0xF), ("7", 7)])
def test_wait_for_key_reads_hex_digit(char, expected):
    keys = Input()
    out = io.StringIO()
    assert keys.wait_for_key(io.StringIO(char), out) == expected
    assert keys.is_key_pressed(expected)
    assert out.getvalue() == "Press a key (0-9, a-f): "


@pytest.mark.parametrize("text", ["z", ""])
def test_wait_for_key_rejects_other_input(text):
    keys = Input()
    assert keys.wait_for_key(io.StringIO(text), io.StringIO()) is None
    assert not any(keys.keypad_state())


def test_keypad_state_reflects_keys():
    keys = Input()
    keys.set_key(0, True)
    keys.set_key(15, True)
    state = keys.keypad_state()
    assert len(state) == 16
    assert [k for k, down in enumerate(state) if down] == [0, 15]