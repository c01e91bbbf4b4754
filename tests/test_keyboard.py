import pytest

from kernui.keyboard import (
    BACKSPACE,
    KEY_BACKSPACE,
    KEY_COUNT,
    KEY_OK,
    OK,
    Keyboard,
    button_for_key_index,
    key_index_for_button,
)


def test_first_button_is_q():
    received = []
    kb = Keyboard("Title", received.append)
    assert kb.press(0) == "q"
    assert received == ["q"]


def test_ok_disabled_initially():
    received = []
    kb = Keyboard(on_key=received.append)
    assert not kb.is_key_enabled(KEY_OK)
    assert kb.press(button_for_key_index(KEY_OK)) is None
    assert received == []


def test_backspace_enabled_initially():
    kb = Keyboard()
    assert kb.press(button_for_key_index(KEY_BACKSPACE)) == BACKSPACE


def test_enable_ok():
    kb = Keyboard()
    kb.set_ok_enabled(True)
    assert kb.press(button_for_key_index(KEY_OK)) == OK
    assert kb.disabled_buttons == frozenset()


def test_mapping_round_trip():
    for button in range(KEY_COUNT):
        key = key_index_for_button(button)
        assert button_for_key_index(key) == button


def test_unknown_button_and_key():
    assert key_index_for_button(KEY_COUNT) is None
    assert button_for_key_index(-1) is None
    assert Keyboard().press(KEY_COUNT) is None


def test_letters_mask():
    kb = Keyboard()
    kb.set_letters_enabled(1)
    a_button = button_for_key_index(0)
    assert kb.press(a_button) == "a"
    assert kb.press(0) is None
    assert a_button not in kb.disabled_buttons
    assert 0 in kb.disabled_buttons
    assert kb.is_key_enabled(KEY_BACKSPACE)


def test_enable_all():
    kb = Keyboard()
    kb.set_letters_enabled(0)
    kb.enable_all()
    assert all(kb.is_key_enabled(i) for i in range(KEY_COUNT))


def test_set_key_out_of_range():
    with pytest.raises(ValueError):
        Keyboard().set_key_enabled(KEY_COUNT, True)


def test_is_key_enabled_out_of_range():
    assert Keyboard().is_key_enabled(-1) is False


def test_input_text():
    kb = Keyboard()
    assert kb.set_input_text("abc") == "abc_"
    assert kb.input_text == "abc_"
    assert kb.set_input_text("") == "_"
    assert kb.set_input_text(None) == "_"


def test_input_text_truncated():
    kb = Keyboard()
    shown = kb.set_input_text("x" * 100)
    assert len(shown) == 63
    assert set(shown) == {"x"}