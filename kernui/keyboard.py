"""QWERTY on-screen keyboard with per-key enable state."""

from __future__ import annotations

from string import ascii_lowercase
from typing import Callable, Optional

KEY_A = 0
KEY_Z = 25
KEY_BACKSPACE = 26
KEY_OK = 27
KEY_COUNT = 28

BACKSPACE = "\b"
OK = "\n"

# Characters in button-matrix order: three letter rows, then backspace and OK.
BUTTON_CHARS = "qwertyuiopasdfghjklzxcvbnm" + BACKSPACE + OK
BUTTON_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm" + BACKSPACE + OK)

_INPUT_LIMIT = 63
_CURSOR = "_"


def key_index_for_button(button_id: int) -> Optional[int]:
    """Logical key index of a button, or None if the button does not exist."""
    if not 0 <= button_id < len(BUTTON_CHARS):
        return None
    char = BUTTON_CHARS[button_id]
    if char == BACKSPACE:
        return KEY_BACKSPACE
    if char == OK:
        return KEY_OK
    return ord(char) - ord("a")


def button_for_key_index(key_index: int) -> Optional[int]:
    """Button position of a logical key, or None if the key does not exist."""
    if key_index == KEY_BACKSPACE:
        return BUTTON_CHARS.index(BACKSPACE)
    if key_index == KEY_OK:
        return BUTTON_CHARS.index(OK)
    if KEY_A <= key_index <= KEY_Z:
        return BUTTON_CHARS.index(ascii_lowercase[key_index])
    return None


class Keyboard:
    """Keyboard state: title, input line and which keys may be pressed."""

    def __init__(
        self,
        title: Optional[str] = None,
        on_key: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.title = title or ""
        self.on_key = on_key
        self.input_text = _CURSOR
        self.visible = True
        self._enabled = [index != KEY_OK for index in range(KEY_COUNT)]

    @property
    def disabled_buttons(self) -> frozenset[int]:
        """Button positions currently shown as disabled."""
        return frozenset(
            button
            for index, enabled in enumerate(self._enabled)
            if not enabled and (button := button_for_key_index(index)) is not None
        )

    def is_key_enabled(self, key_index: int) -> bool:
        """True if the key exists and is enabled."""
        return 0 <= key_index < KEY_COUNT and self._enabled[key_index]

    def press(self, button_id: int) -> Optional[str]:
        """Handle a button press; return the character sent, or None if ignored."""
        key_index = key_index_for_button(button_id)
        if key_index is None or not self.is_key_enabled(key_index):
            return None
        char = BUTTON_CHARS[button_id]
        if self.on_key is not None:
            self.on_key(char)
        return char

    def set_key_enabled(self, key_index: int, enabled: bool) -> None:
        """Enable or disable one key."""
        if not 0 <= key_index < KEY_COUNT:
            raise ValueError(f"no such key: {key_index}")
        self._enabled[key_index] = bool(enabled)

    def set_letters_enabled(self, letter_mask: int) -> None:
        """Enable exactly the letters whose bit (bit 0 = 'a') is set."""
        for i in range(26):
            self.set_key_enabled(KEY_A + i, bool(letter_mask & (1 << i)))

    def enable_all(self) -> None:
        """Enable every key, OK included."""
        for index in range(KEY_COUNT):
            self.set_key_enabled(index, True)

    def set_ok_enabled(self, enabled: bool) -> None:
        """Enable or disable the OK key."""
        self.set_key_enabled(KEY_OK, enabled)

    def set_input_text(self, text: Optional[str]) -> str:
        """Show the typed text followed by a cursor; return what is shown."""
        if text:
            self.input_text = (text + _CURSOR)[:_INPUT_LIMIT]
        else:
            self.input_text = _CURSOR
        return self.input_text