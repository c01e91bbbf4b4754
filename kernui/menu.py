"""Touch menu of named entries, and the mnemonic word-count selector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

Callback = Callable[[], None]


@dataclass
class MenuEntry:
    """One menu entry."""

    name: str
    callback: Callback
    enabled: bool = True


class Menu:
    """A titled list of entries with an optional back action."""

    def __init__(
        self,
        title: str,
        back_callback: Optional[Callback] = None,
        max_entries: Optional[int] = None,
    ) -> None:
        if title is None:
            raise ValueError("menu title is required")
        self.title = title
        self.back_callback = back_callback
        self.max_entries = max_entries
        self.entries: list[MenuEntry] = []
        self.selected_index = 0
        self.visible = True

    @property
    def has_back_button(self) -> bool:
        """True when the menu shows a back button."""
        return self.back_callback is not None

    def add_entry(self, name: str, callback: Callback) -> int:
        """Append an enabled entry and return its index."""
        if not name or callback is None:
            raise ValueError("entry needs a name and a callback")
        if self.max_entries is not None and len(self.entries) >= self.max_entries:
            raise ValueError("menu is full")
        self.entries.append(MenuEntry(name, callback))
        return len(self.entries) - 1

    def set_entry_enabled(self, index: int, enabled: bool) -> None:
        """Enable or disable an entry."""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no menu entry {index}")
        self.entries[index].enabled = bool(enabled)

    def click(self, index: int) -> bool:
        """Select an entry; run its callback if enabled. Returns whether it ran."""
        if not 0 <= index < len(self.entries):
            raise IndexError(f"no menu entry {index}")
        self.selected_index = index
        entry = self.entries[index]
        if entry.enabled:
            entry.callback()
            return True
        return False

    def back(self) -> bool:
        """Run the back action if there is one. Returns whether it ran."""
        if self.back_callback is None:
            return False
        self.back_callback()
        return True


def create_word_count_selector(
    on_select: Callable[[int], None], on_back: Optional[Callback] = None
) -> Menu:
    """Menu choosing a 12- or 24-word mnemonic; it closes on first use."""
    if on_select is None:
        raise ValueError("on_select is required")

    menu: Menu
    active = True

    def close() -> bool:
        nonlocal active
        if not active:
            return False
        active = False
        menu.visible = False
        return True

    def choose(count: int) -> Callback:
        def handler() -> None:
            if close():
                on_select(count)

        return handler

    def go_back() -> None:
        if close() and on_back is not None:
            on_back()

    menu = Menu("Mnemonic Length", go_back if on_back is not None else None)
    menu.add_entry("12 Words", choose(12))
    menu.add_entry("24 Words", choose(24))
    return menu