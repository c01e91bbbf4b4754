"""Modal dialogs: yes/no prompt, auto-dismissing error flash and simple message box."""

from __future__ import annotations

from typing import Callable, Optional

from .theme import Color, Theme

DEFAULT_FLASH_TIMEOUT_MS = 2000

_DEFAULT_THEME = Theme()


class _Modal:
    """Common open/closed state of a modal."""

    def __init__(self) -> None:
        self.open = True

    def _close(self) -> None:
        if not self.open:
            raise RuntimeError(f"{type(self).__name__} is already closed")
        self.open = False


class PromptDialog(_Modal):
    """A Yes/No question, shown full screen or as a centred overlay.

    The callback receives True for "Yes" and False for "No". An overlay
    prompt closes once answered; a full-screen prompt stays until its page
    is torn down, but answers only once.
    """

    yes_text = "Yes"
    no_text = "No"

    def __init__(
        self,
        prompt_text: str,
        callback: Optional[Callable[[bool], None]] = None,
        overlay: bool = False,
        theme: Theme = _DEFAULT_THEME,
    ) -> None:
        if prompt_text is None:
            raise ValueError("prompt text is required")
        super().__init__()
        self.prompt_text = prompt_text
        self.callback = callback
        self.overlay = overlay
        self.theme = theme
        self.answered = False
        self.result: Optional[bool] = None

    @property
    def yes_color(self) -> Color:
        """Text colour of the "Yes" button."""
        return self.theme.yes

    @property
    def no_color(self) -> Color:
        """Text colour of the "No" button."""
        return self.theme.no

    def answer(self, result: bool) -> None:
        """Record the user's choice and report it to the callback."""
        if self.answered:
            raise RuntimeError("prompt has already been answered")
        self.answered = True
        self.result = bool(result)
        if self.callback is not None:
            self.callback(self.result)
        if self.overlay:
            self._close()


class FlashError(_Modal):
    """An error message that dismisses itself after a timeout."""

    title = "Error"
    hint = "Returning..."

    def __init__(
        self,
        message: str,
        callback: Optional[Callable[[], None]] = None,
        timeout_ms: int = 0,
        theme: Theme = _DEFAULT_THEME,
    ) -> None:
        if message is None:
            raise ValueError("error message is required")
        super().__init__()
        self.message = message
        self.callback = callback
        self.timeout_ms = timeout_ms if timeout_ms > 0 else DEFAULT_FLASH_TIMEOUT_MS
        self.theme = theme

    @property
    def message_color(self) -> Color:
        """Colour the error text is drawn in."""
        return self.theme.error

    def expire(self) -> None:
        """Timeout reached: run the return callback and close."""
        if not self.open:
            raise RuntimeError("flash error has already expired")
        if self.callback is not None:
            self.callback()
        self._close()


class SimpleDialog(_Modal):
    """A titled message box with a single OK button."""

    button_text = "OK"
    width = 400
    height = 220

    def __init__(self, title: str, message: str) -> None:
        super().__init__()
        self.title = title
        self.message = message

    def close(self) -> None:
        """Dismiss the dialog (the OK button)."""
        self._close()