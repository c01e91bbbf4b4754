import pytest

from kernui.dialogs import (
    DEFAULT_FLASH_TIMEOUT_MS,
    FlashError,
    PromptDialog,
    SimpleDialog,
)
from kernui.theme import Theme


def test_prompt_yes_reported_to_callback():
    answers = []
    dialog = PromptDialog("Continue?", answers.append)
    dialog.answer(True)
    assert answers == [True]
    assert dialog.result is True


def test_prompt_no_reported_to_callback():
    answers = []
    dialog = PromptDialog("Continue?", answers.append, overlay=True)
    dialog.answer(False)
    assert answers == [False]


def test_prompt_overlay_closes_after_answer():
    dialog = PromptDialog("Sure?", overlay=True)
    dialog.answer(True)
    assert dialog.open is False


def test_prompt_fullscreen_stays_open_after_answer():
    dialog = PromptDialog("Sure?")
    dialog.answer(False)
    assert dialog.open is True
    assert dialog.answered is True


def test_prompt_answers_only_once():
    answers = []
    dialog = PromptDialog("Sure?", answers.append)
    dialog.answer(True)
    with pytest.raises(RuntimeError):
        dialog.answer(False)
    assert answers == [True]


def test_prompt_without_callback_records_result():
    dialog = PromptDialog("Sure?")
    dialog.answer(False)
    assert dialog.result is False


def test_prompt_requires_text():
    with pytest.raises(ValueError):
        PromptDialog(None)


def test_prompt_button_colors_follow_theme():
    theme = Theme()
    dialog = PromptDialog("Sure?", theme=theme)
    assert dialog.yes_color == theme.yes
    assert dialog.no_color == theme.no
    assert (dialog.yes_text, dialog.no_text) == ("Yes", "No")


def test_flash_error_default_timeout():
    assert FlashError("Bad", timeout_ms=0).timeout_ms == DEFAULT_FLASH_TIMEOUT_MS
    assert FlashError("Bad", timeout_ms=-5).timeout_ms == 2000


def test_flash_error_keeps_positive_timeout():
    assert FlashError("Bad", timeout_ms=500).timeout_ms == 500


def test_flash_error_expire_runs_callback_and_closes():
    calls = []
    flash = FlashError("Invalid QR", lambda: calls.append("back"))
    flash.expire()
    assert calls == ["back"]
    assert flash.open is False


def test_flash_error_expires_once():
    calls = []
    flash = FlashError("Invalid QR", lambda: calls.append(1))
    flash.expire()
    with pytest.raises(RuntimeError):
        flash.expire()
    assert calls == [1]


def test_flash_error_texts_and_color():
    theme = Theme()
    flash = FlashError("Invalid QR", theme=theme)
    assert flash.title == "Error"
    assert flash.hint == "Returning..."
    assert flash.message == "Invalid QR"
    assert flash.message_color == theme.error


def test_flash_error_requires_message():
    with pytest.raises(ValueError):
        FlashError(None)


def test_simple_dialog_close():
    dialog = SimpleDialog("Info", "Saved")
    assert dialog.open is True
    dialog.close()
    assert dialog.open is False


def test_simple_dialog_close_twice_raises():
    dialog = SimpleDialog("Info", "Saved")
    dialog.close()
    with pytest.raises(RuntimeError):
        dialog.close()


def test_simple_dialog_layout():
    dialog = SimpleDialog("Info", "Saved")
    assert (dialog.title, dialog.message) == ("Info", "Saved")
    assert dialog.button_text == "OK"
    assert (dialog.width, dialog.height) == (400, 220)