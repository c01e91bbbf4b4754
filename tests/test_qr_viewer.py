import pytest

from kernui.qr_viewer import (
    MAX_QR_CHARS_PER_FRAME,
    PROGRESS_BAR_HEIGHT,
    QRViewer,
    progress_layout,
    qr_display_size,
    split_content,
)
from kernui.qrparts import QRFormat, QRPartParser, detect_format


def _content(n):
    return "".join(chr(ord("a") + i % 26) for i in range(n))


def test_short_content_single_part():
    assert split_content("hello") == ["hello"]


def test_exact_limit_single_part():
    text = _content(MAX_QR_CHARS_PER_FRAME)
    assert split_content(text) == [text]


@pytest.mark.parametrize("length", [401, 1000, 3900, 4000, 12000])
def test_split_parts_fit_and_round_trip(length):
    text = _content(length)
    parts = split_content(text)
    assert len(parts) > 1
    assert all(len(p) <= MAX_QR_CHARS_PER_FRAME for p in parts)
    assert parts[0].startswith(f"p1of{len(parts)} ")
    parser = QRPartParser()
    for part in parts:
        parser.parse(part)
    assert parser.format == QRFormat.PMOFN
    assert parser.is_complete()
    assert parser.result() == text


def test_split_headers_are_pmofn():
    parts = split_content(_content(5000))
    assert all(detect_format(p) == QRFormat.PMOFN for p in parts)


def test_progress_layout_none_for_single_or_too_many():
    assert progress_layout(480, 1) is None
    assert progress_layout(480, 101) is None


@pytest.mark.parametrize("parts", [2, 5, 13, 100])
def test_progress_layout_invariants(parts):
    layout = progress_layout(1000, parts)
    assert len(layout.block_positions) == parts
    step = layout.block_width + 1
    assert layout.block_positions == tuple(i * step for i in range(parts))
    assert layout.frame_width == parts * step + 7
    assert layout.frame_height == PROGRESS_BAR_HEIGHT
    assert layout.frame_width <= 1000 * 80 // 100 + 7


def test_qr_display_size():
    assert qr_display_size(400, 300, False) == 300
    assert qr_display_size(200, 300, False) == 200
    assert qr_display_size(400, 300, True) == 260


def test_viewer_single_part_advance_stays():
    viewer = QRViewer("abc")
    assert not viewer.multipart
    assert viewer.advance() == "abc"
    assert viewer.current_index == 0


def test_viewer_cycles_parts():
    viewer = QRViewer(_content(2000))
    parts = viewer.parts
    seen = [viewer.current_part] + [viewer.advance() for _ in range(len(parts))]
    assert seen[: len(parts)] == parts
    assert seen[-1] == parts[0]


def test_viewer_tap_calls_return():
    calls = []
    viewer = QRViewer("abc", on_return=lambda: calls.append(1))
    viewer.tap()
    viewer.tap()
    assert calls == [1, 1]


def test_viewer_message():
    assert QRViewer("abc").message is None
    viewer = QRViewer("abc", title="Address")
    assert viewer.message == "Address\nTap to return"


def test_viewer_long_title_truncated():
    viewer = QRViewer("abc", title="x" * 300)
    assert len(viewer.message) == 127
    assert viewer.message == "x" * 127


def test_viewer_requires_content():
    with pytest.raises(ValueError):
        QRViewer(None)