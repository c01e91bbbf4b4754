"""Paged QR display: splits long content into pMofN frames and cycles them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

MAX_QR_CHARS_PER_FRAME = 400
ANIMATION_INTERVAL_MS = 250
MESSAGE_TIMEOUT_MS = 2000
PROGRESS_BAR_HEIGHT = 20
PROGRESS_FRAME_PADD = 2
PROGRESS_BLOC_PAD = 1
PROGRESS_BLOCK_HEIGHT = 12
MAX_QR_PARTS = 100

_MESSAGE_LIMIT = 127
_RETURN_HINT = "Tap to return"


def split_content(content: str) -> list[str]:
    """Split content into QR frames, prefixing each with "pMofN " when needed."""
    max_chars = MAX_QR_CHARS_PER_FRAME
    length = len(content)
    if length <= max_chars:
        return [content]

    estimate = min(-(-length // max_chars), MAX_QR_PARTS)
    prefix_len = 8 if estimate > 9 else 6
    chunk = max_chars - prefix_len
    count = -(-length // chunk)
    return [
        f"p{i + 1}of{count} {content[start:start + chunk]}"
        for i, start in enumerate(range(0, length, chunk))
    ]


@dataclass(frozen=True)
class ProgressLayout:
    """Geometry of the progress bar shown under a multi-part QR."""

    frame_width: int
    frame_height: int
    block_width: int
    block_height: int
    block_positions: tuple[int, ...]


def progress_layout(screen_width: int, total_parts: int) -> Optional[ProgressLayout]:
    """Layout of the progress indicator, or None when none is shown."""
    if total_parts <= 1 or total_parts > MAX_QR_PARTS:
        return None
    frame_width = screen_width * 80 // 100
    step = frame_width // total_parts - PROGRESS_BLOC_PAD
    frame_width = total_parts * step + 1 + 2 * PROGRESS_FRAME_PADD + 2
    return ProgressLayout(
        frame_width=frame_width,
        frame_height=PROGRESS_BAR_HEIGHT,
        block_width=step - PROGRESS_BLOC_PAD,
        block_height=PROGRESS_BLOCK_HEIGHT,
        block_positions=tuple(i * step for i in range(total_parts)),
    )


def qr_display_size(content_width: int, content_height: int, multipart: bool) -> int:
    """Side length of the QR area, leaving room for the progress bar if needed."""
    height = content_height
    if multipart:
        height -= PROGRESS_BAR_HEIGHT + 20
    return min(content_width, height)


class QRViewer:
    """State of a QR viewer page: frames, current frame and title message."""

    def __init__(
        self,
        content: str,
        title: Optional[str] = None,
        on_return: Optional[Callable[[], None]] = None,
    ) -> None:
        if content is None:
            raise ValueError("content is required")
        self.content = content
        self.parts = split_content(content)
        self.title = title
        self.on_return = on_return
        self.current_index = 0
        self.visible = True
        self.message: Optional[str] = (
            f"{title}\n{_RETURN_HINT}"[:_MESSAGE_LIMIT] if title is not None else None
        )

    @property
    def multipart(self) -> bool:
        """True when the content spans several frames."""
        return len(self.parts) > 1

    @property
    def current_part(self) -> str:
        """The frame currently displayed."""
        return self.parts[self.current_index]

    def advance(self) -> str:
        """Move to the next frame (wrapping around) and return it."""
        if self.multipart:
            self.current_index = (self.current_index + 1) % len(self.parts)
        return self.current_part

    def tap(self) -> None:
        """Handle a tap on the page: return to the caller."""
        if self.on_return is not None:
            self.on_return()