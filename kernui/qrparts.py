"""Multi-part QR payload assembly and QR sizing helpers."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Optional, Protocol, Union

QRData = Union[str, bytes]

PMOFN_PREFIX_LENGTH_1D = 6
PMOFN_PREFIX_LENGTH_2D = 8
BBQR_PREFIX_LENGTH = 8
UR_GENERIC_PREFIX_LENGTH = 22
UR_CBOR_PREFIX_LEN = 14
UR_BYTEWORDS_CRC_LEN = 4
UR_MIN_FRAGMENT_LENGTH = 10

QR_CAPACITY_SIZE = 20

# Capacities per QR version (1..20), medium error correction.
QR_CAPACITY_BYTE = (
    17, 32, 53, 78, 106, 134, 154, 192, 230, 271,
    321, 367, 425, 458, 520, 586, 644, 718, 792, 858,
)
QR_CAPACITY_ALPHANUMERIC = (
    25, 47, 77, 114, 154, 195, 224, 279, 335, 395,
    468, 535, 619, 667, 758, 854, 938, 1046, 1153, 1249,
)

_DIGITS = "0123456789"


class QRFormat(IntEnum):
    """Known multi-part QR encodings."""

    NONE = 0
    PMOFN = 1
    UR = 2
    BBQR = 3


class URDecoder(Protocol):
    """Interface of a fountain-code UR decoder usable by the parser."""

    def receive_part(self, data: str) -> bool: ...

    def processed_parts_count(self) -> int: ...

    def expected_part_count(self) -> int: ...

    def is_complete(self) -> bool: ...

    def is_success(self) -> bool: ...

    def result(self) -> object: ...


def _as_text(data: QRData) -> str:
    return data.decode("latin-1") if isinstance(data, bytes) else data


def _like(text: str, original: QRData) -> QRData:
    return text.encode("latin-1") if isinstance(original, bytes) else text


def _atoi(text: str) -> int:
    """Parse a leading integer the way C's atoi does; 0 when none."""
    stripped = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for ch in stripped:
        if ch not in _DIGITS:
            break
        digits += ch
    return sign * int(digits) if digits else 0


def detect_format(data: QRData) -> QRFormat:
    """Detect the multi-part format of a single QR frame."""
    text = _as_text(data)
    if text.startswith("p"):
        space = text.find(" ")
        if space >= 0 and space < 32:
            header = text[:space]
            of_pos = header.find("of")
            if of_pos > 1 and all(ch in _DIGITS for ch in header[1:of_pos]):
                return QRFormat.PMOFN
        return QRFormat.NONE
    if text[:3].lower() == "ur:":
        return QRFormat.UR
    return QRFormat.NONE


def parse_pmofn_part(data: QRData) -> Optional[tuple[QRData, int, int]]:
    """Split a "pMofN payload" frame into (payload, index, total), or None."""
    text = _as_text(data)
    of_pos = text.find("of")
    space_pos = text.find(" ")
    if of_pos < 0 or space_pos < 0 or of_pos >= space_pos:
        return None
    index = _atoi(text[1:])
    total = _atoi(text[of_pos + 2:])
    return _like(text[space_pos + 1:], data), index, total


class QRPartParser:
    """Collects QR frames and reassembles the payload they carry."""

    def __init__(
        self, ur_decoder_factory: Optional[Callable[[], URDecoder]] = None
    ) -> None:
        self._parts: dict[int, QRData] = {}
        self._total: Optional[int] = None
        self.format: Optional[QRFormat] = None
        self._ur_decoder_factory = ur_decoder_factory
        self._ur_decoder: Optional[URDecoder] = None

    def _using_ur(self) -> bool:
        return self.format == QRFormat.UR and self._ur_decoder is not None

    def parse(self, data: QRData) -> Optional[int]:
        """Feed one frame.

        Returns the zero-based index of the part received for multi-part
        formats, or None when the frame is not a recognised part or the
        format carries no part index.
        """
        if self.format is None:
            self.format = detect_format(data)

        if self.format == QRFormat.NONE:
            self._parts[1] = data
            self._total = 1
        elif self.format == QRFormat.PMOFN:
            parsed = parse_pmofn_part(data)
            if parsed is not None:
                part, index, total = parsed
                self._parts[index] = part
                self._total = total
                return index - 1
        elif self.format == QRFormat.UR:
            if self._ur_decoder is None:
                if self._ur_decoder_factory is None:
                    return None
                self._ur_decoder = self._ur_decoder_factory()
                if self._ur_decoder is None:
                    return None
            if self._ur_decoder.receive_part(_as_text(data)):
                return self._ur_decoder.processed_parts_count() - 1
        return None

    def parsed_count(self) -> int:
        """Number of distinct parts received so far."""
        if self._using_ur():
            return self._ur_decoder.processed_parts_count()
        return len(self._parts)

    def total_count(self) -> Optional[int]:
        """Number of parts expected, or None while unknown."""
        if self._using_ur():
            expected = self._ur_decoder.expected_part_count()
            return expected if expected > 0 else 1
        return self._total

    def is_complete(self) -> bool:
        """True once every expected part has arrived."""
        if self._using_ur():
            return self._ur_decoder.is_complete() and self._ur_decoder.is_success()
        if self._total is None or len(self._parts) != self._total:
            return False
        start = 1 if self.format in (QRFormat.PMOFN, QRFormat.NONE) else 0
        expected_sum = sum(range(start, start + self._total))
        return sum(self._parts) == expected_sum

    def result(self) -> object:
        """The assembled payload; for UR, the decoder's result."""
        if self.format == QRFormat.UR and self._ur_decoder is not None:
            if not self.is_complete():
                raise ValueError("UR sequence is not complete")
            return self._ur_decoder.result()
        ordered = [self._parts[i] for i in sorted(self._parts)]
        if ordered and isinstance(ordered[0], bytes):
            return b"".join(ordered)
        return "".join(ordered)


def max_qr_bytes(max_width: int, encoding: str) -> int:
    """Capacity of the largest QR version that fits in max_width modules."""
    version = int((max_width - 2 - 17) / 4)
    version = min(max(version, 1), QR_CAPACITY_SIZE)
    table = QR_CAPACITY_ALPHANUMERIC if encoding == "alphanumeric" else QR_CAPACITY_BYTE
    return table[version - 1]


def find_min_num_parts(
    data_len: int, max_width: int, qr_format: QRFormat
) -> tuple[int, int]:
    """Return (num_parts, part_size) needed to carry data_len characters."""
    if data_len <= 0:
        raise ValueError("data length must be positive")
    encoding = "alphanumeric" if qr_format == QRFormat.BBQR else "byte"
    capacity = max_qr_bytes(max_width, encoding)

    if qr_format == QRFormat.PMOFN:
        size = capacity - PMOFN_PREFIX_LENGTH_1D
        num_parts = -(-data_len // size)
        if num_parts > 9:
            size = capacity - PMOFN_PREFIX_LENGTH_2D
            num_parts = -(-data_len // size)
        return num_parts, -(-data_len // num_parts)

    if qr_format == QRFormat.UR:
        capacity -= UR_GENERIC_PREFIX_LENGTH
        capacity -= (UR_CBOR_PREFIX_LEN + UR_BYTEWORDS_CRC_LEN) * 2
        capacity = max(capacity, UR_MIN_FRAGMENT_LENGTH)
        num_parts = -(-(data_len * 2) // capacity)
        return num_parts, max(data_len // num_parts, UR_MIN_FRAGMENT_LENGTH)

    if qr_format == QRFormat.BBQR:
        max_part_size = capacity - BBQR_PREFIX_LENGTH
        if data_len < max_part_size:
            return 1, data_len
        max_part_size = (max_part_size // 8) * 8
        num_parts = -(-data_len // max_part_size)
        part_size = -(-(data_len // num_parts) // 8) * 8
        if part_size > max_part_size:
            num_parts += 1
            part_size = -(-(data_len // num_parts) // 8) * 8
        return num_parts, part_size

    raise ValueError(f"format {qr_format!r} is not split into parts")


def get_qr_size(qr_code: QRData) -> int:
    """Estimated side length in modules of a QR code for this data."""
    return math.isqrt(len(qr_code) * 8)