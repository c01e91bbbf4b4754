"""Detection and decoding of mnemonic QR codes.

Supported formats:

* Plaintext: space-separated BIP39 words.
* Compact SeedQR: raw entropy, 16 bytes for 12 words or 32 bytes for 24.
* SeedQR: decimal digits, four per word, each a wordlist index 0000-2047.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Optional, Sequence, Union

QRData = Union[str, bytes, bytearray]

COMPACT_SEEDQR_12_WORDS_LEN = 16
COMPACT_SEEDQR_24_WORDS_LEN = 32
SEEDQR_12_WORDS_LEN = 48
SEEDQR_24_WORDS_LEN = 96

WORDLIST_SIZE = 2048
_BITS_PER_WORD = 11
_VALID_WORD_COUNTS = (12, 15, 18, 21, 24)

_COMPACT_LENGTHS = (COMPACT_SEEDQR_12_WORDS_LEN, COMPACT_SEEDQR_24_WORDS_LEN)
_SEEDQR_LENGTHS = (SEEDQR_12_WORDS_LEN, SEEDQR_24_WORDS_LEN)


class MnemonicQRFormat(Enum):
    """Kinds of mnemonic QR payload."""

    PLAINTEXT = 0
    COMPACT = 1
    SEEDQR = 2
    UNKNOWN = 3


class MnemonicQRError(ValueError):
    """Raised when QR data cannot be turned into a valid mnemonic."""

    def __init__(
        self, message: str, fmt: MnemonicQRFormat = MnemonicQRFormat.UNKNOWN
    ) -> None:
        super().__init__(message)
        self.fmt = fmt


_FORMAT_NAMES = {
    MnemonicQRFormat.PLAINTEXT: "Plaintext",
    MnemonicQRFormat.COMPACT: "Compact SeedQR",
    MnemonicQRFormat.SEEDQR: "SeedQR",
}


def _to_bytes(data: QRData) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    try:
        return data.encode("latin-1")
    except UnicodeEncodeError:
        return data.encode("utf-8")


def _is_digit(b: int) -> bool:
    return 0x30 <= b <= 0x39


def _is_alpha(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A


def _is_print(b: int) -> bool:
    return 0x20 <= b <= 0x7E


def _is_space(b: int) -> bool:
    return b == 0x20 or 0x09 <= b <= 0x0D


def _looks_like_plaintext(raw: bytes) -> bool:
    has_space = has_letter = False
    for b in raw:
        if b == 0x20:
            has_space = True
        elif _is_alpha(b):
            has_letter = True
        elif not _is_print(b):
            return False
    return has_space and has_letter


def _has_non_printable(raw: bytes) -> bool:
    return any(not _is_print(b) and not _is_space(b) for b in raw)


def _word_index(wordlist: Sequence[str]) -> dict[str, int]:
    if len(wordlist) != WORDLIST_SIZE:
        raise ValueError(f"wordlist must hold {WORDLIST_SIZE} words")
    return {word: i for i, word in enumerate(wordlist)}


def detect_format(data: QRData) -> MnemonicQRFormat:
    """Guess which mnemonic QR format the data is in."""
    raw = _to_bytes(data)
    if not raw:
        return MnemonicQRFormat.UNKNOWN
    if len(raw) in _COMPACT_LENGTHS and _has_non_printable(raw):
        return MnemonicQRFormat.COMPACT
    if len(raw) in _SEEDQR_LENGTHS and all(_is_digit(b) for b in raw):
        return MnemonicQRFormat.SEEDQR
    if _looks_like_plaintext(raw):
        return MnemonicQRFormat.PLAINTEXT
    if len(raw) in _COMPACT_LENGTHS:
        return MnemonicQRFormat.COMPACT
    return MnemonicQRFormat.UNKNOWN


def entropy_to_mnemonic(entropy: bytes, wordlist: Sequence[str]) -> str:
    """Encode entropy as a BIP39 mnemonic with its checksum word bits."""
    words = list(wordlist)
    _word_index(words)
    ent_bits = len(entropy) * 8
    if len(entropy) % 4 or not 16 <= len(entropy) <= 32:
        raise MnemonicQRError("entropy must be 16 to 32 bytes, a multiple of 4")
    cs_bits = ent_bits // 32
    checksum = hashlib.sha256(entropy).digest()[0] >> (8 - cs_bits)
    value = (int.from_bytes(entropy, "big") << cs_bits) | checksum
    count = (ent_bits + cs_bits) // _BITS_PER_WORD
    mask = (1 << _BITS_PER_WORD) - 1
    indices = [
        (value >> (_BITS_PER_WORD * (count - 1 - i))) & mask for i in range(count)
    ]
    return " ".join(words[i] for i in indices)


def validate_mnemonic(mnemonic: str, wordlist: Sequence[str]) -> bytes:
    """Check a mnemonic's words and checksum; return the entropy it encodes."""
    lookup = _word_index(wordlist)
    words = mnemonic.split(" ")
    if len(words) not in _VALID_WORD_COUNTS:
        raise MnemonicQRError(f"invalid word count: {len(words)}")
    value = 0
    for word in words:
        try:
            value = (value << _BITS_PER_WORD) | lookup[word]
        except KeyError:
            raise MnemonicQRError(f"word not in wordlist: {word!r}") from None
    total_bits = len(words) * _BITS_PER_WORD
    cs_bits = total_bits // 33
    ent_bits = total_bits - cs_bits
    entropy = (value >> cs_bits).to_bytes(ent_bits // 8, "big")
    checksum = value & ((1 << cs_bits) - 1)
    if hashlib.sha256(entropy).digest()[0] >> (8 - cs_bits) != checksum:
        raise MnemonicQRError("mnemonic checksum mismatch")
    return entropy


def compact_to_mnemonic(data: QRData, wordlist: Sequence[str]) -> str:
    """Decode Compact SeedQR entropy (16 or 32 bytes) into a mnemonic."""
    raw = _to_bytes(data)
    if len(raw) not in _COMPACT_LENGTHS:
        raise MnemonicQRError(
            "Compact SeedQR must be 16 or 32 bytes", MnemonicQRFormat.COMPACT
        )
    mnemonic = entropy_to_mnemonic(raw, wordlist)
    validate_mnemonic(mnemonic, wordlist)
    return mnemonic


def seedqr_to_mnemonic(data: QRData, wordlist: Sequence[str]) -> str:
    """Decode a SeedQR digit string (48 or 96 digits) into a mnemonic."""
    raw = _to_bytes(data)
    if len(raw) not in _SEEDQR_LENGTHS or not all(_is_digit(b) for b in raw):
        raise MnemonicQRError(
            "SeedQR must be 48 or 96 decimal digits", MnemonicQRFormat.SEEDQR
        )
    words = list(wordlist)
    _word_index(words)
    digits = raw.decode("ascii")
    chosen = []
    for start in range(0, len(digits), 4):
        index = int(digits[start:start + 4])
        if index >= WORDLIST_SIZE:
            raise MnemonicQRError(
                f"word index out of range: {index}", MnemonicQRFormat.SEEDQR
            )
        chosen.append(words[index])
    mnemonic = " ".join(chosen)
    try:
        validate_mnemonic(mnemonic, words)
    except MnemonicQRError as exc:
        raise MnemonicQRError(str(exc), MnemonicQRFormat.SEEDQR) from None
    return mnemonic


def to_mnemonic(
    data: QRData, wordlist: Sequence[str]
) -> tuple[str, MnemonicQRFormat]:
    """Detect the format of QR data and decode it.

    Returns (mnemonic, format). Raises MnemonicQRError, carrying the detected
    format, when the data is not a valid mnemonic.
    """
    raw = _to_bytes(data)
    if not raw:
        raise MnemonicQRError("empty QR data", MnemonicQRFormat.UNKNOWN)
    fmt = detect_format(raw)
    try:
        if fmt is MnemonicQRFormat.COMPACT:
            return compact_to_mnemonic(raw, wordlist), fmt
        if fmt is MnemonicQRFormat.SEEDQR:
            return seedqr_to_mnemonic(raw, wordlist), fmt
        if fmt is MnemonicQRFormat.PLAINTEXT:
            mnemonic = raw.split(b"\0", 1)[0].decode("ascii")
            validate_mnemonic(mnemonic, wordlist)
            return mnemonic, fmt
    except MnemonicQRError as exc:
        raise MnemonicQRError(str(exc), fmt) from None
    raise MnemonicQRError("unrecognised mnemonic QR format", fmt)


def format_name(fmt: Optional[MnemonicQRFormat]) -> str:
    """Human-readable name of a format."""
    return _FORMAT_NAMES.get(fmt, "Unknown")