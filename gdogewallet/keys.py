"""Reading and writing wallet key files in their hexadecimal text form."""

from __future__ import annotations

import string
from pathlib import Path
from typing import Union

KEY_TEXT_LENGTH = 256

_HEX_DIGITS = frozenset(string.hexdigits)


class KeyFileError(OSError):
    """A key file could not be read or written."""


def decode_key(text: str) -> bytes:
    """Decode hexadecimal text to bytes, skipping characters that are not hex digits.

    With an odd number of digits the first one forms a byte on its own.
    """
    digits = "".join(ch for ch in text if ch in _HEX_DIGITS)
    if len(digits) % 2:
        digits = "0" + digits
    return bytes.fromhex(digits)


def encode_key(data: bytes) -> str:
    """Encode bytes as upper-case hexadecimal text."""
    return data.hex().upper()


def is_key_text_complete(text: str) -> bool:
    """Tell whether the entered key text has the length of a full key."""
    return len(text) == KEY_TEXT_LENGTH


def load_key(path: Union[str, Path]) -> str:
    """Read a binary key file and return it as upper-case hexadecimal text."""
    try:
        data = Path(path).read_bytes()
    except OSError as error:
        raise KeyFileError("Failed to read key from the selected file.") from error
    return encode_key(data)


def save_key(path: Union[str, Path], text: str) -> None:
    """Write hexadecimal key text to a file as raw bytes."""
    data = decode_key(text)
    try:
        Path(path).write_bytes(data)
    except OSError as error:
        raise KeyFileError("Failed to save key to the selected file.") from error