"""Checking a published version number against the running one."""

from __future__ import annotations

import re
import urllib.error
import urllib.request
from typing import Optional

VERSION_DATA_URL = ""
CHECK_INTERVAL_SECONDS = 12 * 60 * 60
DEFAULT_TIMEOUT = 30.0

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def parse_version(text: str) -> int:
    """Turn a dotted version such as ``1.2.3`` into the integer of its digits.

    Surrounding whitespace is ignored. Text that does not give a 32-bit
    integer once the dots are removed raises :class:`ValueError`.
    """
    digits = text.replace(".", "").strip()
    if not _INT_RE.fullmatch(digits):
        raise ValueError(f"not a version number: {text!r}")
    value = int(digits)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"version number out of range: {text!r}")
    return value


def newer_version(new_version: str, current_version: str) -> bool:
    """Tell whether ``new_version`` is later than ``current_version``.

    An unreadable ``new_version`` is never newer; an unreadable
    ``current_version`` raises :class:`ValueError`.
    """
    try:
        new = parse_version(new_version)
    except ValueError:
        return False
    return new > parse_version(current_version)


def fetch_text(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download ``url`` and return its body as text.

    An empty URL or a failed download gives an empty string.
    """
    if not url:
        return ""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as reply:
            data = reply.read()
    except (urllib.error.URLError, OSError, ValueError):
        return ""
    return data.decode("utf-8", errors="replace")


def check_for_update(
    url: str = VERSION_DATA_URL,
    current_version: str = "0",
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[str]:
    """Return the published version when it is newer than ``current_version``, else ``None``."""
    published = fetch_text(url, timeout)
    if newer_version(published, current_version):
        return published.strip()
    return None