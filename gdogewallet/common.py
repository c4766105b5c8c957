"""Wallet-wide constants and formatting helpers for amounts, hash rates and hosts."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

CURRENCY_TICKER = "GDOGE"
MAXIMUM_UNSYNCED_BLOCKS_WHEN_SEND_AVAILABLE = 5
COIN = 10_000_000_000_000
CONFIRMATIONS = 3
NUMBER_OF_DECIMAL_PLACES = 13
DEFAULT_MIXIN_VALUE = 6
MAX_MIXIN_VALUE = 1000
CRITICAL_MIXIN_BOUND = 3
NORMAL_MIXIN_BOUND = 6
RPC_DEFAULT_PORT = 4042

DIFFICULTY_TARGET = 20  # seconds
CRYPTONOTE_LOCKED_TX_ALLOWED_DELTA_BLOCKS = 1
CRYPTONOTE_LOCKED_TX_ALLOWED_DELTA_SECONDS = (
    DIFFICULTY_TARGET * CRYPTONOTE_LOCKED_TX_ALLOWED_DELTA_BLOCKS
)
CRYPTONOTE_MAX_BLOCK_NUMBER = 550_000_000

RATE_PREFIXES = ("", "k", "M", "G", "T", "P", "E", "Z", "Y", "D")

_MAX_UNSIGNED = 2**64 - 1

_IP_RE = re.compile(
    r"(([0-9]|[1-9][0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])\.){3}"
    r"([0-9]|[1-9][0-9]|1[0-9]{2}|2[0-4][0-9]|25[0-5])"
)
_HOST_NAME_RE = re.compile(
    r"(([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]*[a-zA-Z0-9])\.)*"
    r"([A-Za-z0-9]|[A-Za-z0-9][A-Za-z0-9\-]*[A-Za-z0-9])"
)


def is_transaction_spend_time_unlocked(
    unlock_time: int, block_index: int, block_timestamp_median: int
) -> bool:
    """Tell whether an output with ``unlock_time`` may be spent now.

    Values below the maximum block number are block indices, larger ones are
    timestamps compared with the median block timestamp.
    """
    if unlock_time < CRYPTONOTE_MAX_BLOCK_NUMBER:
        return block_index + CRYPTONOTE_LOCKED_TX_ALLOWED_DELTA_BLOCKS >= unlock_time
    return block_timestamp_median + CRYPTONOTE_LOCKED_TX_ALLOWED_DELTA_SECONDS >= unlock_time


def format_unsigned_amount(amount: int, trim: bool = True) -> str:
    """Format atomic units as a coin amount with thousands separators.

    With ``trim`` trailing zeros of the fraction are dropped, keeping at
    least two decimal places.
    """
    if not 0 <= amount <= _MAX_UNSIGNED:
        raise ValueError(f"amount out of unsigned 64-bit range: {amount}")
    digits = str(amount).rjust(NUMBER_OF_DECIMAL_PLACES + 1, "0")
    integer_part = digits[:-NUMBER_OF_DECIMAL_PLACES]
    fraction = digits[-NUMBER_OF_DECIMAL_PLACES:]
    if trim:
        fraction = fraction.rstrip("0").ljust(2, "0")
    return f"{int(integer_part):,}.{fraction}"


def format_amount(amount: int) -> str:
    """Format a signed amount of atomic units."""
    result = format_unsigned_amount(abs(amount))
    return "-" + result if amount < 0 else result


def format_hash_rate(hash_rate: int) -> str:
    """Format a hash rate with a metric prefix, e.g. ``1.500 kH/s``."""
    if hash_rate < 0:
        raise ValueError(f"hash rate must not be negative: {hash_rate}")
    int_part = hash_rate
    decimal_part = 0
    index = 0
    while hash_rate >= 1000 and index < len(RATE_PREFIXES) - 1:
        index += 1
        int_part, decimal_part = divmod(hash_rate, 1000)
        hash_rate //= 1000
    prefix = RATE_PREFIXES[index]
    if decimal_part > 0:
        return f"{int_part}.{decimal_part:03d} {prefix}H/s"
    return f"{int_part} {prefix}H/s"


def convert_amount_from_human_readable(amount: float) -> int:
    """Convert a coin amount to atomic units, rounding to the nearest unit."""
    return int(amount * COIN + 0.5)


def is_ip_or_host_name(string: str) -> bool:
    """Tell whether ``string`` is a dotted IPv4 address or a host name."""
    return bool(string) and (
        _IP_RE.fullmatch(string) is not None or _HOST_NAME_RE.fullmatch(string) is not None
    )


def rpc_url_to_string(url: str) -> str:
    """Render an RPC URL as ``host:port``; a missing port shows as ``-1``."""
    parts = urlsplit(url)
    port = parts.port if parts.port is not None else -1
    return f"{parts.hostname or ''}:{port}"