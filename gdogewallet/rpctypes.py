"""Wallet daemon JSON-RPC data structures: outputs, transfers, transactions, blocks and proofs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

_log = logging.getLogger(__name__)

DEFAULT_CONFIRMATIONS = 6
MAX_HEIGHT = 2**32 - 1

# Seconds-since-epoch value written for a timestamp that is not set.
INVALID_TIMESTAMP = 0xFFFFFFFF

JsonObject = Dict[str, Any]
_Decoder = Callable[[Any], Any]
_Encoder = Callable[[Any], Any]


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(round(value))
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError(f"cannot convert {type(value).__name__} to int")


def _to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(f"cannot convert {type(value).__name__} to str")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    raise TypeError(f"cannot convert {type(value).__name__} to bool")


def _to_str_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"cannot convert {type(value).__name__} to a list of strings")
    return [_to_str(item) for item in value]


def _to_timestamp(value: Any) -> datetime:
    return datetime.fromtimestamp(_to_int(value), tz=timezone.utc)


def _list_of(cls: Any) -> _Decoder:
    def decode(value: Any) -> list:
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"cannot convert {type(value).__name__} to a list")
        return [cls.from_json(item if isinstance(item, Mapping) else {}) for item in value]

    return decode


def _struct(cls: Any) -> _Decoder:
    def decode(value: Any) -> Any:
        return cls.from_json(value if isinstance(value, Mapping) else {})

    return decode


def _plain(value: Any) -> Any:
    return list(value) if isinstance(value, (list, tuple)) else value


def _encode_timestamp(value: Optional[datetime]) -> int:
    if value is None:
        return INVALID_TIMESTAMP
    return int(value.timestamp())


def _encode_list(value: Sequence[Any]) -> list:
    return [item.to_json() for item in value]


def _encode_struct(value: Any) -> JsonObject:
    return value.to_json()


def _load(json: Mapping[str, Any], specs: Sequence[Tuple[str, _Decoder]]) -> Dict[str, Any]:
    """Decode the named fields; missing or unconvertible fields are left out."""
    values: Dict[str, Any] = {}
    for name, decode in specs:
        if name not in json:
            _log.debug("[RpcApi] Field '%s' not found. Using default.", name)
            continue
        try:
            values[name] = decode(json[name])
        except (TypeError, ValueError, OverflowError, OSError):
            _log.debug("[RpcApi] Cannot convert '%s'.", name)
    return values


def _dump(obj: Any, specs: Sequence[Tuple[str, _Encoder]]) -> JsonObject:
    return {name: encode(getattr(obj, name)) for name, encode in specs}


@dataclass
class Output:
    amount: int = 0
    public_key: str = ""
    global_index: int = 0
    unlock_time: int = 0
    index_in_transaction: int = 0
    height: int = 0
    key_image: str = ""
    transaction_public_key: str = ""
    address: str = ""
    dust: bool = False

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Output":
        return cls(**_load(json, _OUTPUT_DECODE))

    def to_json(self) -> JsonObject:
        return _dump(self, _OUTPUT_ENCODE)


_OUTPUT_DECODE = (
    ("amount", _to_int),
    ("public_key", _to_str),
    ("global_index", _to_int),
    ("unlock_time", _to_int),
    ("index_in_transaction", _to_int),
    ("height", _to_int),
    ("key_image", _to_str),
    ("transaction_public_key", _to_str),
    ("address", _to_str),
    ("dust", _to_bool),
)
_OUTPUT_ENCODE = tuple((name, _plain) for name, _ in _OUTPUT_DECODE)


@dataclass
class Transfer:
    address: str = ""
    amount: int = 0
    ours: bool = True
    locked: bool = False
    outputs: List[Output] = field(default_factory=list)

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Transfer":
        return cls(**_load(json, _TRANSFER_DECODE))

    def to_json(self) -> JsonObject:
        return _dump(self, _TRANSFER_ENCODE)


_TRANSFER_DECODE = (
    ("address", _to_str),
    ("amount", _to_int),
    ("ours", _to_bool),
    ("outputs", _list_of(Output)),
)
_TRANSFER_ENCODE = (
    ("address", _plain),
    ("amount", _plain),
    ("ours", _plain),
    ("outputs", _encode_list),
)


@dataclass
class Transaction:
    unlock_time: int = 0
    transfers: List[Transfer] = field(default_factory=list)
    payment_id: str = ""
    anonymity: int = 0
    hash: str = ""
    fee: int = 0
    public_key: str = ""
    extra: str = ""
    coinbase: bool = False
    amount: int = 0
    block_height: int = 0
    block_hash: str = ""
    timestamp: Optional[datetime] = None
    binary_size: int = 0

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Transaction":
        return cls(**_load(json, _TRANSACTION_DECODE))

    def to_json(self) -> JsonObject:
        return _dump(self, _TRANSACTION_ENCODE)


_TRANSACTION_SCALARS = (
    ("unlock_time", _to_int),
    ("payment_id", _to_str),
    ("anonymity", _to_int),
    ("hash", _to_str),
    ("fee", _to_int),
    ("public_key", _to_str),
    ("extra", _to_str),
    ("coinbase", _to_bool),
    ("amount", _to_int),
    ("block_height", _to_int),
    ("block_hash", _to_str),
    ("binary_size", _to_int),
)
_TRANSACTION_DECODE = _TRANSACTION_SCALARS + (
    ("transfers", _list_of(Transfer)),
    ("timestamp", _to_timestamp),
)
_TRANSACTION_ENCODE = tuple((name, _plain) for name, _ in _TRANSACTION_SCALARS) + (
    ("transfers", _encode_list),
    ("timestamp", _encode_timestamp),
)


@dataclass
class BlockHeader:
    major_version: int = 0
    minor_version: int = 0
    timestamp: Optional[datetime] = None
    previous_block_hash: str = ""
    nonce: int = 0
    height: int = 0
    hash: str = ""
    reward: int = 0
    cumulative_difficulty: int = 0
    difficulty: int = 0
    base_reward: int = 0
    block_size: int = 0
    transactions_cumulative_size: int = 0
    already_generated_coins: int = 0
    already_generated_transactions: int = 0
    size_median: int = 0
    effective_size_median: int = 0
    timestamp_median: Optional[datetime] = None
    total_fee_amount: int = 0

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "BlockHeader":
        return cls(**_load(json, _BLOCK_HEADER_DECODE))


_BLOCK_HEADER_DECODE = (
    ("major_version", _to_int),
    ("minor_version", _to_int),
    ("timestamp", _to_timestamp),
    ("previous_block_hash", _to_str),
    ("nonce", _to_int),
    ("height", _to_int),
    ("hash", _to_str),
    ("reward", _to_int),
    ("cumulative_difficulty", _to_int),
    ("difficulty", _to_int),
    ("base_reward", _to_int),
    ("block_size", _to_int),
    ("transactions_cumulative_size", _to_int),
    ("already_generated_coins", _to_int),
    ("already_generated_transactions", _to_int),
    ("size_median", _to_int),
    ("effective_size_median", _to_int),
    ("timestamp_median", _to_timestamp),
    ("total_fee_amount", _to_int),
)


@dataclass
class Block:
    header: BlockHeader = field(default_factory=BlockHeader)
    transactions: List[Transaction] = field(default_factory=list)

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Block":
        return cls(**_load(json, _BLOCK_DECODE))


_BLOCK_DECODE = (
    ("header", _struct(BlockHeader)),
    ("transactions", _list_of(Transaction)),
)


@dataclass
class Proof:
    message: str = ""
    address: str = ""
    amount: int = 0
    transaction_hash: str = ""
    proof: str = ""

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Proof":
        return cls(**_load(json, _PROOF_DECODE))


_PROOF_DECODE = (
    ("message", _to_str),
    ("address", _to_str),
    ("amount", _to_int),
    ("transaction_hash", _to_str),
    ("proof", _to_str),
)