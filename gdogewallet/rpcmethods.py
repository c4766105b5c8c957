"""Request and response structures of the wallet daemon JSON-RPC methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, List, Mapping, Optional

from gdogewallet.rpctypes import (
    DEFAULT_CONFIRMATIONS,
    MAX_HEIGHT,
    Block,
    JsonObject,
    Output,
    Transaction,
    Transfer,
    _dump,
    _encode_struct,
    _list_of,
    _load,
    _plain,
    _struct,
    _to_bool,
    _to_int,
    _to_str,
    _to_str_list,
    _to_timestamp,
)

DEFAULT_HEIGHT_OR_DEPTH = -DEFAULT_CONFIRMATIONS - 1

GET_STATUS = "get_status"
GET_ADDRESSES = "get_addresses"
GET_VIEW_KEY = "get_view_key_pair"
GET_BALANCE = "get_balance"
GET_UNSPENTS = "get_unspents"
GET_TRANSFERS = "get_transfers"
CREATE_TRANSACTION = "create_transaction"
SEND_TRANSACTION = "send_transaction"
CREATE_SEND_PROOF = "create_sendproof"
CHECK_SEND_PROOF = "check_sendproof"


@dataclass
class StatusRequest:
    METHOD: ClassVar[str] = GET_STATUS

    top_block_hash: str = ""
    transaction_pool_version: int = 0
    outgoing_peer_count: int = 0
    incoming_peer_count: int = 0
    lower_level_error: str = ""

    def to_json(self) -> JsonObject:
        return _dump(self, _STATUS_REQUEST_ENCODE)


_STATUS_REQUEST_ENCODE = (
    ("top_block_hash", _plain),
    ("transaction_pool_version", _plain),
    ("outgoing_peer_count", _plain),
    ("incoming_peer_count", _plain),
    ("lower_level_error", _plain),
)


@dataclass
class Status:
    METHOD: ClassVar[str] = GET_STATUS

    top_block_hash: str = ""
    transaction_pool_version: int = 0
    outgoing_peer_count: int = 0
    incoming_peer_count: int = 0
    lower_level_error: str = "Disconnected"
    top_block_height: int = 0
    top_known_block_height: int = 0
    top_block_difficulty: int = 0
    top_block_cumulative_difficulty: int = 0
    recommended_fee_per_byte: int = 0
    top_block_timestamp: Optional[datetime] = None
    top_block_timestamp_median: Optional[datetime] = None
    next_block_effective_median_size: int = 0

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Status":
        return cls(**_load(json, _STATUS_DECODE))


_STATUS_DECODE = (
    ("top_block_hash", _to_str),
    ("transaction_pool_version", _to_int),
    ("outgoing_peer_count", _to_int),
    ("incoming_peer_count", _to_int),
    ("lower_level_error", _to_str),
    ("top_block_height", _to_int),
    ("top_block_difficulty", _to_int),
    ("top_block_cumulative_difficulty", _to_int),
    ("top_block_timestamp", _to_timestamp),
    ("top_block_timestamp_median", _to_timestamp),
    ("next_block_effective_median_size", _to_int),
    ("recommended_fee_per_byte", _to_int),
    ("top_known_block_height", _to_int),
)


@dataclass
class Addresses:
    METHOD: ClassVar[str] = GET_ADDRESSES

    addresses: List[str] = field(default_factory=list)
    view_only: bool = False

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Addresses":
        return cls(**_load(json, (("addresses", _to_str_list), ("view_only", _to_bool))))


@dataclass
class ViewKey:
    METHOD: ClassVar[str] = GET_VIEW_KEY

    secret_view_key: str = ""
    public_view_key: str = ""

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "ViewKey":
        return cls(
            **_load(json, (("secret_view_key", _to_str), ("public_view_key", _to_str)))
        )


@dataclass
class BalanceRequest:
    METHOD: ClassVar[str] = GET_BALANCE

    address: str = ""
    height_or_depth: int = DEFAULT_HEIGHT_OR_DEPTH

    def to_json(self) -> JsonObject:
        return _dump(self, (("address", _plain), ("height_or_depth", _plain)))


@dataclass
class Balance:
    METHOD: ClassVar[str] = GET_BALANCE

    spendable: int = 0
    spendable_dust: int = 0
    locked_or_unconfirmed: int = 0
    spendable_outputs: int = 0
    spendable_dust_outputs: int = 0
    locked_or_unconfirmed_outputs: int = 0

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Balance":
        return cls(**_load(json, _BALANCE_DECODE))


_BALANCE_DECODE = (
    ("spendable", _to_int),
    ("spendable_dust", _to_int),
    ("locked_or_unconfirmed", _to_int),
    ("spendable_outputs", _to_int),
    ("spendable_dust_outputs", _to_int),
    ("locked_or_unconfirmed_outputs", _to_int),
)


@dataclass
class UnspentsRequest:
    METHOD: ClassVar[str] = GET_UNSPENTS

    address: str = ""
    height_or_depth: int = DEFAULT_HEIGHT_OR_DEPTH


@dataclass
class Unspents:
    METHOD: ClassVar[str] = GET_UNSPENTS

    unspents: List[Output] = field(default_factory=list)
    unspendable_unspents: List[Output] = field(default_factory=list)


@dataclass
class TransfersRequest:
    METHOD: ClassVar[str] = GET_TRANSFERS

    address: str = ""
    from_height: int = 0
    to_height: int = MAX_HEIGHT
    forward: bool = False
    desired_transactions_count: int = 50

    def to_json(self) -> JsonObject:
        return _dump(self, _TRANSFERS_REQUEST_ENCODE)


_TRANSFERS_REQUEST_ENCODE = (
    ("address", _plain),
    ("from_height", _plain),
    ("to_height", _plain),
    ("forward", _plain),
    ("desired_transactions_count", _plain),
)


@dataclass
class Transfers:
    METHOD: ClassVar[str] = GET_TRANSFERS

    blocks: List[Block] = field(default_factory=list)
    unlocked_transfers: List[Transfer] = field(default_factory=list)
    next_from_height: int = 0
    next_to_height: int = 0

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Transfers":
        return cls(**_load(json, _TRANSFERS_DECODE))


_TRANSFERS_DECODE = (
    ("blocks", _list_of(Block)),
    ("unlocked_transfers", _list_of(Transfer)),
    ("next_from_height", _to_int),
    ("next_to_height", _to_int),
)


@dataclass
class CreateTransactionRequest:
    METHOD: ClassVar[str] = CREATE_TRANSACTION

    transaction: Transaction = field(default_factory=Transaction)
    spend_addresses: List[str] = field(default_factory=list)
    any_spend_address: bool = False
    change_address: str = ""
    confirmed_height_or_depth: int = DEFAULT_HEIGHT_OR_DEPTH
    fee_per_byte: int = 0
    optimization: str = ""
    save_history: bool = True
    prevent_conflict_with_transactions: List[str] = field(default_factory=list)

    def to_json(self) -> JsonObject:
        return _dump(self, _CREATE_TRANSACTION_ENCODE)


_CREATE_TRANSACTION_ENCODE = (
    ("transaction", _encode_struct),
    ("spend_addresses", _plain),
    ("any_spend_address", _plain),
    ("change_address", _plain),
    ("confirmed_height_or_depth", _plain),
    ("fee_per_byte", _plain),
    ("optimization", _plain),
    ("save_history", _plain),
)


@dataclass
class CreatedTransaction:
    METHOD: ClassVar[str] = CREATE_TRANSACTION

    binary_transaction: str = ""
    transaction: Transaction = field(default_factory=Transaction)
    save_history_error: bool = False
    transactions_required: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "CreatedTransaction":
        return cls(**_load(json, _CREATED_TRANSACTION_DECODE))


_CREATED_TRANSACTION_DECODE = (
    ("binary_transaction", _to_str),
    ("save_history_error", _to_bool),
    ("transaction", _struct(Transaction)),
)


@dataclass
class SendTransactionRequest:
    METHOD: ClassVar[str] = SEND_TRANSACTION

    binary_transaction: str = ""

    def to_json(self) -> JsonObject:
        return _dump(self, (("binary_transaction", _plain),))


@dataclass
class SentTransaction:
    METHOD: ClassVar[str] = SEND_TRANSACTION

    send_result: str = ""

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "SentTransaction":
        return cls(**_load(json, (("send_result", _to_str),)))


@dataclass
class CreateSendProofRequest:
    METHOD: ClassVar[str] = CREATE_SEND_PROOF

    transaction_hash: str = ""
    message: str = ""
    addresses: List[str] = field(default_factory=list)

    def to_json(self) -> JsonObject:
        return _dump(
            self,
            (("transaction_hash", _plain), ("message", _plain), ("addresses", _plain)),
        )


@dataclass
class Proofs:
    METHOD: ClassVar[str] = CREATE_SEND_PROOF

    sendproofs: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "Proofs":
        return cls(**_load(json, (("sendproofs", _to_str_list),)))


@dataclass
class CheckSendProofRequest:
    METHOD: ClassVar[str] = CHECK_SEND_PROOF

    sendproof: str = ""

    def to_json(self) -> JsonObject:
        return _dump(self, (("sendproof", _plain),))


@dataclass
class ProofCheck:
    METHOD: ClassVar[str] = CHECK_SEND_PROOF

    validation_error: str = ""

    @classmethod
    def from_json(cls, json: Mapping[str, Any]) -> "ProofCheck":
        return cls(**_load(json, (("validation_error", _to_str),)))