"""Preparing outgoing transactions and confirming them before they are sent."""

from __future__ import annotations

from typing import Union

from gdogewallet.common import CONFIRMATIONS, CURRENCY_TICKER, format_amount
from gdogewallet.rpcmethods import CreatedTransaction, CreateTransactionRequest
from gdogewallet.rpctypes import Transaction

SEND_CONFIRMATION_TITLE = "Confirm send coins"
SEND_CONFIRMATION_DELAY = 5
YES_LABEL = "Yes"

SENT = "sent"
RECEIVED = "received"
_PACKET_PREFIXES = {SENT: "--> ", RECEIVED: "<-- "}


def build_create_request(
    transaction: Transaction, fee: int, change_address: str
) -> CreateTransactionRequest:
    """Build the request that asks the daemon to create ``transaction``.

    Any address of the wallet may be spent from, change goes to
    ``change_address`` and only confirmed outputs are used.
    """
    return CreateTransactionRequest(
        transaction=transaction,
        any_spend_address=True,
        change_address=change_address,
        confirmed_height_or_depth=-CONFIRMATIONS - 1,
        fee_per_byte=fee,
        save_history=True,
    )


def build_send_message(created_tx: CreatedTransaction) -> str:
    """The question shown before a created transaction is sent.

    Lists every transfer to someone else, the fee, and the total leaving
    the wallet (the negated sum of the wallet's own transfers).
    """
    lines = ["Are you sure you want to send:\n"]
    our_amount = 0
    for transfer in created_tx.transaction.transfers:
        if transfer.ours:
            our_amount += transfer.amount
            continue
        lines.append(
            f"{format_amount(transfer.amount)} {CURRENCY_TICKER} to {transfer.address}\n"
        )
    lines.append(f"Fee: {format_amount(created_tx.transaction.fee)} {CURRENCY_TICKER}\n")
    lines.append(f"Total send: {format_amount(-our_amount)} {CURRENCY_TICKER}")
    return "".join(lines)


def balance_for_clipboard(balance_text: str) -> str:
    """A displayed balance with its thousands separators removed."""
    return balance_text.replace(",", "")


def format_packet(direction: str, data: Union[bytes, str]) -> str:
    """Render an RPC packet for the log: ``--> `` for sent, ``<-- `` for received."""
    try:
        prefix = _PACKET_PREFIXES[direction]
    except KeyError:
        raise ValueError(f"unknown packet direction: {direction!r}") from None
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    return f"{prefix}{text}\n"


class Countdown:
    """Delay before the confirmation's Yes button becomes available."""

    def __init__(self, seconds: int = SEND_CONFIRMATION_DELAY) -> None:
        self.seconds = seconds

    @property
    def running(self) -> bool:
        return self.seconds > 0

    def tick(self) -> bool:
        """Count one second down; return whether the countdown is still running."""
        if self.running:
            self.seconds -= 1
        return self.running

    def yes_enabled(self) -> bool:
        return not self.running

    def yes_label(self) -> str:
        if self.running:
            return f"{YES_LABEL} ({self.seconds})"
        return YES_LABEL