import pytest

from gdogewallet.common import CONFIRMATIONS, CURRENCY_TICKER, format_amount
from gdogewallet.rpcmethods import CreatedTransaction, CreateTransactionRequest
from gdogewallet.rpctypes import Transaction, Transfer
from gdogewallet.transactions import (
    RECEIVED,
    SEND_CONFIRMATION_DELAY,
    SENT,
    Countdown,
    balance_for_clipboard,
    build_create_request,
    build_send_message,
    format_packet,
)


def _created(transfers, fee):
    return CreatedTransaction(
        binary_transaction="ab",
        transaction=Transaction(transfers=transfers, fee=fee),
    )


def test_build_create_request_fields():
    tx = Transaction(transfers=[Transfer(address="addr1", amount=10, ours=False)])
    req = build_create_request(tx, 100, "change_addr")
    assert isinstance(req, CreateTransactionRequest)
    assert req.transaction is tx
    assert req.fee_per_byte == 100
    assert req.change_address == "change_addr"
    assert req.any_spend_address is True
    assert req.save_history is True
    assert req.confirmed_height_or_depth == -CONFIRMATIONS - 1


def test_build_create_request_confirmation_depth_value():
    req = build_create_request(Transaction(), 0, "")
    assert req.confirmed_height_or_depth == -4


def test_build_create_request_json_carries_fee():
    req = build_create_request(Transaction(), 7, "change_addr")
    json = req.to_json()
    assert json["fee_per_byte"] == 7
    assert json["change_address"] == "change_addr"
    assert json["any_spend_address"] is True


def test_send_message_lists_foreign_transfers():
    transfers = [
        Transfer(address="dest1", amount=20_000_000_000_000, ours=False),
        Transfer(address="mine", amount=-25_000_000_000_000, ours=True),
    ]
    message = build_send_message(_created(transfers, 1_000_000_000))
    assert message.startswith("Are you sure you want to send:\n")
    assert f"{format_amount(20_000_000_000_000)} {CURRENCY_TICKER} to dest1\n" in message
    assert "mine" not in message
    assert f"Fee: {format_amount(1_000_000_000)} {CURRENCY_TICKER}\n" in message
    assert message.endswith(
        f"Total send: {format_amount(25_000_000_000_000)} {CURRENCY_TICKER}"
    )


def test_send_message_sums_own_transfers():
    transfers = [
        Transfer(address="a", amount=-3, ours=True),
        Transfer(address="b", amount=-4, ours=True),
    ]
    message = build_send_message(_created(transfers, 0))
    assert message.endswith(f"Total send: {format_amount(7)} {CURRENCY_TICKER}")


def test_send_message_keeps_transfer_order():
    transfers = [
        Transfer(address="first", amount=1, ours=False),
        Transfer(address="second", amount=2, ours=False),
    ]
    message = build_send_message(_created(transfers, 0))
    assert message.index("first") < message.index("second")


def test_balance_for_clipboard_removes_commas():
    assert balance_for_clipboard("1,234,567.50") == "1234567.50"
    assert balance_for_clipboard("0.00") == "0.00"


def test_format_packet_sent_and_received():
    assert format_packet(SENT, b'{"id":1}') == '--> {"id":1}\n'
    assert format_packet(RECEIVED, b"ok") == "<-- ok\n"


def test_format_packet_accepts_text():
    assert format_packet(SENT, "text") == "--> text\n"


def test_format_packet_replaces_bad_utf8():
    assert format_packet(RECEIVED, b"\xff") == "<-- \ufffd\n"


def test_format_packet_unknown_direction():
    with pytest.raises(ValueError):
        format_packet("sideways", b"x")


def test_countdown_starts_disabled():
    countdown = Countdown()
    assert countdown.seconds == SEND_CONFIRMATION_DELAY
    assert countdown.yes_enabled() is False
    assert countdown.yes_label() == f"Yes ({SEND_CONFIRMATION_DELAY})"


def test_countdown_enables_after_all_ticks():
    countdown = Countdown(3)
    assert countdown.tick() is True
    assert countdown.yes_label() == "Yes (2)"
    assert countdown.tick() is True
    assert countdown.tick() is False
    assert countdown.yes_enabled() is True
    assert countdown.yes_label() == "Yes"


def test_countdown_stops_at_zero():
    countdown = Countdown(1)
    countdown.tick()
    assert countdown.tick() is False
    assert countdown.seconds == 0


def test_countdown_zero_delay_is_enabled():
    countdown = Countdown(0)
    assert countdown.yes_enabled() is True
    assert countdown.yes_label() == "Yes"