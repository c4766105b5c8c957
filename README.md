# gdogewallet

Building blocks for a GoldenDoge wallet client that talks to a `walletd`
daemon over JSON-RPC. The package provides the logic that sits under a wallet
user interface. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `gdogewallet.common`: wallet constants such as `COIN`, `CONFIRMATIONS`,
  `CURRENCY_TICKER` and `RPC_DEFAULT_PORT`, plus these helpers:
  - `format_amount` and `format_unsigned_amount` format atomic units with 13
    decimal places and thousands separators. Trailing zeros are trimmed to at
    least two decimals.
  - `format_hash_rate` formats a hash rate with a metric prefix.
  - `convert_amount_from_human_readable` converts a coin amount to atomic
    units.
  - `is_transaction_spend_time_unlocked` decides whether an unlock time, read
    as a block index or a timestamp, has passed.
  - `is_ip_or_host_name` validates dotted IPv4 addresses and host names.
  - `rpc_url_to_string` renders a URL as `host:port`.
- `gdogewallet.rpctypes`: data classes for the daemon's JSON objects. They
  are `Output`, `Transfer`, `Transaction`, `BlockHeader`, `Block` and `Proof`.
  - Each has `from_json`. Missing or unconvertible fields keep their defaults.
  - `Output`, `Transfer` and `Transaction` also have `to_json`.
- `gdogewallet.rpcmethods`: request and response classes for the walletd
  methods. Each class carries its `METHOD` name.
  - `StatusRequest` / `Status`
  - `Addresses`
  - `ViewKey`
  - `BalanceRequest` / `Balance`
  - `UnspentsRequest` / `Unspents`
  - `TransfersRequest` / `Transfers`
  - `CreateTransactionRequest` / `CreatedTransaction`
  - `SendTransactionRequest` / `SentTransaction`
  - `CreateSendProofRequest` / `Proofs`
  - `CheckSendProofRequest` / `ProofCheck`
- `gdogewallet.proofs`: functions and a class for send proofs.
  - `parse_proof` parses a send proof. `extract_address` reads its address.
    Both raise `ProofError` on bad input.
  - `describe_proof` gives the proof's fields as they are shown to the user.
  - `describe_check_result` renders a validation result as rich text.
  - `ProofSet` collects the proofs generated for one transaction, one per
    address. It also builds the `CreateSendProofRequest` that asks for them.
- `gdogewallet.keys`: functions for key files and their hex text.
  - `load_key` reads a binary key file as upper-case hex text.
  - `save_key` writes hex text back as raw bytes. Both raise `KeyFileError`
    when the file cannot be read or written.
  - `decode_key` and `encode_key` convert between hex text and bytes.
  - `is_key_text_complete` checks that the text has the 256-character length
    of a full key.
- `gdogewallet.logger`: `WalletLogger` appends timestamped records to
  `GoldenDoge-gui.log` in a log directory and echoes them to stderr.
  - Debug records are written only when it is created with `debug=True`.
  - A log file left under the old name `GoldenDogewalletgui.log` is renamed.
  - `format_record` renders a single line.
- `gdogewallet.updates`: version checks.
  - `parse_version` turns a dotted version into an integer.
  - `newer_version` compares two versions.
  - `fetch_text` downloads text. It returns an empty string on failure or for
    an empty URL.
  - `check_for_update` returns a newer published version, or `None`.
- `gdogewallet.sync`: synchronisation state.
  - `is_synchronized` tells whether the wallet has reached the known top
    block.
  - `SyncProgress` tracks the completed fraction of synchronisation.
- `gdogewallet.transactions`: sending a transaction.
  - `build_create_request` builds a `CreateTransactionRequest` that spends
    only confirmed outputs.
  - `build_send_message` writes the confirmation question for a created
    transaction.
  - `Countdown` is the delay before the Yes button is enabled.
  - `balance_for_clipboard` strips the thousands separators from a displayed
    balance.
  - `format_packet` renders a sent or received RPC packet for a log.

## Examples

```python
from gdogewallet.common import format_amount, format_hash_rate

format_amount(-12345678900000000)   # '-1,234.56789'
format_hash_rate(1234567)           # '1.234 MH/s'
```

```python
from gdogewallet.logger import WalletLogger

with WalletLogger("logs", debug=False) as log:
    log.info("[Application] Initializing...")
```

```python
from gdogewallet.proofs import ProofSet

proofs = ProofSet("ab12")
request = proofs.generate_request("thanks")
request.to_json()
# {'transaction_hash': 'ab12', 'message': 'thanks', 'addresses': []}
```

## What the package does not do

- It has no user interface and no command to run.
- It has no transport for the daemon. The classes build and read JSON
  objects, but sending them to `walletd` and starting or stopping the daemon
  is up to the caller.
- It has no viewer or buffer for daemon output.
- It does not store an address book or settings.

## Running the tests

```
pip install .[test]
pytest
```