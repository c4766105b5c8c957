"""Send proofs: extracting their details, describing check results and collecting generated proofs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from gdogewallet.common import CURRENCY_TICKER, format_amount
from gdogewallet.rpcmethods import CreateSendProofRequest
from gdogewallet.rpctypes import Proof

ADDRESS_KEY = "address"

NOT_AN_OBJECT = "JSON document is not an object."
NO_ADDRESS = "The proof does not contain any address."
NO_PROOFS = "No proofs were generated."
PROOF_CORRECT = "The proof is correct!"
UNCHECKED = "Unchecked"


class ProofError(ValueError):
    """A send proof could not be parsed or used."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON value: {name}")


def _load_object(text: str) -> Dict[str, Any]:
    # Proof text is read as Latin-1; characters outside it become '?'.
    raw = text.encode("latin-1", errors="replace").decode("utf-8", errors="replace")
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as error:
        raise ProofError(error.msg) from error
    except ValueError as error:
        raise ProofError(str(error)) from error
    if not isinstance(document, dict):
        raise ProofError(NOT_AN_OBJECT)
    return document


def extract_address(proof: str) -> str:
    """Return the address a proof is made for.

    A value that is not a string gives an empty address.
    """
    document = _load_object(proof)
    if ADDRESS_KEY not in document:
        raise ProofError(NO_ADDRESS)
    value = document[ADDRESS_KEY]
    return value if isinstance(value, str) else ""


def parse_proof(text: str) -> Proof:
    """Parse the JSON text of a send proof."""
    return Proof.from_json(_load_object(text))


def describe_proof(proof: Proof) -> Dict[str, str]:
    """The fields of a proof as they are shown to the user."""
    return {
        "message": proof.message,
        "amount": f"{format_amount(proof.amount)} {CURRENCY_TICKER}",
        "address": proof.address,
        "transaction_hash": proof.transaction_hash,
    }


def _colored(text: str, color: str) -> str:
    return f"<b><font color='{color}'>{text}</font></b>"


def describe_check_result(result: str) -> str:
    """Render the daemon's validation error, or success when it is empty, as rich text."""
    if not result:
        return _colored(PROOF_CORRECT, "green")
    return _colored(result, "red")


@dataclass(frozen=True)
class _Entry:
    address: str
    proof: str


class ProofSet:
    """The proofs generated for one transaction, one per recipient address."""

    def __init__(self, tx_hash: str) -> None:
        self.tx_hash = tx_hash
        self._entries: List[_Entry] = []
        self.errors: List[str] = []

    @property
    def addresses(self) -> List[str]:
        return [entry.address for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def add_proofs(self, proofs: Iterable[str]) -> List[str]:
        """Replace the held proofs with ``proofs`` and return their addresses.

        Proofs without a usable address are skipped and their errors kept in
        ``errors``. An empty list of proofs raises :class:`ProofError`.
        """
        self._entries = []
        self.errors = []
        proofs = list(proofs)
        if not proofs:
            raise ProofError(NO_PROOFS)
        for proof in proofs:
            try:
                address = extract_address(proof)
            except ProofError as error:
                self.errors.append(str(error))
                continue
            if address:
                self._entries.append(_Entry(address, proof))
        return self.addresses

    def proof_for(self, index: int) -> str:
        """The proof shown for the address at position ``index``."""
        return self._entries[index].proof

    def generate_request(self, message: str, addresses: Iterable[str] = ()) -> CreateSendProofRequest:
        """Build the request asking the daemon for proofs of this transaction."""
        return CreateSendProofRequest(
            transaction_hash=self.tx_hash, message=message, addresses=list(addresses)
        )

    def items(self) -> List[Tuple[str, str]]:
        """Pairs of address and proof in display order."""
        return [(entry.address, entry.proof) for entry in self._entries]