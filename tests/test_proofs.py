import json

import pytest

from gdogewallet.common import COIN, format_amount
from gdogewallet.proofs import (
    NO_ADDRESS,
    NO_PROOFS,
    NOT_AN_OBJECT,
    ProofError,
    ProofSet,
    describe_check_result,
    describe_proof,
    extract_address,
    parse_proof,
)
from gdogewallet.rpcmethods import CreateSendProofRequest
from gdogewallet.rpctypes import Proof


def make_proof(address, amount=5, message="hello", tx_hash="abc123"):
    return json.dumps(
        {
            "address": address,
            "amount": amount,
            "message": message,
            "transaction_hash": tx_hash,
            "proof": "deadbeef",
        }
    )


def test_extract_address_returns_address():
    assert extract_address(make_proof("gd1addr")) == "gd1addr"


def test_extract_address_not_object():
    with pytest.raises(ProofError) as info:
        extract_address("[1, 2]")
    assert str(info.value) == NOT_AN_OBJECT


def test_extract_address_missing_address():
    with pytest.raises(ProofError) as info:
        extract_address('{"amount": 1}')
    assert str(info.value) == NO_ADDRESS


def test_extract_address_invalid_json():
    with pytest.raises(ProofError):
        extract_address("{not json")


def test_extract_address_non_string_value_is_empty():
    assert extract_address('{"address": 42}') == ""


def test_parse_proof_fields():
    proof = parse_proof(make_proof("gd1addr", amount=COIN, message="m", tx_hash="ff"))
    assert proof == Proof(
        message="m", address="gd1addr", amount=COIN, transaction_hash="ff", proof="deadbeef"
    )


def test_parse_proof_missing_fields_use_defaults():
    assert parse_proof("{}") == Proof()


def test_parse_proof_rejects_array():
    with pytest.raises(ProofError):
        parse_proof("[]")


def test_describe_proof():
    proof = Proof(message="m", address="a", amount=COIN, transaction_hash="h")
    described = describe_proof(proof)
    assert described["amount"] == format_amount(COIN) + " GDOGE"
    assert described["message"] == "m"
    assert described["address"] == "a"
    assert described["transaction_hash"] == "h"


def test_describe_check_result_success():
    assert describe_check_result("") == "<b><font color='green'>The proof is correct!</font></b>"


def test_describe_check_result_error():
    result = describe_check_result("bad proof")
    assert "red" in result
    assert "bad proof" in result


def test_proof_set_add_and_lookup():
    proofs = ProofSet("txhash")
    first = make_proof("addr1")
    second = make_proof("addr2")
    assert proofs.add_proofs([first, second]) == ["addr1", "addr2"]
    assert proofs.proof_for(0) == first
    assert proofs.proof_for(1) == second
    assert len(proofs) == 2


def test_proof_set_skips_invalid():
    proofs = ProofSet("txhash")
    good = make_proof("addr1")
    assert proofs.add_proofs(["garbage", '{"x": 1}', good]) == ["addr1"]
    assert proofs.proof_for(0) == good
    assert len(proofs.errors) == 2
    assert NO_ADDRESS in proofs.errors


def test_proof_set_replaces_previous():
    proofs = ProofSet("txhash")
    proofs.add_proofs([make_proof("addr1")])
    proofs.add_proofs([make_proof("addr2")])
    assert proofs.addresses == ["addr2"]


def test_proof_set_empty_raises():
    proofs = ProofSet("txhash")
    with pytest.raises(ProofError) as info:
        proofs.add_proofs([])
    assert str(info.value) == NO_PROOFS


def test_proof_set_out_of_range():
    proofs = ProofSet("txhash")
    proofs.add_proofs([make_proof("addr1")])
    with pytest.raises(IndexError):
        proofs.proof_for(1)


def test_generate_request():
    proofs = ProofSet("txhash")
    request = proofs.generate_request("note", ("a", "b"))
    assert request == CreateSendProofRequest(
        transaction_hash="txhash", message="note", addresses=["a", "b"]
    )
    assert request.to_json()["transaction_hash"] == "txhash"