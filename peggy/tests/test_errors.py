# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from peggy.errors import (
    AddressError,
    AmountOverflow,
    BadAddressLength,
    DenomError,
    EmptyAddress,
    InvalidAddress,
    InvalidAmount,
    MalformedAddress,
    MismatchedContract,
    PeggyError,
    PeggyErrorCode,
    PrefixMismatch,
    TokenArithmeticError,
    TokenValidationError,
)


@pytest.mark.parametrize(
    "err, code, family",
    [
        (EmptyAddress(), PeggyErrorCode.EMPTY_ADDRESS, AddressError),
        (MalformedAddress("xyz"), PeggyErrorCode.MALFORMED_ADDRESS, AddressError),
        (PrefixMismatch("00", "7065676779"), PeggyErrorCode.PREFIX_MISMATCH, DenomError),
        (BadAddressLength(b"\x01\x02", 20), PeggyErrorCode.BAD_ADDRESS_LENGTH, DenomError),
        (InvalidAddress("xyz"), PeggyErrorCode.INVALID_ADDRESS, TokenValidationError),
        (InvalidAmount("0peggy", "amount must be positive"), PeggyErrorCode.INVALID_AMOUNT, TokenValidationError),
        (MismatchedContract("a", "b"), PeggyErrorCode.MISMATCHED_CONTRACT, TokenArithmeticError),
        (AmountOverflow(1 << 64, (1 << 64) - 1), PeggyErrorCode.AMOUNT_OVERFLOW, TokenArithmeticError),
    ],
)
def test_taxonomy(err, code, family):
    assert isinstance(err, PeggyError)
    assert isinstance(err, family)
    assert err.code == code
    assert err.retryable is False

    d = err.to_dict()
    assert d["code"] == code.value
    assert d["message"] == str(err)
    json.dumps(d)  # JSON-safe


def test_syntax_errors_are_value_errors():
    assert isinstance(EmptyAddress(), ValueError)
    assert isinstance(PrefixMismatch("", "peggy"), ValueError)
    assert not isinstance(MismatchedContract("a", "b"), ValueError)


def test_args_carry_code():
    err = MalformedAddress("xyz")
    assert err.args == ("PEGGY/MALFORMED_ADDRESS: xyz is not a valid Ethereum address",)


def test_with_context_returns_copy():
    err = BadAddressLength(b"\x01", 20)
    enriched = err.with_context(denom=b"peggy\x01")
    assert isinstance(enriched, BadAddressLength)
    assert enriched is not err
    assert enriched.data["denom"] == b"peggy\x01".hex()
    assert "denom" not in err.data
    assert str(enriched) == str(err)


def test_cause_in_dict():
    cause = EmptyAddress()
    err = InvalidAddress("", cause)
    d = err.to_dict(include_cause=True)
    assert d["cause"] == {"type": "EmptyAddress", "message": "empty Ethereum address"}
    assert "cause" not in err.to_dict()
