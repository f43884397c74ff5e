# SPDX-License-Identifier: Apache-2.0
"""
Denomination codec: storage (bytes) and display (string) forms, their
rejection paths, and the best-effort display rendering.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from peggy import denom as denom_mod
from peggy.config import DenomConfig
from peggy.denom import (
    DEFAULT_CODEC,
    PEGGY_DENOM_LEN,
    DenomCodec,
    PeggyDenom,
    decode_denom_bytes,
    decode_denom_string,
    denom_string,
    encode_denom,
)
from peggy.errors import (
    BadAddressLength,
    DenomError,
    EmptyAddress,
    MalformedAddress,
    PrefixMismatch,
)
from peggy.tests import EIP55_VECTORS, TOKEN_A
from peggy.types.eth_address import EthAddress

addresses = st.binary(min_size=20, max_size=20).map(EthAddress)


@st.composite
def hex_addresses(draw) -> str:
    """Valid hex addresses in arbitrary letter casing."""
    raw = draw(st.binary(min_size=20, max_size=20)).hex()
    upper = draw(st.lists(st.booleans(), min_size=40, max_size=40))
    prefix = draw(st.sampled_from(["0x", "0X"]))
    return prefix + "".join(c.upper() if u else c for c, u in zip(raw, upper))


# ---------------------------------------------------------------------------
# Storage form
# ---------------------------------------------------------------------------


def test_default_layout():
    addr = EthAddress.from_hex(TOKEN_A)
    d = encode_denom(addr)
    assert isinstance(d, PeggyDenom)
    assert bytes(d) == b"peggy" + addr.raw
    assert len(d) == PEGGY_DENOM_LEN == 25


@given(addresses)
def test_bytes_roundtrip(addr):
    assert decode_denom_bytes(encode_denom(addr)) == addr


def test_encode_accepts_raw_bytes():
    raw = bytes(range(20))
    assert encode_denom(raw) == encode_denom(EthAddress(raw))


@pytest.mark.parametrize("data", [b"", b"peg", b"pegg", b"xeggy" + b"\x00" * 20, b"PEGGY" + b"\x00" * 20])
def test_decode_bytes_prefix_mismatch(data):
    with pytest.raises(PrefixMismatch) as ei:
        decode_denom_bytes(data)
    assert "byte prefix not equal to expected" in str(ei.value)
    assert ei.value.data["expected"] == b"peggy".hex()


@pytest.mark.parametrize("n", [0, 1, 19, 21, 40])
def test_decode_bytes_bad_length(n):
    with pytest.raises(BadAddressLength) as ei:
        decode_denom_bytes(b"peggy" + b"\xab" * n)
    assert ei.value.data["length"] == n
    assert ei.value.data["expected"] == 20


def test_token_contract_method_is_strict():
    good = encode_denom(EthAddress.from_hex(TOKEN_A))
    assert good.token_contract() == EthAddress.from_hex(TOKEN_A)
    with pytest.raises(BadAddressLength):
        PeggyDenom(b"peggy" + b"\x01" * 19).token_contract()


# ---------------------------------------------------------------------------
# Display form
# ---------------------------------------------------------------------------


def test_denom_string_uses_checksum_hex():
    addr = EthAddress.from_hex(TOKEN_A.lower())
    assert denom_string(addr) == "peggy" + TOKEN_A


@pytest.mark.parametrize("vector", EIP55_VECTORS)
def test_decode_string_normalizes_casing(vector):
    for form in (vector, vector.lower(), "0x" + vector[2:].upper()):
        d = decode_denom_string("peggy" + form)
        assert isinstance(d, PeggyDenom)
        assert bytes(d) == b"peggy" + bytes.fromhex(vector[2:])
        assert str(d) == "peggy" + vector


@given(hex_addresses())
def test_string_roundtrip_yields_checksum_case(s):
    d = decode_denom_string("peggy" + s)
    assert str(d) == "peggy" + EthAddress.from_hex(s).hex()
    assert decode_denom_bytes(d) == EthAddress.from_hex(s)


@pytest.mark.parametrize("bad", ["", "pegg", "PEGGY" + TOKEN_A, TOKEN_A, "ibc/" + TOKEN_A])
def test_decode_string_prefix_mismatch(bad):
    with pytest.raises(PrefixMismatch) as ei:
        decode_denom_string(bad)
    assert "string prefix not equal to expected 'peggy'" in str(ei.value)


def test_decode_string_empty_suffix():
    with pytest.raises(EmptyAddress):
        decode_denom_string("peggy")


@pytest.mark.parametrize("suffix", ["0x1234", "zz", TOKEN_A[2:], TOKEN_A + "00"])
def test_decode_string_malformed_suffix(suffix):
    with pytest.raises(MalformedAddress):
        decode_denom_string("peggy" + suffix)


@given(addresses)
def test_both_forms_decode_to_same_address(addr):
    from_bytes = decode_denom_bytes(encode_denom(addr))
    from_string = decode_denom_bytes(decode_denom_string(denom_string(addr)))
    assert from_bytes == from_string == addr


# ---------------------------------------------------------------------------
# Best-effort display
# ---------------------------------------------------------------------------


def test_str_never_raises_on_bad_prefix(caplog):
    d = PeggyDenom(b"nope" + b"\x00" * 21)
    with caplog.at_level(logging.WARNING, logger="peggy.denom"):
        s = str(d)
    assert s.startswith(bytes(d).hex() + "(error: ")
    assert "prefix not equal to expected" in s
    assert any("unparseable peggy denom" in r.getMessage() for r in caplog.records)


def test_str_never_raises_on_bad_length():
    d = PeggyDenom(b"peggy" + b"\x01" * 3)
    s = str(d)
    assert s == f"{bytes(d).hex()}(error: failed to validate Ethereum address bytes: 010101)"
    # formatting paths go through __str__ as well
    assert f"{d}" == s


def test_strict_path_still_raises_for_same_bytes():
    d = PeggyDenom(b"peggy" + b"\x01" * 3)
    with pytest.raises(DenomError):
        d.token_contract()


# ---------------------------------------------------------------------------
# Injected naming convention
# ---------------------------------------------------------------------------


def test_alternate_prefix_and_separator():
    codec = DenomCodec(DenomConfig(prefix="gravity", separator="/"))
    addr = EthAddress.from_hex(TOKEN_A)

    d = codec.encode_denom(addr)
    assert bytes(d) == b"gravity/" + addr.raw
    assert codec.denom_len == len(d) == 28
    assert codec.decode_denom_bytes(d) == addr
    assert codec.denom_string(addr) == "gravity/" + TOKEN_A
    assert str(d) == "gravity/" + TOKEN_A
    assert codec.decode_denom_string("gravity/" + TOKEN_A.lower()) == d

    # the default codec does not understand it
    with pytest.raises(PrefixMismatch):
        DEFAULT_CODEC.decode_denom_bytes(d)
    with pytest.raises(PrefixMismatch):
        codec.decode_denom_string("peggy" + TOKEN_A)


def test_separator_must_be_present():
    codec = DenomCodec(DenomConfig(prefix="peggy", separator="/"))
    with pytest.raises(PrefixMismatch):
        codec.decode_denom_bytes(b"peggy" + b"\x00" * 21)


def test_module_functions_bound_to_default_codec():
    assert denom_mod.DEFAULT_CODEC.config == DenomConfig()
    addr = EthAddress.from_hex(TOKEN_A)
    assert denom_mod.new_peggy_denom(addr) == DEFAULT_CODEC.encode_denom(addr)
    assert denom_mod.peggy_denom_string(addr) == DEFAULT_CODEC.denom_string(addr)
    assert denom_mod.token_contract(denom_mod.new_peggy_denom(addr)) == addr
    assert denom_mod.new_peggy_denom_from_string("peggy" + TOKEN_A) == denom_mod.new_peggy_denom(addr)
