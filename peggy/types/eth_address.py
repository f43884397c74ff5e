from __future__ import annotations

"""
peggy.types.eth_address
=======================

Ethereum contract addresses as seen from the native chain.

- **Raw form**: exactly 20 bytes; this is what gets embedded in a peggy denom.
- **Hex form**: ``0x`` + 40 hex characters. Input is case-insensitive and the
  checksum casing is *not* enforced (any casing of a valid address is
  accepted). Output is always the EIP-55 mixed-case checksum rendering, which
  is the foreign chain's canonical form.

Ordering
--------
`compare_addresses` / `eth_addr_less_than` give a strict lexicographic order
over address-like byte strings, for deterministic sorting of bridged tokens.
Strings are compared by their UTF-8 bytes (so two hex renderings are compared
textually), `EthAddress` values by their raw 20 bytes. No numeric ordering is
implied beyond that.
"""

from dataclasses import dataclass
from typing import Union

from peggy.config import ETH_CONTRACT_ADDRESS_LEN
from peggy.errors import EmptyAddress, MalformedAddress
from peggy.utils.bytes import BytesLike, compare_bytes, expect_len, has0x, is_hex, to_hex
from peggy.utils.hash import keccak256

ADDRESS_LEN = ETH_CONTRACT_ADDRESS_LEN
HEX_ADDRESS_LEN = 2 + 2 * ADDRESS_LEN  # "0x" + 40 hex chars


# ---- syntax ----

def is_hex_address(s: str) -> bool:
    """True if `s` is ``0x``/``0X`` followed by exactly 40 hex characters."""
    if not isinstance(s, str) or not has0x(s):
        return False
    body = s[2:]
    return len(body) == 2 * ADDRESS_LEN and is_hex(body)


def validate_eth_address(address: str) -> None:
    """
    Validate an Ethereum address string.

    Raises EmptyAddress for ``""`` and MalformedAddress for anything else that
    is not ``0x`` + 40 hex characters.
    """
    if address == "":
        raise EmptyAddress()
    if not is_hex_address(address):
        raise MalformedAddress(str(address))


def checksum_encode(raw: bytes) -> str:
    """EIP-55 rendering of 20 raw address bytes."""
    lower = to_hex(raw, prefix=False)
    digest = keccak256(lower.encode("ascii")).hex()
    out = [
        c.upper() if c.isalpha() and int(digest[i], 16) >= 8 else c
        for i, c in enumerate(lower)
    ]
    return "0x" + "".join(out)


def to_checksum_address(address: str) -> str:
    """Validate `address` and return its EIP-55 form."""
    return EthAddress.from_hex(address).hex()


# ---- value type ----

@dataclass(frozen=True, order=True)
class EthAddress:
    """A 20-byte foreign contract address. Ordered by raw bytes."""

    raw: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", expect_len(self.raw, ADDRESS_LEN, name="EthAddress.raw"))

    @classmethod
    def from_hex(cls, address: str) -> "EthAddress":
        validate_eth_address(address)
        return cls(bytes.fromhex(address[2:]))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "EthAddress":
        return cls(bytes(data))

    def hex(self) -> str:
        """EIP-55 checksum hex, e.g. ``0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed``."""
        return checksum_encode(self.raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return self.hex()


# ---- ordering ----

AddressLike = Union[EthAddress, str, bytes, bytearray, memoryview]


def _ordering_bytes(x: AddressLike) -> bytes:
    if isinstance(x, EthAddress):
        return x.raw
    if isinstance(x, str):
        return x.encode("utf-8")
    if isinstance(x, (bytes, bytearray, memoryview)):
        return bytes(x)
    raise TypeError(f"cannot order {type(x).__name__} as an address")


def compare_addresses(a: AddressLike, b: AddressLike) -> int:
    """Lexicographic byte comparison: -1 if a < b, 0 if equal, 1 if a > b."""
    return compare_bytes(_ordering_bytes(a), _ordering_bytes(b))


def eth_addr_less_than(a: AddressLike, b: AddressLike) -> bool:
    return compare_addresses(a, b) < 0


__all__ = [
    "ADDRESS_LEN",
    "HEX_ADDRESS_LEN",
    "is_hex_address",
    "validate_eth_address",
    "checksum_encode",
    "to_checksum_address",
    "EthAddress",
    "AddressLike",
    "compare_addresses",
    "eth_addr_less_than",
]
