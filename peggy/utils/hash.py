"""
peggy.utils.hash
================

Keccak-256 as used by the foreign (EVM) chain. Note this is the original
Keccak padding, *not* NIST SHA3-256 (`hashlib.sha3_256`), so the digest
comes from pycryptodome.
"""

from __future__ import annotations

from Crypto.Hash import keccak as _keccak

from .bytes import BytesLike
from .bytes import b as _b


def keccak256(data: BytesLike) -> bytes:
    """Keccak-256 digest (32 bytes)."""
    h = _keccak.new(digest_bits=256)
    h.update(_b(data))
    return h.digest()


__all__ = ["keccak256"]
