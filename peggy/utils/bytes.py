"""
peggy.utils.bytes
=================

Small byte helpers shared by the address and denomination codecs:

- Hex helpers: to_hex/from_hex, 0x-prefix management, strict hex checks
- Length guards: expect_len
- Bytes-like normalization: b(), is_byteslike()
- Lexicographic comparison of byte strings

Examples
--------
>>> to_hex(b"\\x01\\x02")
'0x0102'
>>> from_hex('0xdeadbeef')
b'\\xde\\xad\\xbe\\xef'
>>> compare_bytes(b"\\x01", b"\\x02")
-1
"""

from __future__ import annotations

import string
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_DIGITS = frozenset(string.hexdigits)


# -----------------------
# Basic bytes/hex helpers
# -----------------------

def is_byteslike(x: object) -> bool:
    return isinstance(x, (bytes, bytearray, memoryview))


def has0x(s: str) -> bool:
    return len(s) >= 2 and s[0] == "0" and s[1] in "xX"


def strip0x(s: str) -> str:
    return s[2:] if has0x(s) else s


def is_hex(s: str) -> bool:
    """True if ``s`` is a non-empty, even-length run of hex digits (no prefix)."""
    return len(s) > 0 and len(s) % 2 == 0 and all(c in _HEX_DIGITS for c in s)


def to_hex(data: BytesLike, *, prefix: bool = True) -> str:
    """Return lowercase hex string of data."""
    if isinstance(data, memoryview):
        data = data.tobytes()
    elif isinstance(data, bytearray):
        data = bytes(data)
    if not isinstance(data, bytes):
        raise TypeError("to_hex expects bytes-like")
    h = data.hex()
    return f"0x{h}" if prefix else h


def from_hex(h: str) -> bytes:
    """Parse hex string with or without 0x prefix; ignores surrounding whitespace."""
    if not isinstance(h, str):
        raise TypeError("from_hex expects str")
    h = strip0x(h.strip())
    if len(h) % 2 == 1:  # pad leading zero if odd length
        h = "0" + h
    try:
        return bytes.fromhex(h)
    except ValueError as e:
        raise ValueError(f"invalid hex string: {e}") from e


def b(x: Union[BytesLike, str]) -> bytes:
    """
    Normalize input to bytes:
    - bytes/bytearray/memoryview → bytes
    - str → utf-8 encode (no hex interpretation)
    """
    if isinstance(x, bytes):
        return bytes(x)
    if isinstance(x, bytearray):
        return bytes(x)
    if isinstance(x, memoryview):
        return x.tobytes()
    if isinstance(x, str):
        return x.encode("utf-8")
    raise TypeError(f"unsupported type for b(): {type(x)!r}")


# ---------------------
# Length/shape guarding
# ---------------------

def expect_len(data: BytesLike, n: int, *, name: str = "bytes") -> bytes:
    """Return ``data`` as immutable bytes after validating exact length ``n``."""
    data_b = b(data)
    if len(data_b) != n:
        raise ValueError(f"{name} must be length {n}, got {len(data_b)}")
    return data_b


# ----------
# Ordering
# ----------

def compare_bytes(x: BytesLike, y: BytesLike) -> int:
    """
    Lexicographic byte comparison, returning -1, 0 or 1.

    A strict prefix sorts before any longer string that extends it.
    """
    xb, yb = b(x), b(y)
    if xb == yb:
        return 0
    return -1 if xb < yb else 1


__all__ = [
    "BytesLike",
    "is_byteslike",
    "has0x",
    "strip0x",
    "is_hex",
    "to_hex",
    "from_hex",
    "b",
    "expect_len",
    "compare_bytes",
]
