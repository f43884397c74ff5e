from __future__ import annotations

"""
peggy.types.coin
================

The native chain's coin: a ``(denom, amount)`` pair. Only the parts the
bridge relies on are modelled here:

- denom grammar: ``[a-zA-Z][a-zA-Z0-9/:._-]{2,127}``
- amounts are arbitrary-precision ints bounded by the chain's 256-bit Int
- `is_valid` / `is_positive` predicates, never raising
"""

import re
from dataclasses import dataclass

DENOM_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")

# The native chain's Int type is capped at 256 bits.
MAX_INT_BITS = 256


def is_valid_denom(denom: str) -> bool:
    return isinstance(denom, str) and DENOM_RE.fullmatch(denom) is not None


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: int

    def is_valid(self) -> bool:
        """Denom is well-formed and amount is a representable, non-negative int."""
        if not is_valid_denom(self.denom):
            return False
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            return False
        return self.amount >= 0 and self.amount.bit_length() <= MAX_INT_BITS

    def is_positive(self) -> bool:
        return isinstance(self.amount, int) and self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


__all__ = ["DENOM_RE", "MAX_INT_BITS", "is_valid_denom", "Coin"]
