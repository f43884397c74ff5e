"""
peggy.errors
------------

Error taxonomy for the denomination codec and the ERC20 value object.

Design goals
------------
- One root `PeggyError` with a machine-friendly `code` and optional `data`.
- Intermediate classes per failure family (address syntax, denom structure,
  validation gate, arithmetic) so callers can catch a whole family.
- Safe JSON representation (`to_dict`) suitable for logs and RPC bridges.
- Every failure here is deterministic: `retryable` is always False, a retry
  with the same input cannot succeed.

Address and denom errors are also `ValueError`s so generic callers that
only know "bad value" can still catch them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class PeggyErrorCode(str, Enum):
    # Foreign address syntax
    EMPTY_ADDRESS = "PEGGY/EMPTY_ADDRESS"
    MALFORMED_ADDRESS = "PEGGY/MALFORMED_ADDRESS"

    # Denomination structure
    PREFIX_MISMATCH = "PEGGY/PREFIX_MISMATCH"
    BAD_ADDRESS_LENGTH = "PEGGY/BAD_ADDRESS_LENGTH"

    # Validation gate on ERC20Token
    INVALID_ADDRESS = "PEGGY/INVALID_ADDRESS"
    INVALID_AMOUNT = "PEGGY/INVALID_AMOUNT"

    # Arithmetic
    MISMATCHED_CONTRACT = "PEGGY/MISMATCHED_CONTRACT"
    AMOUNT_OVERFLOW = "PEGGY/AMOUNT_OVERFLOW"

    # Environment
    CONFIG = "PEGGY/CONFIG"


@dataclass(eq=False)
class PeggyError(Exception):
    """
    Root error for the peggy package.

    Attributes
    ----------
    code: str
        Machine-stable error code (see PeggyErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data (addresses, lengths, amounts). JSON-serializable.
    retryable: bool
        Always False for this package.
    cause: Optional[BaseException]
        Wrapped original exception; not part of equality.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    retryable: bool = False
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        super().__init__(f"{_code_str(self.code)}: {self.message}")
        if self.cause is not None:
            self.__cause__ = self.cause

    def with_context(self, **ctx: Any) -> "PeggyError":
        """Return a *copy* with extra context merged into `data`."""
        err = type(self).__new__(type(self))
        err.__dict__.update(self.__dict__)
        err.args = self.args
        err.data = {**self.data, **_jsonmap(ctx)}
        return err

    def to_dict(self, include_cause: bool = False) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs/RPC bridges."""
        out: Dict[str, Any] = {
            "code": _code_str(self.code),
            "message": self.message,
            "data": _jsonmap(self.data),
            "retryable": self.retryable,
        }
        if include_cause and self.cause is not None:
            out["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return out

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Address syntax
# ---------------------------------------------------------------------------


class AddressError(PeggyError, ValueError):
    """Foreign hex-address syntax failure."""


class EmptyAddress(AddressError):
    def __init__(self) -> None:
        super().__init__(
            code=PeggyErrorCode.EMPTY_ADDRESS,
            message="empty Ethereum address",
        )


class MalformedAddress(AddressError):
    def __init__(self, address: str) -> None:
        super().__init__(
            code=PeggyErrorCode.MALFORMED_ADDRESS,
            message=f"{address} is not a valid Ethereum address",
            data={"address": address},
        )


# ---------------------------------------------------------------------------
# Denomination structure
# ---------------------------------------------------------------------------


class DenomError(PeggyError, ValueError):
    """Structural failure decoding a peggy denomination."""


class PrefixMismatch(DenomError):
    def __init__(self, denom: str, expected: str, *, form: str = "byte") -> None:
        super().__init__(
            code=PeggyErrorCode.PREFIX_MISMATCH,
            message=f"denom '{denom}' {form} prefix not equal to expected '{expected}'",
            data={"denom": denom, "expected": expected, "form": form},
        )


class BadAddressLength(DenomError):
    def __init__(self, address_bytes: bytes, expected: int) -> None:
        super().__init__(
            code=PeggyErrorCode.BAD_ADDRESS_LENGTH,
            message=f"failed to validate Ethereum address bytes: {address_bytes.hex()}",
            data={
                "address": address_bytes.hex(),
                "length": len(address_bytes),
                "expected": expected,
            },
        )


# ---------------------------------------------------------------------------
# Validation gate
# ---------------------------------------------------------------------------


class TokenValidationError(PeggyError):
    """ERC20Token.validate_basic rejected the instance."""


class InvalidAddress(TokenValidationError):
    def __init__(self, contract: str, cause: Optional[BaseException] = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            code=PeggyErrorCode.INVALID_ADDRESS,
            message=f"ethereum address{detail}",
            data={"contract": contract},
            cause=cause,
        )


class InvalidAmount(TokenValidationError):
    def __init__(self, coin: str, reason: str) -> None:
        super().__init__(
            code=PeggyErrorCode.INVALID_AMOUNT,
            message=f"{coin}: invalid coins ({reason})",
            data={"coin": coin, "reason": reason},
        )


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


class TokenArithmeticError(PeggyError):
    """Combining two ERC20Token values failed; no sum took place."""


class MismatchedContract(TokenArithmeticError):
    def __init__(self, left: str, right: str) -> None:
        super().__init__(
            code=PeggyErrorCode.MISMATCHED_CONTRACT,
            message="invalid contract address",
            data={"left": left, "right": right},
        )


class AmountOverflow(TokenArithmeticError):
    def __init__(self, total: int, limit: int) -> None:
        super().__init__(
            code=PeggyErrorCode.AMOUNT_OVERFLOW,
            message="invalid amount",
            data={"sum": str(total), "limit": str(limit)},
        )


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


class ConfigError(PeggyError, ValueError):
    def __init__(self, message: str = "invalid configuration", **data: Any) -> None:
        super().__init__(
            code=PeggyErrorCode.CONFIG,
            message=message,
            data=_jsonmap(data),
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _code_str(code: Any) -> str:
    return str(code.value) if isinstance(code, Enum) else str(code)


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Keep JSON primitives; stringify the rest; hex-encode bytes.
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return v.hex()
    return str(v)


__all__ = [
    "PeggyErrorCode",
    "PeggyError",
    "AddressError",
    "EmptyAddress",
    "MalformedAddress",
    "DenomError",
    "PrefixMismatch",
    "BadAddressLength",
    "TokenValidationError",
    "InvalidAddress",
    "InvalidAmount",
    "TokenArithmeticError",
    "MismatchedContract",
    "AmountOverflow",
    "ConfigError",
]
