from __future__ import annotations

"""
peggy.erc20
===========

`ERC20Token`: an amount of a specific bridged ERC20 token.

- **amount**: Python int. The trust boundary (the bridge's wire format)
  carries uint64 amounts, but sums are formed at arbitrary precision and
  checked before being narrowed back, so `add` never wraps.
- **contract**: hex string of the token contract. Syntactically valid input
  is canonicalized to EIP-55 form on construction, so equal contracts always
  compare equal as strings. Invalid input is kept verbatim for
  `validate_basic` to reject.

Construction performs no domain validation. Call `validate_basic()` before
trusting an instance built from untrusted input.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Union

from peggy.denom import DEFAULT_CODEC, DenomCodec
from peggy.errors import (
    AddressError,
    AmountOverflow,
    InvalidAddress,
    InvalidAmount,
    MismatchedContract,
)
from peggy.logging import get_logger
from peggy.types.coin import Coin
from peggy.types.eth_address import EthAddress, is_hex_address, validate_eth_address

log = get_logger(__name__)

MAX_UINT64 = (1 << 64) - 1

ContractLike = Union[EthAddress, str]


def _contract_hex(contract: ContractLike) -> str:
    if isinstance(contract, EthAddress):
        return contract.hex()
    return str(contract)


@dataclass(frozen=True)
class ERC20Token:
    amount: int
    contract: str

    def __post_init__(self) -> None:
        if isinstance(self.contract, EthAddress):
            object.__setattr__(self, "contract", self.contract.hex())
        elif is_hex_address(self.contract):
            object.__setattr__(self, "contract", EthAddress.from_hex(self.contract).hex())

    # ---- constructors ----

    @classmethod
    def new(cls, amount: int, contract: ContractLike) -> "ERC20Token":
        """Build from a uint64 amount."""
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError("ERC20Token.new amount must be an int")
        if not 0 <= amount <= MAX_UINT64:
            raise ValueError(f"ERC20Token.new amount must fit in uint64, got {amount}")
        return cls(amount=amount, contract=_contract_hex(contract))

    @classmethod
    def from_int(cls, amount: int, contract: ContractLike) -> "ERC20Token":
        """Build from an arbitrary-precision amount (e.g. an unchecked sum)."""
        return cls(amount=int(amount), contract=_contract_hex(contract))

    @classmethod
    def from_dict(cls, o: Mapping[str, Any]) -> "ERC20Token":
        return cls.from_int(int(str(o["amount"])), str(o["contract"]))

    # ---- views ----

    def contract_address(self) -> EthAddress:
        return EthAddress.from_hex(self.contract)

    def to_coin(self, codec: DenomCodec = DEFAULT_CODEC) -> Coin:
        """The native coin for this amount, e.g. ``Coin("peggy0x5aAe...", 12)``."""
        return Coin(denom=codec.denom_string(self.contract_address()), amount=self.amount)

    def to_dict(self) -> Dict[str, Any]:
        # amount as a decimal string: JSON consumers cannot hold 64-bit ints
        return {"amount": str(self.amount), "contract": self.contract}

    def __str__(self) -> str:
        if is_hex_address(self.contract):
            return str(self.to_coin())
        return f"{self.amount}{self.contract}"

    # ---- validation ----

    def validate_basic(self, codec: DenomCodec = DEFAULT_CODEC) -> None:
        """Stateless validation; raises InvalidAddress or InvalidAmount."""
        try:
            validate_eth_address(self.contract)
        except AddressError as e:
            raise InvalidAddress(self.contract, e) from e

        coin = self.to_coin(codec)
        if not coin.is_valid():
            raise InvalidAmount(str(coin), "invalid coin")
        if not coin.is_positive():
            raise InvalidAmount(str(coin), "amount must be positive")

    # ---- arithmetic ----

    def add(self, other: "ERC20Token") -> "ERC20Token":
        """
        Sum two amounts of the same token. Raises MismatchedContract for
        different contracts and AmountOverflow if the sum leaves uint64.
        """
        if self.contract != other.contract:
            log.debug(
                "rejecting sum of different contracts",
                extra={"left": self.contract, "right": other.contract},
            )
            raise MismatchedContract(self.contract, other.contract)

        total = self.amount + other.amount
        if not 0 <= total <= MAX_UINT64:
            log.debug("rejecting out-of-range sum", extra={"sum": str(total)})
            raise AmountOverflow(total, MAX_UINT64)

        return replace(self, amount=total)


def new_erc20_token(amount: int, contract: ContractLike) -> ERC20Token:
    return ERC20Token.new(amount, contract)


def new_erc20_token_from_int(amount: int, contract: ContractLike) -> ERC20Token:
    return ERC20Token.from_int(amount, contract)


__all__ = [
    "MAX_UINT64",
    "ERC20Token",
    "new_erc20_token",
    "new_erc20_token_from_int",
]
