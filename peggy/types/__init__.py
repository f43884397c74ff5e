"""
peggy.types
-----------

Value types shared by the codec and the ERC20 token model:

- `EthAddress` and hex-address syntax helpers (`eth_address`)
- `Coin`, the native chain's (denom, amount) pair (`coin`)
"""

from __future__ import annotations

from .coin import Coin, is_valid_denom
from .eth_address import (
    EthAddress,
    compare_addresses,
    eth_addr_less_than,
    is_hex_address,
    to_checksum_address,
    validate_eth_address,
)

__all__ = [
    "Coin",
    "is_valid_denom",
    "EthAddress",
    "compare_addresses",
    "eth_addr_less_than",
    "is_hex_address",
    "to_checksum_address",
    "validate_eth_address",
]
