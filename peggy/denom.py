from __future__ import annotations

"""
peggy.denom
===========

Reversible naming of bridged ERC20 contracts as native-chain denominations.

Two renderings of the same denomination exist:

- **storage form** (`PeggyDenom`, bytes):  PREFIX || SEPARATOR || <20 raw address bytes>
- **display form** (`denom_string`, str):  PREFIX || SEPARATOR || "0x" + EIP-55 hex

With the default config (PREFIX="peggy", SEPARATOR="") the storage form is
always 25 bytes and the display form looks like
``peggy0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed``.

Strict vs best-effort
---------------------
Every decode function raises on bad input (PrefixMismatch, BadAddressLength,
EmptyAddress, MalformedAddress). The single exception is `str(PeggyDenom)`,
which is used from log lines and error messages and therefore never raises:
an undecodable denom renders as ``<hex bytes>(error: <reason>)``.

`DenomCodec` binds the operations to an injected, immutable `DenomConfig`.
The module-level functions use `DEFAULT_CODEC`, built from the defaults.
"""

from dataclasses import dataclass
from typing import Union

from peggy.config import DEFAULT_CONFIG, ETH_CONTRACT_ADDRESS_LEN, DenomConfig
from peggy.errors import BadAddressLength, DenomError, PrefixMismatch
from peggy.logging import get_logger
from peggy.types.eth_address import EthAddress, validate_eth_address
from peggy.utils.bytes import BytesLike

log = get_logger(__name__)


class PeggyDenom(bytes):
    """
    Storage form of a peggy denomination.

    Carries the `DenomConfig` it was produced under so that `str()` and
    `token_contract()` decode with the right prefix.
    """

    def __new__(cls, data: BytesLike, config: DenomConfig = DEFAULT_CONFIG) -> "PeggyDenom":
        obj = super().__new__(cls, bytes(data))
        obj._config = config
        return obj

    @property
    def config(self) -> DenomConfig:
        return self._config

    def token_contract(self) -> EthAddress:
        """Strictly decode the embedded contract address."""
        return DenomCodec(self._config).decode_denom_bytes(self)

    def __str__(self) -> str:
        try:
            contract = self.token_contract()
        except DenomError as err:
            log.warning(
                "unparseable peggy denom",
                extra={"denom": bytes(self).hex(), "error": str(err)},
            )
            return f"{bytes(self).hex()}(error: {err})"
        return DenomCodec(self._config).denom_string(contract)

    def __repr__(self) -> str:
        return f"PeggyDenom({bytes(self)!r})"


@dataclass(frozen=True)
class DenomCodec:
    """Denomination encode/decode under a fixed PREFIX/SEPARATOR."""

    config: DenomConfig = DEFAULT_CONFIG

    @property
    def denom_len(self) -> int:
        return self.config.denom_len

    @staticmethod
    def validate_eth_address(address: str) -> None:
        validate_eth_address(address)

    def encode_denom(self, contract: Union[EthAddress, BytesLike]) -> PeggyDenom:
        if not isinstance(contract, EthAddress):
            contract = EthAddress.from_bytes(contract)
        buf = bytearray(self.config.full_prefix_bytes)
        buf += contract.raw
        return PeggyDenom(buf, self.config)

    def decode_denom_bytes(self, denom: BytesLike) -> EthAddress:
        data = bytes(denom)
        full_prefix = self.config.full_prefix_bytes
        if not data.startswith(full_prefix):
            log.debug("denom byte prefix mismatch", extra={"denom": data.hex()})
            raise PrefixMismatch(data.hex(), full_prefix.hex(), form="byte")

        address_bytes = data[len(full_prefix):]
        if len(address_bytes) != ETH_CONTRACT_ADDRESS_LEN:
            log.debug(
                "denom address length mismatch",
                extra={"denom": data.hex(), "length": len(address_bytes)},
            )
            raise BadAddressLength(address_bytes, ETH_CONTRACT_ADDRESS_LEN)

        return EthAddress(address_bytes)

    def decode_denom_string(self, denom: str) -> PeggyDenom:
        """
        Parse the display form back into the canonical storage form.

        The hex suffix may use any casing; the result is re-encoded from the
        parsed address, so it is independent of the input casing.
        """
        full_prefix = self.config.full_prefix
        if not denom.startswith(full_prefix):
            log.debug("denom string prefix mismatch", extra={"denom": denom})
            raise PrefixMismatch(denom, full_prefix, form="string")

        address_hex = denom[len(full_prefix):]
        validate_eth_address(address_hex)
        return self.encode_denom(EthAddress.from_hex(address_hex))

    def denom_string(self, contract: EthAddress) -> str:
        return f"{self.config.prefix}{self.config.separator}{contract.hex()}"


DEFAULT_CODEC = DenomCodec()

# Fixed byte length of every denom under the default config.
PEGGY_DENOM_LEN = DEFAULT_CODEC.denom_len


# ---- module-level API bound to the default naming convention ----

def new_peggy_denom(contract: EthAddress) -> PeggyDenom:
    return DEFAULT_CODEC.encode_denom(contract)


def new_peggy_denom_from_string(denom: str) -> PeggyDenom:
    return DEFAULT_CODEC.decode_denom_string(denom)


def token_contract(denom: BytesLike) -> EthAddress:
    return DEFAULT_CODEC.decode_denom_bytes(denom)


def peggy_denom_string(contract: EthAddress) -> str:
    return DEFAULT_CODEC.denom_string(contract)


# Descriptive aliases
encode_denom = new_peggy_denom
decode_denom_bytes = token_contract
decode_denom_string = new_peggy_denom_from_string
denom_string = peggy_denom_string


__all__ = [
    "PeggyDenom",
    "DenomCodec",
    "DEFAULT_CODEC",
    "PEGGY_DENOM_LEN",
    "new_peggy_denom",
    "new_peggy_denom_from_string",
    "token_contract",
    "peggy_denom_string",
    "encode_denom",
    "decode_denom_bytes",
    "decode_denom_string",
    "denom_string",
    "validate_eth_address",
]
