from __future__ import annotations
"""
peggy.config: naming convention for bridged-token denominations

Every denomination minted for a bridged ERC20 token has the shape

    PREFIX || SEPARATOR || <20-byte contract address>

where PREFIX is the module name and SEPARATOR is a (possibly empty) fixed
string. Both are process-wide constants in production; here they live in an
immutable `DenomConfig` that is injected into `peggy.denom.DenomCodec`, so the
codec stays a stateless function set and tests can use alternate prefixes.

Environment overrides (all optional):

  PEGGY_DENOM_PREFIX=peggy
  PEGGY_DENOM_SEPARATOR=

You can also load from a JSON or YAML file via
`PEGGY_CONFIG_FILE=/path/to/config.(json|yaml|yml)`:

  denom:
    prefix: peggy
    separator: ""

File values override defaults; environment overrides the file.
"""


from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional
import json
import os
import re
import string
from pathlib import Path

import yaml

from peggy.errors import ConfigError


# -------------------------- Constants --------------------------

MODULE_NAME = "peggy"

DEFAULT_DENOM_PREFIX = MODULE_NAME
DEFAULT_DENOM_SEPARATOR = ""

# Length of an Ethereum contract address in bytes.
ETH_CONTRACT_ADDRESS_LEN = 20

# Characters allowed after the first one in a native coin denom.
_DENOM_TAIL_CHARS = frozenset(string.ascii_letters + string.digits + "/:._-")
_PREFIX_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]*")


# -------------------------- Data classes --------------------------


@dataclass(frozen=True)
class DenomConfig:
    """Immutable PREFIX / SEPARATOR pair used by the denomination codec."""
    prefix: str = DEFAULT_DENOM_PREFIX
    separator: str = DEFAULT_DENOM_SEPARATOR

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.prefix, str) or not isinstance(self.separator, str):
            raise ConfigError("denom prefix and separator must be strings")
        if not _PREFIX_RE.fullmatch(self.prefix):
            raise ConfigError(
                "denom prefix must start with a letter and use only [a-zA-Z0-9/:._-]",
                prefix=self.prefix,
            )
        bad = [c for c in self.separator if c not in _DENOM_TAIL_CHARS]
        if bad:
            raise ConfigError(
                "denom separator may only use [a-zA-Z0-9/:._-]",
                separator=self.separator,
            )

    @property
    def full_prefix(self) -> str:
        return self.prefix + self.separator

    @property
    def full_prefix_bytes(self) -> bytes:
        return self.full_prefix.encode("ascii")

    @property
    def denom_len(self) -> int:
        """Fixed byte length of every denomination under this config."""
        return len(self.prefix) + len(self.separator) + ETH_CONTRACT_ADDRESS_LEN

    def to_dict(self) -> Dict[str, Any]:
        return {"denom": asdict(self)}


DEFAULT_CONFIG = DenomConfig()


# -------------------------- Loaders --------------------------


def from_env(base: Optional[DenomConfig] = None, prefix: str = "PEGGY_") -> DenomConfig:
    """
    Build a DenomConfig from environment variables, layered on top of `base`.

    An empty PEGGY_DENOM_SEPARATOR is meaningful (it *is* the default), so only
    an unset variable falls back to `base`.
    """
    cfg = base or DenomConfig()
    denom_prefix = os.getenv(f"{prefix}DENOM_PREFIX")
    separator = os.getenv(f"{prefix}DENOM_SEPARATOR")
    return DenomConfig(
        prefix=denom_prefix if denom_prefix else cfg.prefix,
        separator=separator if separator is not None else cfg.separator,
    )


def from_file(path: str | os.PathLike[str]) -> DenomConfig:
    """
    Load configuration from a JSON or YAML file.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)

    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text or "{}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"unreadable config file: {e}", path=str(p)) from e

    if not isinstance(data, dict):
        raise ConfigError("config file must contain a mapping", path=str(p))
    denom = data.get("denom", {}) or {}
    if not isinstance(denom, dict):
        raise ConfigError("'denom' section must be a mapping", path=str(p))

    return DenomConfig(
        prefix=denom.get("prefix", DEFAULT_DENOM_PREFIX),
        separator=denom.get("separator", DEFAULT_DENOM_SEPARATOR) or "",
    )


def load() -> DenomConfig:
    """
    Load configuration using the following precedence:
      1) File at $PEGGY_CONFIG_FILE (JSON/YAML)
      2) Environment variables (PEGGY_*), applied on top of defaults or file values
    """
    file_path = os.getenv("PEGGY_CONFIG_FILE")
    base = from_file(file_path) if file_path else DenomConfig()
    return from_env(base=base)


# -------------------------- Utilities --------------------------


def pretty(cfg: Optional[DenomConfig] = None) -> str:
    """Return a human-readable JSON string of the current config."""
    obj = (cfg or load()).to_dict()
    return json.dumps(obj, indent=2, sort_keys=True)


__all__ = [
    "MODULE_NAME",
    "DEFAULT_DENOM_PREFIX",
    "DEFAULT_DENOM_SEPARATOR",
    "ETH_CONTRACT_ADDRESS_LEN",
    "DenomConfig",
    "DEFAULT_CONFIG",
    "from_env",
    "from_file",
    "load",
    "pretty",
]
