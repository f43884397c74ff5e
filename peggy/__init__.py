from __future__ import annotations
"""
peggy: bridged ERC20 denominations for the native chain.

Names foreign (Ethereum) token contracts as native-chain denominations and
back, and models amounts of those tokens with validation and overflow-safe
addition. Submodules are lazily imported to keep import time minimal.

Public surface (lazily loaded):
- config, errors, logging
- denom   (DenomCodec, PeggyDenom, encode/decode helpers)
- erc20   (ERC20Token)
- types   (EthAddress, Coin)
- cli
"""


import importlib
from typing import List

try:
    from .version import __version__
except Exception:  # pragma: no cover - safe fallback for partial checkouts
    __version__ = "0.0.0+local"

__all__: List[str] = [
    "__version__",
    "config",
    "errors",
    "logging",
    "denom",
    "erc20",
    "types",
    "utils",
    "cli",
]

_lazy_modules = set(__all__) - {"__version__"}


def __getattr__(name: str):
    if name in _lazy_modules:
        return importlib.import_module(f".{name}", __name__)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(set(globals().keys()) | _lazy_modules)


def get_version() -> str:
    """Return the version string for this package."""
    return __version__
