"""
peggy.utils
-----------

Helpers shared by the codec modules:

- `bytes` : hex/bytes helpers, length guards, byte ordering
- `hash`  : Keccak-256 (EVM flavour)

Names like `bytes` and `hash` shadow Python builtins if imported directly;
prefer module-qualified access (`utils.bytes`, `utils.hash`) or the aliases
(`bytes_utils`, `hash_utils`).
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import Any, Dict, List

__all__: List[str] = ["bytes", "hash", "bytes_utils", "hash_utils"]

_SUBMODS: Dict[str, str] = {
    "bytes": "peggy.utils.bytes",
    "hash": "peggy.utils.hash",
}

_ALIASES: Dict[str, str] = {
    "bytes_utils": "bytes",
    "hash_utils": "hash",
}


def __getattr__(name: str) -> Any:
    canonical = _ALIASES.get(name, name)
    if canonical in _SUBMODS:
        mod: ModuleType = import_module(_SUBMODS[canonical])
        globals()[canonical] = mod
        if name != canonical:
            globals()[name] = mod
        return mod
    raise AttributeError(f"module 'peggy.utils' has no attribute '{name}'")
