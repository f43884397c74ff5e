"""
peggy.logging
-------------

Logging for the codec and the `peggy` CLI, on top of stdlib `logging`.

- `get_logger(__name__)` in library modules; they only emit, never configure.
- `setup_logging()` once from the CLI: one stderr handler, JSON or text.
- `bind(**fields)` attaches fields (e.g. the CLI command) to every record
  emitted in the current context.

Records carry their `extra={...}` fields as structured keys. Bytes values are
rendered as hex so a rejected denom shows up as its storage hex.

Environment:
  PEGGY_LOG_FORMAT=json|text   overrides the format chosen by the caller
  PEGGY_LOG_LEVEL=DEBUG|...    level used when the caller passes none
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional, TextIO

_FIELDS: ContextVar[Dict[str, Any]] = ContextVar("peggy_log_fields", default={})

# Attributes every LogRecord has; anything else on a record came from `extra`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

DEFAULT_LEVEL = "WARNING"


def bind(**fields: Any) -> None:
    """Add fields to every record logged from the current context."""
    _FIELDS.set({**_FIELDS.get(), **fields})


def clear_context() -> None:
    _FIELDS.set({})


def context() -> Dict[str, Any]:
    return dict(_FIELDS.get())


def _render(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def _fields(record: logging.LogRecord) -> Dict[str, Any]:
    out = {k: _render(v) for k, v in _FIELDS.get().items()}
    for k, v in vars(record).items():
        if k not in _RECORD_ATTRS and not k.startswith("_"):
            out[k] = _render(v)
    return out


def _timestamp(record: logging.LogRecord) -> str:
    ts = _dt.datetime.fromtimestamp(record.created, _dt.timezone.utc)
    return ts.isoformat(timespec="milliseconds")


class JSONFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, msg, then the fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in _fields(record).items():
            payload.setdefault(k, v)
        if record.exc_info:
            payload["err"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    """
    ``2025-01-05T12:34:56.789+00:00 WARNING peggy.denom: unparseable peggy denom [command=decode denom=7065...]``
    """

    def format(self, record: logging.LogRecord) -> str:
        line = f"{_timestamp(record)} {record.levelname} {record.name}: {record.getMessage()}"
        fields = _fields(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure(*, json: bool = False, level: str | int = DEFAULT_LEVEL, stream: Optional[TextIO] = None) -> None:
    """Replace the root logger's handlers with a single stream handler."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JSONFormatter() if json else TextFormatter())

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(_level(level))


def setup_logging(
    *,
    level: Optional[str | int] = None,
    fmt: str = "text",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure logging from CLI-style arguments. PEGGY_LOG_FORMAT wins over
    `fmt`; PEGGY_LOG_LEVEL is used when `level` is None.
    """
    env_fmt = os.environ.get("PEGGY_LOG_FORMAT", "").strip().lower()
    chosen = env_fmt if env_fmt in ("json", "text") else fmt.strip().lower()
    if level is None:
        level = os.environ.get("PEGGY_LOG_LEVEL") or DEFAULT_LEVEL
    configure(json=chosen == "json", level=level, stream=stream)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "peggy")


def _level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


__all__ = [
    "bind",
    "clear_context",
    "context",
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "setup_logging",
    "get_logger",
]
