"""Runtime configuration flags for OfflineDictionary.

Flags come from environment variables so the shells and scripts can be
pointed at another data directory or seed file without code changes. The
``dict_core`` package never reads these; callers pass values in.
"""
from __future__ import annotations

import os
from typing import Any, Dict


def _env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default) == "1"


def _env_path(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    return value or default


class _Flags(dict):
    def __getattr__(self, name: str) -> Any:  # pragma: no cover - compatibility shim
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(name) from exc


FLAGS: Dict[str, Any] = _Flags({
    "DATA_DIR": _env_path("DICT_DATA_DIR", "data"),
    "IN_MEMORY": _env_bool("DICT_IN_MEMORY", "0"),
    "SEED_PATH": _env_path("DICT_SEED_PATH", "data/dictionary.json"),
    "SHOW_FREQUENCY": _env_bool("DICT_SHOW_FREQUENCY", "1"),
    "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
})


def store_location() -> str | None:
    """Persistence directory from the flags, or None for an in-memory store."""
    if FLAGS.get("IN_MEMORY"):
        return None
    return FLAGS.get("DATA_DIR")


__all__ = ["FLAGS", "store_location"]
