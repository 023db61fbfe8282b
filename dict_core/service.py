"""Process-wide dictionary state and the public ``search`` operation."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from .errors import LookupFailedError
from .lookup_engine import LookupResult, search_definitions, search_tiered
from .seed import SeedSource
from .store import DictionaryStore, initialize

log = logging.getLogger(__name__)

_STORE: Optional[DictionaryStore] = None
_INIT_LOCK = threading.Lock()


def init_dictionary(
    data_dir: Optional[Union[str, Path]] = None,
    seed_source: Optional[SeedSource] = None,
) -> DictionaryStore:
    """Initialize the shared store once; later calls return the same store."""
    global _STORE
    with _INIT_LOCK:
        if _STORE is None:
            _STORE = initialize(data_dir, seed_source)
            log.info("Dictionary ready (%s)", _STORE)
        return _STORE


def get_store() -> DictionaryStore:
    if _STORE is None:
        raise LookupFailedError("Dictionary store is not initialized")
    return _STORE


def reset() -> None:
    """Forget the shared store. The connection itself is left to the caller."""
    global _STORE
    with _INIT_LOCK:
        _STORE = None


def search(word: str) -> List[str]:
    """Look up ``word``. Empty list means no match; failures raise LookupFailedError."""
    return search_definitions(get_store(), word)


def search_with_tier(word: str) -> LookupResult:
    return search_tiered(get_store(), word)


__all__ = ["init_dictionary", "get_store", "reset", "search", "search_with_tier"]
