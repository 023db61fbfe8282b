"""Two-phase definition lookup: exact match first, then a capped prefix match.

Both phases compare case-insensitively. Exact matches are returned in full
(duplicate words with different definitions all surface); the prefix phase
only runs when the exact phase finds nothing and returns at most
``PREFIX_LIMIT`` rows. Row order is whatever SQLite yields.

LIKE is ASCII case-insensitive on its own; stored words and queries are both
lowercased, which covers the rest.
"""
from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from typing import List

from .errors import LookupFailedError
from .normalize import like_prefix_pattern, normalize_query
from .store import DictionaryStore

log = logging.getLogger(__name__)

PREFIX_LIMIT = 3

TIER_EXACT = "exact"
TIER_PREFIX = "prefix"
TIER_NONE = "none"

_EXACT_SQL = "SELECT definition FROM dictionary WHERE word = ? COLLATE NOCASE"
_PREFIX_SQL = (
    "SELECT definition FROM dictionary "
    "WHERE word LIKE ? ESCAPE '\\' LIMIT ?"
)


@dataclass(slots=True)
class LookupResult:
    definitions: List[str] = field(default_factory=list)
    tier: str = TIER_NONE


def lookup_tiered(con: sqlite3.Connection, query: str) -> LookupResult:
    """Run the lookup and report which phase produced the definitions.

    Raises ``sqlite3.Error`` if a query cannot be executed.
    """
    term = normalize_query(query)
    if not term:
        return LookupResult()

    exact = [row[0] for row in con.execute(_EXACT_SQL, (term,))]
    if exact:
        return LookupResult(exact, TIER_EXACT)

    prefix = [row[0] for row in con.execute(_PREFIX_SQL, (like_prefix_pattern(term), PREFIX_LIMIT))]
    if prefix:
        return LookupResult(prefix, TIER_PREFIX)
    return LookupResult()


def lookup(con: sqlite3.Connection, query: str) -> List[str]:
    return lookup_tiered(con, query).definitions


def search_tiered(store: DictionaryStore, word: str) -> LookupResult:
    """Locked lookup against a shared store; query faults become ``LookupFailedError``."""
    with store.lock:
        try:
            result = lookup_tiered(store.connection, word)
        except sqlite3.Error as exc:
            log.exception("Lookup failed for %r", word)
            raise LookupFailedError(f"Lookup failed for {word!r}: {exc}") from exc
    log.debug("Lookup %r -> %s (%d)", word, result.tier, len(result.definitions))
    return result


def search_definitions(store: DictionaryStore, word: str) -> List[str]:
    return search_tiered(store, word).definitions


__all__ = [
    "PREFIX_LIMIT",
    "TIER_EXACT",
    "TIER_PREFIX",
    "TIER_NONE",
    "LookupResult",
    "lookup",
    "lookup_tiered",
    "search_tiered",
    "search_definitions",
]
