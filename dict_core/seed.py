"""Seed loading: external JSON word list, or the built-in fallback set."""
from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any, Iterable, List, Optional, Union

from .fallback import iter_fallback_items
from .normalize import normalize_word

log = logging.getLogger(__name__)

SeedSource = Union[str, Path, IO[str], IO[bytes]]

_LFS_POINTER_PREFIX = "version https://git-lfs.github.com/spec/v1"


@dataclass(slots=True)
class DictionaryEntry:
    word: str
    definition: str


def _describe(source: SeedSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", repr(source))


def _read_source(source: SeedSource) -> Optional[str]:
    if hasattr(source, "read"):
        try:
            data = source.read()  # type: ignore[union-attr]
            if isinstance(data, bytes):
                data = data.decode("utf-8")
        except (OSError, ValueError) as exc:
            log.warning("Seed stream %s not readable (%s)", _describe(source), exc)
            return None
        if not isinstance(data, str):
            log.warning("Seed stream %s returned %s, not text", _describe(source), type(data).__name__)
            return None
        return data
    path = Path(source)  # type: ignore[arg-type]
    try:
        if not path.is_file():
            log.warning("Seed file %s missing", path)
            return None
        return path.read_text(encoding="utf-8")
    except (OSError, ValueError) as exc:
        log.warning("Seed file %s not readable (%s)", path, exc)
        return None


def _looks_like_lfs_pointer(text: str) -> bool:
    first_lines = text.splitlines()[:3]
    return any(_LFS_POINTER_PREFIX in line for line in first_lines)


def parse_seed_document(payload: Any) -> Optional[List[DictionaryEntry]]:
    """Validate a decoded seed document. Returns None on any shape mismatch."""
    if not isinstance(payload, dict):
        return None
    words = payload.get("words")
    if not isinstance(words, list):
        return None
    entries: List[DictionaryEntry] = []
    for item in words:
        if not isinstance(item, dict):
            return None
        word = item.get("word")
        definition = item.get("definition")
        if not isinstance(word, str) or not isinstance(definition, str):
            return None
        entries.append(DictionaryEntry(word, definition))
    return entries


def load_seed_entries(source: Optional[SeedSource]) -> Optional[List[DictionaryEntry]]:
    """Read and validate an external seed source.

    Returns the entries, or None when the source is unavailable for any
    reason (missing, unreadable, LFS pointer, bad JSON, wrong shape, empty).
    Never raises for problems with the source itself.
    """
    if source is None:
        return None
    text = _read_source(source)
    if text is None:
        return None
    name = _describe(source)
    if _looks_like_lfs_pointer(text):
        log.warning("Seed file %s is a Git LFS pointer", name)
        return None
    try:
        payload = json.loads(text)
    except ValueError as exc:
        log.warning("Seed file %s is not valid JSON (%s)", name, exc)
        return None
    entries = parse_seed_document(payload)
    if entries is None:
        log.warning("Seed file %s does not match the {\"words\": [{word, definition}]} layout", name)
        return None
    if not entries:
        log.warning("Seed file %s has no entries", name)
        return None
    return entries


def insert_entries(con: sqlite3.Connection, entries: Iterable[DictionaryEntry]) -> int:
    """Insert entries in one transaction, lowercasing every word."""
    rows = [(normalize_word(e.word), e.definition) for e in entries]
    with con:
        con.executemany("INSERT INTO dictionary (word, definition) VALUES (?, ?)", rows)
    return len(rows)


def fallback_entries() -> List[DictionaryEntry]:
    return [DictionaryEntry(word, definition) for word, definition in iter_fallback_items()]


def seed(con: sqlite3.Connection, source: Optional[SeedSource] = None) -> int:
    """Populate an empty dictionary table. Returns the number of rows inserted.

    Insert failures propagate as ``sqlite3.Error``.
    """
    entries = load_seed_entries(source)
    if entries is not None:
        count = insert_entries(con, entries)
        log.info("Loaded %d dictionary entries from %s", count, _describe(source))  # type: ignore[arg-type]
        return count

    count = insert_entries(con, fallback_entries())
    log.info("Loaded %d fallback dictionary entries", count)
    return count


__all__ = [
    "DictionaryEntry",
    "SeedSource",
    "parse_seed_document",
    "load_seed_entries",
    "insert_entries",
    "fallback_entries",
    "seed",
]
