"""SQLite store: open, ensure schema, seed once."""
from __future__ import annotations

import logging
import os
import sqlite3
import threading
from pathlib import Path
from typing import Optional, Union

from .errors import StoreInitError
from .seed import SeedSource, seed

log = logging.getLogger(__name__)

DB_FILENAME = "dictionary.db"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS dictionary (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    word TEXT NOT NULL COLLATE NOCASE,
    definition TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_dictionary_word ON dictionary(word COLLATE NOCASE);
"""


class DictionaryStore:
    """One shared connection plus the lock that serializes access to it."""

    def __init__(self, connection: sqlite3.Connection, path: Optional[Path] = None) -> None:
        self.connection = connection
        self.path = path
        self.lock = threading.Lock()

    @property
    def is_persistent(self) -> bool:
        return self.path is not None

    def count(self) -> int:
        with self.lock:
            return count_entries(self.connection)

    def close(self) -> None:
        with self.lock:
            self.connection.close()

    def __repr__(self) -> str:
        return f"DictionaryStore(path={str(self.path) if self.path else ':memory:'})"


def count_entries(con: sqlite3.Connection) -> int:
    return int(con.execute("SELECT COUNT(*) FROM dictionary").fetchone()[0])


def _ensure_dir(data_dir: Path) -> None:
    try:
        os.makedirs(data_dir, exist_ok=True)
    except OSError as exc:
        # The open below reports the real problem if the directory is unusable.
        log.warning("Could not create data directory %s (%s)", data_dir, exc)


def _open(data_dir: Optional[Path]) -> sqlite3.Connection:
    if data_dir is None:
        log.info("Opening in-memory dictionary store")
        return sqlite3.connect(":memory:", check_same_thread=False)
    _ensure_dir(data_dir)
    db_path = data_dir / DB_FILENAME
    log.info("Opening dictionary store at %s", db_path)
    return sqlite3.connect(str(db_path), check_same_thread=False)


def initialize(
    data_dir: Optional[Union[str, Path]] = None,
    seed_source: Optional[SeedSource] = None,
) -> DictionaryStore:
    """Open (or create) the store, ensure its schema, and seed it if empty.

    ``data_dir`` is the persistence directory; ``None`` selects a transient
    in-memory store. Any database failure raises ``StoreInitError``.
    """
    directory = Path(data_dir) if data_dir is not None else None
    try:
        con = _open(directory)
    except sqlite3.Error as exc:
        raise StoreInitError(f"Failed to open dictionary store in {directory or ':memory:'}: {exc}") from exc

    try:
        con.executescript(SCHEMA_SQL)
        if count_entries(con) == 0:
            seed(con, seed_source)
        else:
            log.info("Dictionary store already populated; skipping seed")
    except sqlite3.Error as exc:
        con.close()
        raise StoreInitError(f"Failed to initialize dictionary store: {exc}") from exc
    except Exception:
        con.close()
        raise

    path = directory / DB_FILENAME if directory is not None else None
    return DictionaryStore(con, path)


__all__ = ["DB_FILENAME", "SCHEMA_SQL", "DictionaryStore", "count_entries", "initialize"]
