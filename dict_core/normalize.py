"""Normalization helpers for stored words and lookup queries."""
from __future__ import annotations

_LIKE_ESCAPE = "\\"


def normalize_word(text: str) -> str:
    """Lowercase a word for storage. Surrounding text is otherwise kept as is."""
    if not text:
        return ""
    return text.lower()


def normalize_query(text: str) -> str:
    """Trim and lowercase a lookup query."""
    if not text:
        return ""
    return text.strip().lower()


def like_prefix_pattern(prefix: str) -> str:
    """Build a LIKE pattern matching ``prefix`` literally, followed by anything.

    Pair with ``ESCAPE '\\'`` in the SQL.
    """
    escaped = (
        prefix.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )
    return escaped + "%"


__all__ = ["normalize_word", "normalize_query", "like_prefix_pattern"]
