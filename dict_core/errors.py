"""Exception types raised by the dictionary core."""
from __future__ import annotations


class DictionaryError(RuntimeError):
    """Base class for dictionary store failures."""


class StoreInitError(DictionaryError):
    """The store could not be opened, migrated or seeded. Fatal at startup."""


class LookupFailedError(DictionaryError):
    """A single lookup could not be executed.

    Distinct from an empty result: "no definitions" is a successful lookup.
    """


__all__ = ["DictionaryError", "StoreInitError", "LookupFailedError"]
