from .errors import DictionaryError, LookupFailedError, StoreInitError
from .lookup_engine import PREFIX_LIMIT, LookupResult, lookup, lookup_tiered, search_definitions
from .seed import DictionaryEntry, load_seed_entries
from .service import init_dictionary, search, search_with_tier
from .store import DB_FILENAME, DictionaryStore, initialize

__all__ = [
    "DB_FILENAME",
    "PREFIX_LIMIT",
    "DictionaryEntry",
    "DictionaryError",
    "DictionaryStore",
    "LookupFailedError",
    "LookupResult",
    "StoreInitError",
    "init_dictionary",
    "initialize",
    "load_seed_entries",
    "lookup",
    "lookup_tiered",
    "search",
    "search_definitions",
    "search_with_tier",
]
