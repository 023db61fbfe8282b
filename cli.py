"""Command-line entrypoint for OfflineDictionary lookups."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from config import FLAGS, store_location
from dict_core import LookupFailedError, StoreInitError, init_dictionary, search_with_tier
from dict_core.logging_utils import setup_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Look up a word in the offline dictionary")
    parser.add_argument("word", help="Word to look up")
    where = parser.add_mutually_exclusive_group()
    where.add_argument("--data-dir", default=None, help="Directory holding dictionary.db")
    where.add_argument("--in-memory", action="store_true", help="Use a throwaway in-memory store")
    parser.add_argument("--seed", default=None, help="Seed JSON used when the store is empty")
    parser.add_argument("--json", action="store_true", help="Emit the result as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(str(FLAGS.get("LOG_LEVEL", "INFO")))
    args = build_parser().parse_args(argv)

    if args.in_memory:
        data_dir = None
    else:
        data_dir = args.data_dir or store_location()
    try:
        init_dictionary(data_dir, args.seed or FLAGS.get("SEED_PATH"))
    except StoreInitError as exc:
        log.error("%s", exc)
        return 1

    try:
        result = search_with_tier(args.word)
    except LookupFailedError as exc:
        log.error("%s", exc)
        return 1

    if args.json:
        print(json.dumps({
            "query": args.word,
            "tier": result.tier,
            "definitions": result.definitions,
        }, indent=2))
    elif result.definitions:
        for definition in result.definitions:
            print(definition)
    else:
        print("No definition found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
