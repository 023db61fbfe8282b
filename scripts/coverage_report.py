#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Look up every term in a text file and print exact/prefix/miss counts."""

import argparse
import logging
from collections import Counter
from pathlib import Path

from config import FLAGS, store_location
from dict_core.logging_utils import setup_logging
from dict_core.lookup_engine import TIER_NONE, search_tiered
from dict_core.store import initialize

setup_logging()
log = logging.getLogger(__name__)


def read_terms(path: Path):
    for line in path.read_text(encoding="utf-8").splitlines():
        term = line.strip()
        if not term or term.startswith("#"):
            continue
        yield term


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--terms", default="data/test_terms.txt")
    ap.add_argument("--data-dir", default=store_location())
    ap.add_argument("--seed", default=FLAGS.get("SEED_PATH"))
    ap.add_argument("--show-misses", action="store_true")
    args = ap.parse_args()

    store = initialize(args.data_dir, args.seed)
    tiers = Counter()
    misses = []
    try:
        for term in read_terms(Path(args.terms)):
            result = search_tiered(store, term)
            tiers[result.tier] += 1
            if result.tier == TIER_NONE:
                misses.append(term)
    finally:
        store.close()

    total = sum(tiers.values())
    log.info("Terms: %s", total)
    for tier, count in tiers.most_common():
        log.info(" - %s: %s", tier, count)
    if args.show_misses:
        for term in misses:
            log.info("   miss: %s", term)


if __name__ == "__main__":
    main()
