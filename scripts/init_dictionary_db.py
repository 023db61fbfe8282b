import argparse
import logging

from config import FLAGS
from dict_core.logging_utils import setup_logging
from dict_core.store import initialize

setup_logging()
log = logging.getLogger(__name__)


def main():
    ap = argparse.ArgumentParser(description="Create and seed dictionary.db ahead of first launch")
    ap.add_argument("--data-dir", default=FLAGS.get("DATA_DIR"))
    ap.add_argument("--seed", default=FLAGS.get("SEED_PATH"))
    args = ap.parse_args()

    store = initialize(args.data_dir, args.seed)
    try:
        log.info("Built %s with %d entries", store.path, store.count())
    finally:
        store.close()


if __name__ == "__main__":
    main()
