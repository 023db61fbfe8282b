"""Convert a tab-separated word list into a dictionary seed JSON file.

Input lines look like ``word<TAB>definition``. Blank lines and lines
starting with ``#`` are skipped; words are lowercased on the way out.
"""
import argparse
import json
import logging
import os
from pathlib import Path

from dict_core.logging_utils import setup_logging
from dict_core.normalize import normalize_word

setup_logging()
log = logging.getLogger(__name__)

TSV_PATH = os.environ.get("DICT_TSV_PATH", "data/dictionary.tsv")
SEED_PATH = os.environ.get("DICT_SEED_PATH", "data/dictionary.json")


def tsv_lines(path: str):
    """Yield lines from the word list handling encoding quirks (utf-8/latin-1)."""
    with open(path, "rb") as fh:
        for bline in fh:
            try:
                line = bline.decode("utf-8")
            except UnicodeDecodeError:
                line = bline.decode("latin-1", errors="ignore")
            yield line


def parse_line(line: str):
    line = line.rstrip("\r\n")
    if not line.strip() or line.lstrip().startswith("#"):
        return None
    parts = line.split("\t", 1)
    if len(parts) != 2:
        return None
    word, definition = parts[0].strip(), parts[1].strip()
    if not word or not definition:
        return None
    return normalize_word(word), definition


def build(tsv_path: str, seed_path: str) -> int:
    if not Path(tsv_path).exists():
        raise SystemExit(f"Word list not found: {tsv_path}")

    words = []
    skipped = 0
    for line in tsv_lines(tsv_path):
        parsed = parse_line(line)
        if parsed is None:
            skipped += 1
            continue
        word, definition = parsed
        words.append({"word": word, "definition": definition})

    out = Path(seed_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps({"words": words}, ensure_ascii=False, indent=2), encoding="utf-8")
    log.info("Wrote %s with %d entries (%d lines skipped)", seed_path, len(words), skipped)
    return len(words)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--tsv", default=TSV_PATH)
    ap.add_argument("--out", default=SEED_PATH)
    args = ap.parse_args()
    build(args.tsv, args.out)


if __name__ == "__main__":
    main()
