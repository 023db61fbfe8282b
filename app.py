import html
import logging

import gradio as gr
from wordfreq import zipf_frequency

from config import FLAGS, store_location
from dict_core import LookupFailedError, init_dictionary, search_with_tier
from dict_core.logging_utils import setup_logging
from dict_core.lookup_engine import TIER_PREFIX

setup_logging(str(FLAGS.get("LOG_LEVEL", "INFO")))
log = logging.getLogger(__name__)


# ---------- helpers ----------

def _frequency_note(word: str) -> str:
    """Zipf frequency (0 rare .. ~8 very common) as a short header note."""
    z = zipf_frequency(word.lower(), "en")
    if z <= 0:
        return "not in frequency list"
    band = "common" if z >= 4.0 else ("uncommon" if z >= 2.5 else "rare")
    return f"zipf {z:.1f} · {band}"


def _header(word: str, badge: str) -> str:
    parts = [f"**{html.escape(word)}**"]
    if badge:
        parts.append(f"`{badge}`")
    if FLAGS.get("SHOW_FREQUENCY"):
        parts.append(_frequency_note(word))
    return " · ".join(parts)


# ---------- main handler ----------

def do_lookup(word):
    """Return (header_md, body_md) for one lookup request."""
    word = (word or "").strip()
    if not word:
        return "", "Type a word to look it up."

    try:
        result = search_with_tier(word)
    except LookupFailedError as exc:
        log.warning("Lookup request failed: %s", exc)
        return _header(word, ""), f"⚠️ Lookup failed: {html.escape(str(exc))}"

    if not result.definitions:
        return _header(word, ""), "No definition found."

    lines = []
    if result.tier == TIER_PREFIX:
        lines.append(f"_No exact entry; words starting with “{html.escape(word)}”:_")
    lines.extend(f"- {html.escape(d)}" for d in result.definitions)
    return _header(word, "OFFLINE"), "\n".join(lines)


# ---------- UI ----------

def build_ui():
    store = init_dictionary(store_location(), FLAGS.get("SEED_PATH"))

    with gr.Blocks() as demo:
        where = str(store.path) if store.is_persistent else "in-memory (reseeded each run)"
        gr.Markdown(f"ℹ️ **Dictionary store**: {where} · {store.count()} entries.")
        gr.Markdown("# Offline Dictionary")

        with gr.Row():
            word = gr.Textbox(label="Word", placeholder="")
            btn = gr.Button("Search", variant="primary")

        header = gr.Markdown(visible=True)
        body = gr.Markdown()

        btn.click(do_lookup, [word], [header, body])
        word.submit(do_lookup, [word], [header, body])

    demo.queue()
    return demo


if __name__ == "__main__":
    build_ui().launch()
