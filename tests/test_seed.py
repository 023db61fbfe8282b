"""Seed loader tests: external JSON source and fallback activation."""
from __future__ import annotations

import io
import json
import sqlite3

import pytest

from dict_core.lookup_engine import lookup
from dict_core.seed import DictionaryEntry, load_seed_entries, seed
from dict_core.store import SCHEMA_SQL, initialize


def _write_seed(path, words):
    path.write_text(json.dumps({"words": words}), encoding="utf-8")
    return path


def test_external_seed_is_loaded_and_lowercased(tmp_path):
    source = _write_seed(tmp_path / "dictionary.json", [
        {"word": "Tauri", "definition": "A toolkit for desktop apps."},
        {"word": "SQLite", "definition": "An embedded SQL database."},
    ])
    store = initialize(None, source)
    assert store.count() == 2
    words = [row[0] for row in store.connection.execute("SELECT word FROM dictionary ORDER BY id")]
    assert words == ["tauri", "sqlite"]
    assert lookup(store.connection, "SQLITE") == ["An embedded SQL database."]


def test_definitions_are_stored_verbatim(tmp_path):
    text = "  Mixed CASE, trailing space "
    source = _write_seed(tmp_path / "dictionary.json", [{"word": "Odd", "definition": text}])
    store = initialize(None, source)
    assert lookup(store.connection, "odd") == [text]


def test_extra_fields_are_ignored(tmp_path):
    source = tmp_path / "dictionary.json"
    source.write_text(json.dumps({
        "version": 2,
        "words": [{"word": "lexeme", "definition": "A unit of meaning.", "pos": "noun"}],
    }), encoding="utf-8")
    assert load_seed_entries(source) == [DictionaryEntry("lexeme", "A unit of meaning.")]


def test_text_stream_source():
    stream = io.StringIO(json.dumps({"words": [{"word": "Stream", "definition": "Read from memory."}]}))
    store = initialize(None, stream)
    assert store.count() == 1
    assert lookup(store.connection, "stream") == ["Read from memory."]


def test_missing_seed_file_falls_back(tmp_path):
    store = initialize(None, tmp_path / "absent.json")
    assert store.count() == 20
    assert lookup(store.connection, "recursion") == ["A technique where a function calls itself."]


def test_no_seed_source_falls_back():
    assert load_seed_entries(None) is None
    store = initialize()
    assert store.count() == 20


@pytest.mark.parametrize("content", [
    "not json at all",
    json.dumps([{"word": "a", "definition": "b"}]),
    json.dumps({"entries": [{"word": "a", "definition": "b"}]}),
    json.dumps({"words": {"word": "a", "definition": "b"}}),
    json.dumps({"words": [{"word": "a"}]}),
    json.dumps({"words": [{"word": 1, "definition": "b"}]}),
    json.dumps({"words": ["a"]}),
    json.dumps({"words": [{"word": "ok", "definition": "fine"}, {"word": "bad"}]}),
    json.dumps({"words": []}),
    "version https://git-lfs.github.com/spec/v1\noid sha256:abc123\nsize 1234\n",
])
def test_unusable_seed_file_falls_back(tmp_path, content):
    source = tmp_path / "dictionary.json"
    source.write_text(content, encoding="utf-8")
    assert load_seed_entries(source) is None

    store = initialize(None, source)
    assert store.count() == 20
    assert lookup(store.connection, "bank") == ["An institution for handling money; also, the land beside water."]


def test_undecodable_seed_file_falls_back(tmp_path):
    source = tmp_path / "dictionary.json"
    source.write_bytes(b"\xff\xfe\x00{\"words\": []}")
    assert load_seed_entries(source) is None


def test_seed_directory_instead_of_file_falls_back(tmp_path):
    assert load_seed_entries(tmp_path) is None


def test_seed_returns_inserted_count():
    con = sqlite3.connect(":memory:")
    con.executescript(SCHEMA_SQL)
    assert seed(con, None) == 20
    assert seed(con, io.StringIO(json.dumps({"words": [{"word": "x", "definition": "y"}]}))) == 1
    assert con.execute("SELECT COUNT(*) FROM dictionary").fetchone()[0] == 21


def test_seed_insert_error_propagates():
    con = sqlite3.connect(":memory:")
    with pytest.raises(sqlite3.OperationalError):
        seed(con, None)


def test_overlong_seed_path_falls_back():
    source = "x" * 5000 + ".json"
    assert load_seed_entries(source) is None
    assert initialize(None, source).count() == 20


def test_closed_seed_stream_falls_back():
    stream = io.StringIO(json.dumps({"words": [{"word": "x", "definition": "y"}]}))
    stream.close()
    assert load_seed_entries(stream) is None
    assert initialize(None, stream).count() == 20


def test_binary_seed_stream_is_decoded():
    stream = io.BytesIO(json.dumps({"words": [{"word": "Byte", "definition": "Eight bits."}]}).encode("utf-8"))
    store = initialize(None, stream)
    assert store.count() == 1
    assert lookup(store.connection, "byte") == ["Eight bits."]


def test_undecodable_binary_stream_falls_back():
    assert load_seed_entries(io.BytesIO(b"\xff\xfe\x00")) is None
    assert initialize(None, io.BytesIO(b"\xff\xfe\x00")).count() == 20


class _NumberStream:
    def read(self):
        return 42


def test_non_text_stream_falls_back():
    assert load_seed_entries(_NumberStream()) is None
