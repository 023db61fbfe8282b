import pytest

from dict_core.normalize import like_prefix_pattern, normalize_query, normalize_word


@pytest.mark.parametrize("raw,expected", [
    ("  API ", "api"),
    ("\tRecursion\n", "recursion"),
    ("", ""),
    ("   ", ""),
])
def test_normalize_query(raw, expected):
    assert normalize_query(raw) == expected


def test_normalize_word_only_lowercases():
    assert normalize_word("Hello World") == "hello world"


@pytest.mark.parametrize("prefix,pattern", [
    ("ca", "ca%"),
    ("c_", "c\\_%"),
    ("50%", "50\\%%"),
    ("a\\b", "a\\\\b%"),
])
def test_like_prefix_pattern(prefix, pattern):
    assert like_prefix_pattern(prefix) == pattern
