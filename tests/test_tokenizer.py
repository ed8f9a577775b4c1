# tests/test_tokenizer.py
import re

import pytest

from lexiscore.features.rules import DEFAULT_PUNCTUATION_BREAKS
from lexiscore.features.tokenizer import TextSettings, tokenize, normalize_text, word_count


def words(text, settings=None, breaks=DEFAULT_PUNCTUATION_BREAKS):
    return [t.text for t in tokenize(text, settings or TextSettings(), breaks)]


@pytest.mark.parametrize("text", [None, "", "    "])
def test_blank_input_gives_no_tokens(text):
    assert tokenize(text, TextSettings()) == []


def test_lowercases_and_splits_on_whitespace():
    assert words("This  is\tGOOD") == ["this", "is", "good"]


def test_case_sensitive_keeps_case():
    assert words("This is GOOD", TextSettings(case_sensitive=True)) == ["This", "is", "GOOD"]


def test_break_symbols_become_tokens():
    assert words("Good. Bad!") == ["good", ".", "bad", "!"]
    assert words("wow!!!") == ["wow", "!", "!", "!"]
    assert words("first,second") == ["first,second"]   # only edges are peeled


def test_edge_quotes_are_trimmed_internal_apostrophes_kept():
    assert words("'good'") == ["good"]
    assert words('"great!"') == ["great", "!"]
    assert words("don't") == ["don't"]
    assert words("(it's)") == ["it's"]


def test_pieces_trimmed_to_nothing_are_dropped():
    assert words("good ' \"\" bad") == ["good", "bad"]


def test_indices_follow_token_order():
    toks = tokenize("good, bad.", TextSettings(), DEFAULT_PUNCTUATION_BREAKS)
    assert [t.index for t in toks] == [0, 1, 2, 3]


def test_hyphen_split_and_merge():
    assert words("state-of-the-art", TextSettings(normalize_hyphens=True)) == ["state", "of", "the", "art"]
    assert words("state-of-the-art", TextSettings(normalize_hyphens=True, hyphen_replacement="")) == ["stateoftheart"]
    assert words("state-of-the-art") == ["state-of-the-art"]


def test_custom_separator():
    assert words("good;bad", TextSettings(word_separator=";"), breaks=()) == ["good", "bad"]


def test_invalid_separator_raises():
    with pytest.raises(re.error):
        TextSettings(word_separator="(")


def test_normalize_text():
    assert normalize_text("  Well-Done ", TextSettings(normalize_hyphens=True)) == "well done"


def test_word_count_skips_breaks():
    toks = tokenize("Good. Very good!", TextSettings(), DEFAULT_PUNCTUATION_BREAKS)
    assert word_count(toks, DEFAULT_PUNCTUATION_BREAKS) == 3


def test_capturing_separator_does_not_leak_separator_text():
    settings = TextSettings(word_separator=r"(\s+)")
    assert words("not  good", settings) == ["not", "good"]
    toks = tokenize("not  x  good.", settings, DEFAULT_PUNCTUATION_BREAKS)
    assert word_count(toks, DEFAULT_PUNCTUATION_BREAKS) == 3
