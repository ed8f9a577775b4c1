# tests/test_lexicon.py
import pytest
import requests

from lexiscore.backends import wordlists
from lexiscore.features.lexicon import Lexicon, LexiconProvider


def test_build_folds_case_and_drops_blanks():
    lex = Lexicon.build(["Good", "  great ", "", "   "], ["BAD"])
    assert lex.positive_words == frozenset({"good", "great"})
    assert lex.negative_words == frozenset({"bad"})


def test_build_case_sensitive_keeps_case():
    lex = Lexicon.build(["Good"], [], case_sensitive=True)
    assert "Good" in lex.positive_words and "good" not in lex.positive_words


def test_polarity():
    lex = Lexicon.build(["good", "odd"], ["bad", "odd"])
    assert lex.polarity("good") == 1
    assert lex.polarity("bad") == -1
    assert lex.polarity("table") == 0
    assert lex.polarity("odd") == 0


def test_parse_word_lines_skips_comments_and_blanks():
    assert wordlists.parse_word_lines(["# header", "", " good ", "great\n", "  # note"]) == ["good", "great"]


def test_provider_loads_files(tmp_path):
    pos = tmp_path / "pos.txt"
    neg = tmp_path / "neg.txt"
    pos.write_text("# positives\nStellar\nfine\n", encoding="utf-8")
    neg.write_text("dismal\n", encoding="utf-8")
    p = LexiconProvider(positive_source=str(pos), negative_source=str(neg), use_bundled=False)
    assert p.positive_words() == frozenset({"stellar", "fine"})
    assert p.negative_words() == frozenset({"dismal"})


def test_missing_file_falls_back_to_inline(tmp_path):
    p = LexiconProvider(positive_source=str(tmp_path / "nope.txt"), positive_words=["nice"], use_bundled=False)
    assert p.positive_words() == frozenset({"nice"})
    assert p.negative_words() == frozenset()


def test_bundled_lists_are_the_last_resort():
    p = LexiconProvider()
    assert "good" in p.positive_words()
    assert "terrible" in p.negative_words()
    assert not p.positive_words() & p.negative_words()


def test_refresh_swaps_whole_snapshot(tmp_path):
    pos = tmp_path / "pos.txt"
    pos.write_text("good\n", encoding="utf-8")
    p = LexiconProvider(positive_source=str(pos), use_bundled=False)
    before = p.current()
    pos.write_text("great\nsuperb\n", encoding="utf-8")
    after = p.refresh()
    assert before.positive_words == frozenset({"good"})   # old snapshot untouched
    assert after is p.current()
    assert after.positive_words == frozenset({"great", "superb"})


class _FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status
        self.encoding = "utf-8"

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_url_source(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse("# remote\nbrilliant\n")

    monkeypatch.setattr(wordlists.requests, "get", fake_get)
    assert wordlists.load_words("https://example.org/pos.txt") == ["brilliant"]
    assert calls[0][0] == "https://example.org/pos.txt"


@pytest.mark.parametrize("failure", [
    lambda url, timeout: _FakeResponse("", status=404),
    lambda url, timeout: (_ for _ in ()).throw(requests.ConnectionError("down")),
])
def test_url_failures_yield_empty(monkeypatch, failure):
    monkeypatch.setattr(wordlists.requests, "get", failure)
    assert wordlists.load_words("http://example.org/x.txt") == []


def test_blank_source_yields_empty():
    assert wordlists.load_words(None) == []
    assert wordlists.load_words("   ") == []
