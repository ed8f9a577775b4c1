# features/lexicon.py
# Positive/negative word sets and the provider that swaps them atomically on refresh
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from ..backends import wordlists

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lexicon:
    """Immutable snapshot of the two polarity word sets."""
    positive_words: FrozenSet[str] = frozenset()
    negative_words: FrozenSet[str] = frozenset()

    @classmethod
    def build(cls, positive: Iterable[str], negative: Iterable[str],
              case_sensitive: bool = False) -> "Lexicon":
        """Trim, drop blanks and fold case (when insensitive) into a new snapshot."""
        return cls(
            positive_words=_processed(positive, case_sensitive),
            negative_words=_processed(negative, case_sensitive),
        )

    def polarity(self, word: str) -> int:
        """+1 positive, -1 negative, 0 unknown or ambiguous (present in both)."""
        pos = word in self.positive_words
        neg = word in self.negative_words
        if pos and neg:
            log.warning("Word '%s' found in both positive and negative word lists", word)
            return 0
        return 1 if pos else (-1 if neg else 0)


def _processed(words: Iterable[str], case_sensitive: bool) -> FrozenSet[str]:
    out = set()
    for w in words:
        if w is None or not w.strip():
            continue
        w = w.strip()
        out.add(w if case_sensitive else w.lower())
    return frozenset(out)


class LexiconProvider:
    """
    Holds the current Lexicon. Readers take `current()` once per call; refresh builds a
    complete replacement and publishes it with a single reference assignment.
    """

    def __init__(self,
                 positive_source: Optional[str] = None,
                 negative_source: Optional[str] = None,
                 positive_words: Optional[List[str]] = None,
                 negative_words: Optional[List[str]] = None,
                 case_sensitive: bool = False,
                 use_bundled: bool = True):
        self.positive_source = positive_source
        self.negative_source = negative_source
        self.inline_positive = list(positive_words or [])
        self.inline_negative = list(negative_words or [])
        self.case_sensitive = case_sensitive
        self.use_bundled = use_bundled
        self._refresh_lock = threading.Lock()   # serializes writers only
        self._lexicon = Lexicon()
        self.refresh()

    @classmethod
    def from_words(cls, positive: Iterable[str], negative: Iterable[str],
                   case_sensitive: bool = False) -> "LexiconProvider":
        """Provider backed only by in-memory lists (no files, no bundled data)."""
        return cls(positive_words=list(positive), negative_words=list(negative),
                   case_sensitive=case_sensitive, use_bundled=False)

    def current(self) -> Lexicon:
        return self._lexicon

    def positive_words(self) -> FrozenSet[str]:
        return self._lexicon.positive_words

    def negative_words(self) -> FrozenSet[str]:
        return self._lexicon.negative_words

    def _words_for(self, source: Optional[str], inline: List[str], positive: bool) -> List[str]:
        words = wordlists.load_words(source) if source else []
        if words:
            return words
        if inline:
            return inline
        if self.use_bundled:
            return wordlists.load_bundled(positive)
        return []

    def refresh(self) -> Lexicon:
        """Reload both lists and publish the new snapshot."""
        with self._refresh_lock:
            log.debug("Loading word lists...")
            positive = self._words_for(self.positive_source, self.inline_positive, positive=True)
            negative = self._words_for(self.negative_source, self.inline_negative, positive=False)
            lexicon = Lexicon.build(positive, negative, self.case_sensitive)
            self._lexicon = lexicon   # single reference swap
            log.info("Lexicon updated - Positive: %d, Negative: %d",
                     len(lexicon.positive_words), len(lexicon.negative_words))
            return lexicon

    def replace(self, lexicon: Lexicon) -> None:
        """Publish an externally built snapshot."""
        with self._refresh_lock:
            self._lexicon = lexicon
