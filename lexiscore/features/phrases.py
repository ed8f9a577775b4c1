# features/phrases.py
# Fixed-weight multi-word overrides matched over the normalized token stream
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Mapping, Tuple, Sequence

from .tokenizer import Token, TextSettings, tokenize


@dataclass(frozen=True)
class PhraseMatch:
    phrase: str
    start: int      # first token index (inclusive)
    end: int        # last token index (exclusive)
    weight: float


@dataclass(frozen=True)
class CompiledPhrase:
    phrase: str
    words: Tuple[str, ...]
    weight: float


def compile_phrases(phrases: Mapping[str, float], settings: TextSettings) -> List[CompiledPhrase]:
    """Tokenize each phrase with the same case/hyphen policy as the input text; table order kept."""
    out: List[CompiledPhrase] = []
    for phrase, weight in phrases.items():
        words = tuple(t.text for t in tokenize(phrase, settings))
        if words:
            out.append(CompiledPhrase(phrase=phrase, words=words, weight=float(weight)))
    return out


def _longest_at(tokens: Sequence[Token], i: int, phrases: Sequence[CompiledPhrase]) -> CompiledPhrase | None:
    best = None
    for p in phrases:
        n = len(p.words)
        if i + n > len(tokens):
            continue
        if best is not None and n <= len(best.words):
            continue   # strictly longer only, so the first equal-length phrase stays
        if all(tokens[i + k].text == p.words[k] for k in range(n)):
            best = p
    return best


def match_phrases(tokens: Sequence[Token],
                  phrases: Sequence[CompiledPhrase]) -> Tuple[List[PhraseMatch], List[Token]]:
    """
    Greedy left-to-right scan: the longest phrase starting at each position wins and its
    span is consumed. Returns (matches, residual tokens outside every matched span).
    """
    matches: List[PhraseMatch] = []
    residual: List[Token] = []
    if not phrases:
        return matches, list(tokens)
    i = 0
    while i < len(tokens):
        p = _longest_at(tokens, i, phrases)
        if p is None:
            residual.append(tokens[i])
            i += 1
            continue
        n = len(p.words)
        matches.append(PhraseMatch(phrase=p.phrase, start=i, end=i + n, weight=p.weight))
        i += n
    return matches, residual


def phrase_total(matches: Sequence[PhraseMatch]) -> float:
    return sum(m.weight for m in matches)
