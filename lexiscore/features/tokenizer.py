# features/tokenizer.py
# Text normalization and tokenization driven by TextSettings (separator, case, hyphens)
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import List, Iterable, Optional

DEFAULT_WORD_SEPARATOR = r"\s+"

# Characters trimmed from token edges before lexicon lookup (internal apostrophes survive)
EDGE_CHARS = "\"'`‘’“”()[]{}<>*_~"


@dataclass(frozen=True)
class TextSettings:
    """Tokenizer policy: separator regex, case handling, hyphen handling."""
    word_separator: str = DEFAULT_WORD_SEPARATOR
    case_sensitive: bool = False
    normalize_hyphens: bool = False
    hyphen_replacement: str = " "   # " " splits compounds, "" merges them
    _pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Compile once; re.error surfaces to the config loader
        object.__setattr__(self, "_pattern", re.compile(self.word_separator))

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern


@dataclass(frozen=True)
class Token:
    """Normalized word unit with its position in the token stream."""
    text: str
    index: int


def normalize_text(text: str, settings: TextSettings) -> str:
    """Apply hyphen and case policy; surrounding whitespace removed."""
    t = text
    if settings.normalize_hyphens:
        t = t.replace("-", settings.hyphen_replacement)
    t = t.strip()
    return t if settings.case_sensitive else t.lower()


def _peel_breaks(piece: str, breaks: List[str]) -> List[str]:
    """Split punctuation-break symbols glued to either edge of a piece into their own tokens."""
    head: List[str] = []
    tail: List[str] = []
    changed = True
    while piece and changed:
        changed = False
        for b in breaks:
            if piece.endswith(b) and piece != b:
                tail.insert(0, b)
                piece = piece[: -len(b)]
                changed = True
                break
            if piece.startswith(b) and piece != b:
                head.append(b)
                piece = piece[len(b):]
                changed = True
                break
    middle = [piece] if piece else []
    return head + middle + tail


def tokenize(text: Optional[str], settings: TextSettings,
             punctuation_breaks: Iterable[str] = ()) -> List[Token]:
    """
    Turn raw text into ordered tokens.
    Null/blank input yields []. Break symbols become standalone tokens; other
    edge punctuation is trimmed, and pieces left empty are dropped.
    """
    if text is None or not text.strip():
        return []
    normalized = normalize_text(text, settings)
    # Longest symbols first so "..." is preferred over "."
    breaks = sorted((b for b in punctuation_breaks if b), key=len, reverse=True)
    words: List[str] = []
    # Capturing separators make split() return the separator text too; such pieces are dropped
    for raw in settings.pattern.split(normalized):
        if not raw or settings.pattern.fullmatch(raw):
            continue
        for piece in _peel_breaks(raw, breaks):
            if piece in breaks:
                words.append(piece)
                continue
            cleaned = piece.strip(EDGE_CHARS)
            # Trimming may expose more break symbols ("good".) -> good, .
            for sub in _peel_breaks(cleaned, breaks):
                sub = sub if sub in breaks else sub.strip(EDGE_CHARS)
                if sub:
                    words.append(sub)
    return [Token(text=w, index=i) for i, w in enumerate(words)]


def word_count(tokens: Iterable[Token], punctuation_breaks: Iterable[str] = ()) -> int:
    """Number of word tokens (punctuation-break tokens excluded)."""
    breaks = set(punctuation_breaks)
    return sum(1 for t in tokens if t.text not in breaks)
