# features/sentiment.py
# Lexicon + windowed modifiers sentiment engine (normalized to [-1, 1])
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .context import ScoringContext
from .lexicon import Lexicon, LexiconProvider
from .phrases import PhraseMatch, compile_phrases, match_phrases, phrase_total
from .rules import RuleTable
from .tokenizer import TextSettings, Token, tokenize, word_count


def normalize_score(raw: float, alpha: float) -> float:
    """raw / (|raw| + alpha), clamped; NaN maps to 0 and infinities to ±1."""
    if raw == 0.0 or math.isnan(raw):
        return 0.0
    if math.isinf(raw):
        return 1.0 if raw > 0 else -1.0
    s = raw / (abs(raw) + alpha)
    if math.isnan(s):
        return 0.0
    return max(-1.0, min(1.0, s))


@dataclass(frozen=True)
class ScoreDetail:
    """Everything one scoring pass produced; the service derives label/confidence from it."""
    score: float
    raw_score: float
    token_count: int
    phrase_matches: List[PhraseMatch] = field(default_factory=list)


class SentimentEngine:
    """
    Stateless scorer over a rule table and a lexicon snapshot.
    Safe to share between threads: per-call state lives in a fresh ScoringContext.
    """

    def __init__(self, lexicon: Union[LexiconProvider, Lexicon],
                 rules: Optional[RuleTable] = None,
                 settings: Optional[TextSettings] = None):
        self.settings = settings or TextSettings()
        rules = (rules or RuleTable()).validate()
        self.rules = rules if self.settings.case_sensitive else rules.casefolded()
        self._lexicon = lexicon
        self._phrases = compile_phrases(self.rules.phrases, self.settings)

    def lexicon(self) -> Lexicon:
        """Snapshot used for one call (a refresh mid-call is never observed)."""
        if isinstance(self._lexicon, Lexicon):
            return self._lexicon
        return self._lexicon.current()

    # ---------- Pipeline stages ----------
    def tokenize(self, text: Optional[str]) -> List[Token]:
        return tokenize(text, self.settings, self.rules.punctuation_breaks)

    def walk(self, tokens: Sequence[Token], lexicon: Lexicon) -> float:
        """Left-to-right state machine over the residual tokens; returns the raw walker total."""
        r = self.rules
        ctx = ScoringContext()
        for tok in tokens:
            w = tok.text
            # sentence punctuation resets everything
            if w in r.punctuation_breaks:
                ctx.sentence_break()
                continue
            # contrastive conjunction closes the clause
            if w in r.contrastives:
                ctx.contrast(r.contrastive_discount, r.contrastive_window)
                continue
            # negation trigger (ignored while one is already running)
            if w in r.negations and ctx.negation is None:
                ctx.tick()
                ctx.arm_negation(r.negation_window)
                continue
            # intensifiers wait for the next sentiment word
            if w in r.boosters:
                ctx.tick()
                ctx.stack_intensity(abs(r.boosters[w]), r.modifier_window)
                continue
            if w in r.dampeners:
                ctx.tick()
                ctx.stack_intensity(-abs(r.dampeners[w]), r.modifier_window)
                continue
            # lexicon word
            polarity = lexicon.polarity(w)
            if polarity:
                ctx.contribute(polarity, r.contrastive_emphasis)
            # every token counts down the windows
            ctx.tick()
        return ctx.finish()

    def score_detail(self, text: Optional[str]) -> ScoreDetail:
        """Full pass: tokens -> phrases -> walker -> normalization."""
        tokens = self.tokenize(text)
        if not tokens:
            return ScoreDetail(score=0.0, raw_score=0.0, token_count=0)
        matches, residual = match_phrases(tokens, self._phrases)
        raw = self.walk(residual, self.lexicon()) + phrase_total(matches)
        score = normalize_score(raw, self.rules.normalization_alpha)
        return ScoreDetail(
            score=score,
            raw_score=raw,
            token_count=word_count(tokens, self.rules.punctuation_breaks),
            phrase_matches=matches,
        )

    def calculate_sentiment_score(self, text: Optional[str]) -> float:
        """Sentiment score in [-1, 1]; exactly 0.0 for null/blank text."""
        return self.score_detail(text).score
