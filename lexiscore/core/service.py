# core/service.py: sentiment analysis orchestration over the engine, classifier and lexicon
from __future__ import annotations
import logging
from typing import Optional, Tuple

from .. import config
from ..features.classify import determine_sentiment_label, estimate_confidence
from ..features.lexicon import LexiconProvider
from ..features.results import SentimentResult, NEUTRAL
from ..features.rules import RuleTable
from ..features.sentiment import SentimentEngine
from ..features.tokenizer import TextSettings

log = logging.getLogger(__name__)


class SentimentAnalysisService:
    """Caller-facing API: score, label and confidence for one text."""

    def __init__(self, provider: LexiconProvider,
                 rules: Optional[RuleTable] = None,
                 settings: Optional[TextSettings] = None,
                 thresholds: Tuple[float, float] = (0.1, -0.1)):
        self.provider = provider
        self.engine = SentimentEngine(provider, rules, settings)
        self.positive_threshold, self.negative_threshold = thresholds

    @classmethod
    def from_config(cls) -> "SentimentAnalysisService":
        """Wire everything from environment configuration (raises ConfigError on bad values)."""
        settings = config.load_text_settings()
        rules = config.load_rule_table()
        thresholds = config.load_thresholds()
        provider = LexiconProvider(
            positive_source=config.POSITIVE_WORDS_PATH,
            negative_source=config.NEGATIVE_WORDS_PATH,
            positive_words=config.POSITIVE_WORDS,
            negative_words=config.NEGATIVE_WORDS,
            case_sensitive=settings.case_sensitive,
        )
        return cls(provider, rules, settings, thresholds)

    def calculate_sentiment_score(self, text: Optional[str]) -> float:
        return self.engine.calculate_sentiment_score(text)

    def determine_sentiment_label(self, score: float) -> str:
        return determine_sentiment_label(score, self.positive_threshold, self.negative_threshold)

    def analyze_sentiment(self, text: Optional[str], include_confidence: bool = True) -> SentimentResult:
        """Blank text is NEUTRAL with score 0.0 (confidence 1.0 when requested)."""
        if text is None or not text.strip():
            return SentimentResult(NEUTRAL, 1.0 if include_confidence else 0.0, 0.0)
        log.debug("Starting sentiment analysis for text of length: %d", len(text))
        detail = self.engine.score_detail(text)
        label = self.determine_sentiment_label(detail.score)
        confidence = estimate_confidence(detail.score, detail.token_count) if include_confidence else 0.0
        result = SentimentResult(label, confidence, detail.score)
        log.debug("Sentiment analysis completed: %s (raw=%.3f, phrases=%d)",
                  result, detail.raw_score, len(detail.phrase_matches))
        return result

    def refresh_word_lists(self):
        """Reload word lists; in-flight calls keep the snapshot they started with."""
        log.info("Refreshing word lists")
        return self.provider.refresh()
