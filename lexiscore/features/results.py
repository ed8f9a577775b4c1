# features/results.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any

POSITIVE = "POSITIVE"
NEGATIVE = "NEGATIVE"
NEUTRAL = "NEUTRAL"

# Confidence bands
HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6


@dataclass(frozen=True)
class SentimentResult:
    """Label, confidence in [0, 1] and score in [-1, 1] for one analyzed text."""
    label: str
    confidence: float
    score: float

    def __post_init__(self):
        if not self.label or not self.label.strip():
            raise ValueError("Sentiment label cannot be null or blank")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("Confidence must be between 0.0 and 1.0")
        if not -1.0 <= self.score <= 1.0:
            raise ValueError("Score must be between -1.0 and 1.0")

    @property
    def confidence_level(self) -> str:
        if self.confidence >= HIGH_CONFIDENCE:
            return "HIGH"
        if self.confidence >= MEDIUM_CONFIDENCE:
            return "MEDIUM"
        return "LOW"

    @property
    def is_positive(self) -> bool:
        return self.label == POSITIVE

    @property
    def is_negative(self) -> bool:
        return self.label == NEGATIVE

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["confidence_level"] = self.confidence_level
        return d
