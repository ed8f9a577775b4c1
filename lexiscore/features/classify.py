# features/classify.py
# Score -> label, and score/length -> confidence
from __future__ import annotations

from .results import POSITIVE, NEGATIVE, NEUTRAL


def determine_sentiment_label(score: float, positive_threshold: float = 0.1,
                              negative_threshold: float = -0.1) -> str:
    """Inclusive thresholds; threshold ordering is the config loader's job."""
    if score >= positive_threshold:
        return POSITIVE
    if score <= negative_threshold:
        return NEGATIVE
    return NEUTRAL


def estimate_confidence(score: float, token_count: int) -> float:
    """Stronger scores and longer texts raise confidence; bounded to [0.1, 0.95]."""
    sentiment_confidence = min(0.9, 0.1 + abs(score) * 0.8)
    length_factor = min(0.8, 0.3 + token_count / 15.0)
    return max(0.1, min(0.95, sentiment_confidence * length_factor))
