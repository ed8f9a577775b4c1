# core/router.py: request payloads -> service calls -> JSON-ready bodies
from __future__ import annotations
from typing import Dict, Any, Tuple, Optional

from .service import SentimentAnalysisService


class PayloadError(ValueError):
    """Request body cannot be analyzed (reported as HTTP 400)."""


def _latest_user(payload: Dict[str, Any]) -> Optional[str]:
    # Chat-style payloads: analyze the newest user message
    messages = payload.get("messages") or []
    if not isinstance(messages, list):
        raise PayloadError("'messages' must be a list")
    for m in reversed(messages):
        if isinstance(m, dict) and m.get("role") == "user":
            return m.get("content", "")
    return None


def _extract_text(payload: Dict[str, Any]) -> str:
    if "text" in payload:
        text = payload["text"]
    else:
        text = _latest_user(payload)
    if text is None:
        raise PayloadError("payload needs a 'text' field or a user message")
    if not isinstance(text, str):
        raise PayloadError("'text' must be a string")
    return text


def _flag(payload: Dict[str, Any], key: str, default: bool) -> bool:
    v = payload.get(key, default)
    if not isinstance(v, bool):
        raise PayloadError(f"'{key}' must be a boolean")
    return v


def route_sentiment(payload: Dict[str, Any], service: SentimentAnalysisService) -> Dict[str, Any]:
    """Analyze one text; confidence fields are omitted when not requested."""
    text = _extract_text(payload)
    include_confidence = _flag(payload, "include_confidence", True)
    result = service.analyze_sentiment(text, include_confidence=include_confidence)
    body: Dict[str, Any] = {"label": result.label, "score": result.score}
    if include_confidence:
        body["confidence"] = result.confidence
        body["confidence_level"] = result.confidence_level
    return body


def route_refresh(service: SentimentAnalysisService) -> Dict[str, Any]:
    lexicon = service.refresh_word_lists()
    return {"positive": len(lexicon.positive_words), "negative": len(lexicon.negative_words)}


def route_request(path: str, payload: Dict[str, Any],
                  service: SentimentAnalysisService) -> Tuple[Dict[str, Any], int]:
    """Dispatch by path; returns (body, status)."""
    try:
        if path == "/v1/sentiment":
            if not isinstance(payload, dict):
                raise PayloadError("JSON object expected")
            return route_sentiment(payload, service), 200
        if path == "/v1/lexicon/refresh":
            return route_refresh(service), 200
    except PayloadError as e:
        return {"error": str(e)}, 400
    return {"error": f"unknown route {path}"}, 404
