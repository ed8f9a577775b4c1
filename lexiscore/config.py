import os
import json
import re
from pathlib import Path
from dotenv import load_dotenv

from .features.rules import RuleTable, rule_table_from_dict
from .features.tokenizer import TextSettings, DEFAULT_WORD_SEPARATOR

load_dotenv()  # load variables from .env into environment


class ConfigError(ValueError):
    """Invalid configuration detected while loading settings."""


def _flag(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {v!r}") from None


def _int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {v!r}") from None


def _words(name: str) -> list[str]:
    v = os.getenv(name) or ""
    return [w.strip() for w in v.split(",") if w.strip()]


# text processing
CASE_SENSITIVE     = _flag("LEXISCORE_CASE_SENSITIVE", False)
WORD_SEPARATOR     = os.getenv("LEXISCORE_WORD_SEPARATOR") or DEFAULT_WORD_SEPARATOR
NORMALIZE_HYPHENS  = _flag("LEXISCORE_NORMALIZE_HYPHENS", False)
HYPHEN_REPLACEMENT = os.getenv("LEXISCORE_HYPHEN_REPLACEMENT", " ")

# label thresholds (inclusive)
POSITIVE_THRESHOLD = _float("LEXISCORE_POSITIVE_THRESHOLD", 0.1)
NEGATIVE_THRESHOLD = _float("LEXISCORE_NEGATIVE_THRESHOLD", -0.1)

# word lists: file/URL sources, then inline comma lists, then bundled data
POSITIVE_WORDS_PATH = os.getenv("LEXISCORE_POSITIVE_WORDS_PATH")
NEGATIVE_WORDS_PATH = os.getenv("LEXISCORE_NEGATIVE_WORDS_PATH")
POSITIVE_WORDS      = _words("LEXISCORE_POSITIVE_WORDS")
NEGATIVE_WORDS      = _words("LEXISCORE_NEGATIVE_WORDS")

# rule-table overrides (JSON object keyed by RuleTable field names)
RULES_PATH = os.getenv("LEXISCORE_RULES_PATH")

# app settings
LOG_LEVEL         = os.getenv("LEXISCORE_LOG_LEVEL", "INFO").upper()
REQUEST_TIMEOUT_S = _float("REQUEST_TIMEOUT_S", 10.0)
HOST              = os.getenv("HOST", "0.0.0.0")
PORT              = _int("PORT", 5100)


def load_text_settings(word_separator: str | None = None,
                       case_sensitive: bool | None = None,
                       normalize_hyphens: bool | None = None,
                       hyphen_replacement: str | None = None) -> TextSettings:
    """Build tokenizer settings from env defaults; explicit arguments win."""
    sep = word_separator if word_separator is not None else WORD_SEPARATOR
    try:
        return TextSettings(
            word_separator=sep,
            case_sensitive=CASE_SENSITIVE if case_sensitive is None else case_sensitive,
            normalize_hyphens=NORMALIZE_HYPHENS if normalize_hyphens is None else normalize_hyphens,
            hyphen_replacement=HYPHEN_REPLACEMENT if hyphen_replacement is None else hyphen_replacement,
        )
    except re.error as e:
        raise ConfigError(f"invalid word separator {sep!r}: {e}") from e


def load_thresholds(positive: float | None = None, negative: float | None = None) -> tuple[float, float]:
    """Return (positive, negative) label thresholds; positive must exceed negative."""
    pos = POSITIVE_THRESHOLD if positive is None else positive
    neg = NEGATIVE_THRESHOLD if negative is None else negative
    if pos <= neg:
        raise ConfigError(f"positive threshold ({pos}) must be greater than negative threshold ({neg})")
    return pos, neg


def load_rule_table(path: str | None = None) -> RuleTable:
    """Default rule table overlaid with the JSON rules file (if any), validated."""
    src = path if path is not None else RULES_PATH
    data: dict = {}
    if src:
        try:
            data = json.loads(Path(src).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"cannot read rules file {src}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"rules file {src} must hold a JSON object")
    try:
        return rule_table_from_dict(data)
    except (ValueError, TypeError) as e:
        raise ConfigError(f"invalid rule table: {e}") from e
