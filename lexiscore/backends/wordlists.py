# backends/wordlists.py
# Word-list sources: local files, http(s) URLs, bundled package data
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Iterable

import requests

from ..config import REQUEST_TIMEOUT_S

log = logging.getLogger(__name__)

# Bundled fallback lists
DATA_DIR = Path(__file__).resolve().parent.parent / "data"
BUNDLED_POSITIVE = DATA_DIR / "positive-words.txt"
BUNDLED_NEGATIVE = DATA_DIR / "negative-words.txt"


def parse_word_lines(lines: Iterable[str]) -> List[str]:
    """Trimmed, non-empty lines that are not '#' comments."""
    words: List[str] = []
    for line in lines:
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        words.append(w)
    return words


def _fetch_url(url: str) -> List[str]:
    r = requests.get(url, timeout=REQUEST_TIMEOUT_S)
    r.raise_for_status()   # propagate HTTP errors to the caller's guard
    r.encoding = r.encoding or "utf-8"
    return parse_word_lines(r.text.splitlines())


def _read_file(path: Path) -> List[str]:
    with path.open(encoding="utf-8-sig") as f:
        return parse_word_lines(f)


def load_words(source: Optional[str]) -> List[str]:
    """
    Load words from a local path or http(s) URL.
    Missing/unreachable sources are logged and yield [] so callers can fall back.
    """
    if not source or not source.strip():
        log.debug("Word list source is blank")
        return []
    src = source.strip()
    if src.startswith(("http://", "https://")):
        try:
            return _fetch_url(src)
        except requests.RequestException as e:
            log.warning("Failed to fetch word list %s: %s", src, e)
            return []
    path = Path(src).expanduser()
    if not path.is_file():
        log.warning("Word list file not found: %s", src)
        return []
    try:
        return _read_file(path)
    except (OSError, UnicodeDecodeError) as e:
        log.error("Failed to read word list %s: %s", src, e)
        return []


def load_bundled(positive: bool) -> List[str]:
    """Default list shipped with the package."""
    return _read_file(BUNDLED_POSITIVE if positive else BUNDLED_NEGATIVE)
