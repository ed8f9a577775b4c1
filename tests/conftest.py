# tests/conftest.py
import pytest

from lexiscore.core.service import SentimentAnalysisService
from lexiscore.features.lexicon import Lexicon, LexiconProvider
from lexiscore.features.rules import RuleTable
from lexiscore.features.sentiment import SentimentEngine
from lexiscore.features.tokenizer import TextSettings

POSITIVE = ["good", "great", "excellent", "happy"]
NEGATIVE = ["bad", "terrible", "awful", "sad"]


@pytest.fixture
def lexicon():
    return Lexicon.build(POSITIVE, NEGATIVE)


@pytest.fixture
def provider():
    return LexiconProvider.from_words(POSITIVE, NEGATIVE)


@pytest.fixture
def engine(lexicon):
    """Default rules (phrases included)."""
    return SentimentEngine(lexicon, RuleTable(), TextSettings())


@pytest.fixture
def bare_engine(lexicon):
    """No phrase overrides, so token-level rules are visible."""
    return SentimentEngine(lexicon, RuleTable(phrases={}), TextSettings())


@pytest.fixture
def service(provider):
    return SentimentAnalysisService(provider, RuleTable(), TextSettings())
