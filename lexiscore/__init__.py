"""Lexicon-based sentiment scoring: windowed negation/intensity rules, phrase overrides, labels."""
from .core.service import SentimentAnalysisService
from .features.lexicon import Lexicon, LexiconProvider
from .features.results import SentimentResult
from .features.rules import RuleTable
from .features.sentiment import SentimentEngine
from .features.tokenizer import TextSettings

__version__ = "0.1.0"
