# features/rules.py
# Rule table: boosters, dampeners, negations, contrastives, punctuation breaks and phrase weights
from __future__ import annotations
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, FrozenSet, Dict, Any, Iterable

# Intensifiers: magnitude added to a following sentiment word
DEFAULT_BOOSTERS: Dict[str, float] = {
    "extremely": 0.30, "incredibly": 0.30,
    "very": 0.29,
    "really": 0.27, "highly": 0.27,
    "so": 0.25, "totally": 0.25, "completely": 0.25, "utterly": 0.25, "absolutely": 0.25,
    "too": 0.20,
}

# Diminishers: negative deltas pulling a following sentiment word toward zero
DEFAULT_DAMPENERS: Dict[str, float] = {
    "slightly": -0.29,
    "somewhat": -0.27,
    "bit": -0.25, "little": -0.25, "mildly": -0.25,
    "rather": -0.20, "fairly": -0.20, "kinda": -0.20,
    "quite": -0.15,
    "average": -0.10,
}

DEFAULT_NEGATIONS = frozenset({
    "not", "no", "never", "none", "nobody", "nothing", "neither", "nowhere",
    "hardly", "scarcely", "barely", "cannot",
    "isnt", "isn't", "arent", "aren't", "wasnt", "wasn't", "werent", "weren't",
    "dont", "don't", "doesnt", "doesn't", "didnt", "didn't", "cant", "can't",
    "couldnt", "couldn't", "wont", "won't", "wouldnt", "wouldn't",
    "shouldnt", "shouldn't", "hasnt", "hasn't", "havent", "haven't", "hadnt", "hadn't",
})

DEFAULT_CONTRASTIVES = frozenset({"but", "however", "though", "yet"})

DEFAULT_PUNCTUATION_BREAKS = frozenset({".", "!", "?", ",", ";", ":"})

# Fixed-weight expressions; insertion order breaks equal-length ties.
# "not only" / "not without" carry zero weight so they never arm negation.
DEFAULT_PHRASES: Dict[str, float] = {
    "waste of time": -1.5,
    "poorly communicated": -1.0,
    "customer support unresponsive": -1.2,
    "fell apart": -1.2,
    "not good": -0.8,
    "worth recommending": 0.6,
    "hard to believe": -0.8,
    "total disappointment": -1.5,
    "more bugs than it fixed": -1.3,
    "performance has drastically worsened": -1.4,
    "not only": 0.0,
    "not without": 0.0,
}


def _frozen_map(m: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(m))


@dataclass(frozen=True)
class RuleTable:
    """Immutable rule configuration read by the scoring walker."""
    boosters: Mapping[str, float] = field(default_factory=lambda: _frozen_map(DEFAULT_BOOSTERS))
    dampeners: Mapping[str, float] = field(default_factory=lambda: _frozen_map(DEFAULT_DAMPENERS))
    negations: FrozenSet[str] = DEFAULT_NEGATIONS
    contrastives: FrozenSet[str] = DEFAULT_CONTRASTIVES
    punctuation_breaks: FrozenSet[str] = DEFAULT_PUNCTUATION_BREAKS
    phrases: Mapping[str, float] = field(default_factory=lambda: _frozen_map(DEFAULT_PHRASES))
    negation_window: int = 3
    contrastive_window: int = 10
    normalization_alpha: float = 3.0
    modifier_window: int = 2            # tokens a booster/dampener waits for its sentiment word
    contrastive_discount: float = 0.5   # share of the pre-conjunction segment that is kept
    contrastive_emphasis: float = 1.2   # multiplier inside the post-conjunction window

    def __post_init__(self):
        # Coerce plain containers so callers may pass dicts/lists
        object.__setattr__(self, "boosters", _frozen_map(self.boosters))
        object.__setattr__(self, "dampeners", _frozen_map(self.dampeners))
        object.__setattr__(self, "phrases", _frozen_map(self.phrases))
        object.__setattr__(self, "negations", frozenset(self.negations))
        object.__setattr__(self, "contrastives", frozenset(self.contrastives))
        object.__setattr__(self, "punctuation_breaks", frozenset(self.punctuation_breaks))

    def validate(self) -> "RuleTable":
        """Raise ValueError on invariant violations; return self for chaining."""
        for name in ("negation_window", "contrastive_window", "modifier_window"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool) or v <= 0:
                raise ValueError(f"{name} must be a positive integer, got {v!r}")
        if not self.normalization_alpha > 0:
            raise ValueError(f"normalization_alpha must be > 0, got {self.normalization_alpha!r}")
        if not 0.0 <= self.contrastive_discount <= 1.0:
            raise ValueError(f"contrastive_discount must be within [0, 1], got {self.contrastive_discount!r}")
        if not self.contrastive_emphasis >= 1.0:
            raise ValueError(f"contrastive_emphasis must be >= 1, got {self.contrastive_emphasis!r}")
        for table in ("boosters", "dampeners", "phrases"):
            for k, v in getattr(self, table).items():
                if not k or not k.strip():
                    raise ValueError(f"{table} contains a blank key")
                if isinstance(v, bool) or not isinstance(v, (int, float)):
                    raise ValueError(f"{table}[{k!r}] must be numeric, got {v!r}")
        return self

    def casefolded(self) -> "RuleTable":
        """Copy with every word/phrase key lowercased (case-insensitive matching)."""
        return replace(
            self,
            boosters=_lower_keys(self.boosters),
            dampeners=_lower_keys(self.dampeners),
            phrases=_lower_keys(self.phrases),
            negations=_lower_all(self.negations),
            contrastives=_lower_all(self.contrastives),
            punctuation_breaks=_lower_all(self.punctuation_breaks),
        )


def _lower_keys(m: Mapping[str, float]) -> Dict[str, float]:
    out: Dict[str, float] = {}
    for k, v in m.items():
        out.setdefault(k.lower(), v)   # first spelling wins on collisions
    return out


def _lower_all(words: Iterable[str]) -> FrozenSet[str]:
    return frozenset(w.lower() for w in words)


def rule_table_from_dict(data: Dict[str, Any], base: RuleTable | None = None) -> RuleTable:
    """Overlay known keys from a plain dict (e.g. parsed JSON) on top of a base table."""
    base = base or RuleTable()
    known = {f for f in RuleTable.__dataclass_fields__}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"unknown rule keys: {sorted(unknown)}")
    return replace(base, **data).validate()
