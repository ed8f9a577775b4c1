# features/context.py
# Per-call scoring state carried through the token walk (never shared between calls)
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class PendingNegation:
    """Flips every sentiment word until `remaining` tokens have passed."""
    remaining: int


@dataclass
class PendingIntensity:
    """Booster/dampener waiting for the next sentiment word (single use)."""
    delta: float                    # summed +|booster| / -|dampener| values
    remaining: int

    @property
    def factor(self) -> float:
        return max(0.0, 1.0 + self.delta)


@dataclass
class ScoringContext:
    total: float = 0.0              # committed contributions
    segment_total: float = 0.0      # contributions since the last break/contrastive
    negation: Optional[PendingNegation] = None
    intensity: Optional[PendingIntensity] = None
    emphasis_remaining: int = 0     # tokens left in the post-contrastive window

    # ---------- Window bookkeeping ----------
    def tick(self):
        """One token passed: count down every armed window."""
        if self.negation is not None:
            self.negation.remaining -= 1
            if self.negation.remaining <= 0:
                self.negation = None
        if self.intensity is not None:
            self.intensity.remaining -= 1
            if self.intensity.remaining <= 0:
                self.intensity = None
        if self.emphasis_remaining > 0:
            self.emphasis_remaining -= 1

    def clear_modifiers(self):
        self.negation = None
        self.intensity = None

    def arm_negation(self, window: int):
        """Arm negation unless one is already running."""
        if self.negation is None:
            self.negation = PendingNegation(remaining=window)

    def stack_intensity(self, delta: float, window: int):
        """Adjacent intensifiers accumulate; the window restarts at the newest one."""
        base = self.intensity.delta if self.intensity is not None else 0.0
        self.intensity = PendingIntensity(delta=base + delta, remaining=window)

    # ---------- Contributions ----------
    def contribute(self, polarity: int, emphasis: float):
        """Apply intensity (then consume it), negation and contrastive emphasis to a ±1 word."""
        value = float(polarity)
        if self.intensity is not None:
            value *= self.intensity.factor
            self.intensity = None
        if self.negation is not None:
            value = -value
        if self.emphasis_remaining > 0:
            value *= emphasis
        self.segment_total += value

    # ---------- Segments ----------
    def sentence_break(self):
        """Hard reset at sentence punctuation: keep the segment, drop all modifiers."""
        self.total += self.segment_total
        self.segment_total = 0.0
        self.emphasis_remaining = 0
        self.clear_modifiers()

    def contrast(self, discount: float, window: int):
        """Down-weight the clause before a contrastive conjunction and open the emphasis window."""
        self.total += self.segment_total * discount
        self.segment_total = 0.0
        self.emphasis_remaining = window
        self.clear_modifiers()

    def finish(self) -> float:
        """Commit the open segment and return the raw walker total."""
        self.total += self.segment_total
        self.segment_total = 0.0
        return self.total
