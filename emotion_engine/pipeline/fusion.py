from __future__ import annotations

import math
from dataclasses import dataclass

from emotion_engine.defaults import CONTEXTUAL_WEIGHT, LEXICAL_WEIGHT, PATTERN_WEIGHT
from emotion_engine.model import EmotionalDimensions


@dataclass(frozen=True, slots=True)
class FusionWeights:
    lexical: float = LEXICAL_WEIGHT
    pattern: float = PATTERN_WEIGHT
    contextual: float = CONTEXTUAL_WEIGHT

    def __post_init__(self) -> None:
        if min(self.lexical, self.pattern, self.contextual) < 0:
            raise ValueError("fusion weights must be non-negative")
        if not math.isclose(self.lexical + self.pattern + self.contextual, 1.0, abs_tol=1e-6):
            raise ValueError(
                f"fusion weights must sum to 1.0, got {self.lexical + self.pattern + self.contextual:.3f}"
            )

    @classmethod
    def parse(cls, raw: str) -> FusionWeights:
        """Build weights from a ``"lexical,pattern,contextual"`` string."""
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        if len(parts) != 3:
            raise ValueError(f"expected three comma-separated weights, got {raw!r}")
        lexical, pattern, contextual = (float(p) for p in parts)
        return cls(lexical=lexical, pattern=pattern, contextual=contextual)


DEFAULT_WEIGHTS = FusionWeights()


def combine(
    lexical: EmotionalDimensions,
    pattern: EmotionalDimensions,
    contextual: EmotionalDimensions,
    weights: FusionWeights = DEFAULT_WEIGHTS,
) -> EmotionalDimensions:
    """Weighted sum of the three stage estimates; clamped by the result type."""
    return EmotionalDimensions(
        valence=lexical.valence * weights.lexical
        + pattern.valence * weights.pattern
        + contextual.valence * weights.contextual,
        arousal=lexical.arousal * weights.lexical
        + pattern.arousal * weights.pattern
        + contextual.arousal * weights.contextual,
        dominance=lexical.dominance * weights.lexical
        + pattern.dominance * weights.pattern
        + contextual.dominance * weights.contextual,
    )
