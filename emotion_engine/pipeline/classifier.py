"""Rule-based classification of a VAD point plus confidence scoring.

Both rule lists are ordered decision lists: the first rule whose region
contains the point wins. Rule order is the tie-break between overlapping
regions, so new rules must be inserted deliberately. Points outside every
primary region fall through to ``NEUTRAL``.

The secondary pass uses looser thresholds and returns the first match
whose label differs from the primary one, which captures blended affect
(e.g. mostly calm with an undertone of interest).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from emotion_engine.defaults import CONSISTENCY_BONUS, DISTANCE_WEIGHT, SIGNAL_STRENGTH_WEIGHT
from emotion_engine.model import Emotion, EmotionalDimensions
from emotion_engine.utils.math import clamp_unit, mean

Rule = tuple[Emotion, Callable[[float, float, float], bool]]

PRIMARY_RULES: tuple[Rule, ...] = (
    # Positive valence
    (Emotion.JOY, lambda v, a, d: v > 0.5 and a > 0.5 and d > 0.5),
    (Emotion.EXCITEMENT, lambda v, a, d: v > 0.5 and a > 0.5 and d < -0.3),
    (Emotion.CONTENTMENT, lambda v, a, d: v > 0.5 and a < -0.3 and d > 0.3),
    (Emotion.RELAXATION, lambda v, a, d: v > 0.5 and a < -0.3 and d < -0.3),
    (Emotion.PRIDE, lambda v, a, d: v > 0.5 and abs(a) < 0.3 and d > 0.5),
    (Emotion.GRATITUDE, lambda v, a, d: v > 0.5 and abs(a) < 0.3 and d < -0.3),
    # Negative valence
    (Emotion.ANGER, lambda v, a, d: v < -0.5 and a > 0.5 and d > 0.5),
    (Emotion.FEAR, lambda v, a, d: v < -0.5 and a > 0.5 and d < -0.3),
    (Emotion.SADNESS, lambda v, a, d: v < -0.5 and a < -0.3 and d < -0.3),
    (Emotion.DISAPPOINTMENT, lambda v, a, d: v < -0.5 and a < -0.3 and d > 0.3),
    (Emotion.CONTEMPT, lambda v, a, d: v < -0.5 and abs(a) < 0.3 and d > 0.5),
    (Emotion.SHAME, lambda v, a, d: v < -0.5 and abs(a) < 0.3 and d < -0.3),
    # Near-neutral valence
    (Emotion.SURPRISE, lambda v, a, d: abs(v) < 0.3 and a > 0.5 and d > 0.3),
    (Emotion.ANXIETY, lambda v, a, d: abs(v) < 0.3 and a > 0.5 and d < -0.3),
    (Emotion.BOREDOM, lambda v, a, d: abs(v) < 0.3 and a < -0.3 and d > 0.3),
    (Emotion.FATIGUE, lambda v, a, d: abs(v) < 0.3 and a < -0.3 and d < -0.3),
)

SECONDARY_RULES: tuple[Rule, ...] = (
    (Emotion.JOY, lambda v, a, d: v > 0.3 and a > 0.3),
    (Emotion.CONTENTMENT, lambda v, a, d: v > 0.3 and a < -0.1),
    (Emotion.SADNESS, lambda v, a, d: v < -0.3 and a < -0.1),
    (Emotion.ANGER, lambda v, a, d: v < -0.3 and a > 0.3 and d > 0.1),
    (Emotion.FEAR, lambda v, a, d: v < -0.3 and a > 0.3 and d < -0.1),
    (Emotion.SURPRISE, lambda v, a, d: abs(v) < 0.4 and a > 0.4),
    (Emotion.PRIDE, lambda v, a, d: v > 0.3 and d > 0.4),
    (Emotion.SHAME, lambda v, a, d: v < -0.3 and d < -0.4),
    (Emotion.INTEREST, lambda v, a, d: v > 0.1 and a > 0.1 and d > 0.1),
    (Emotion.CONFUSION, lambda v, a, d: v < -0.1 and a > 0.1 and d < -0.1),
    (Emotion.ANTICIPATION, lambda v, a, d: v > 0.1 and a > 0.1),
    (Emotion.DISAPPOINTMENT, lambda v, a, d: v < -0.1 and a < -0.1),
)


@dataclass(frozen=True, slots=True)
class EmotionClassification:
    primary: Emotion
    secondary: Emotion | None = None


def classify_primary(dimensions: EmotionalDimensions) -> Emotion:
    v, a, d = dimensions.as_tuple()
    for emotion, rule in PRIMARY_RULES:
        if rule(v, a, d):
            return emotion
    return Emotion.NEUTRAL


def classify_secondary(dimensions: EmotionalDimensions, primary: Emotion) -> Emotion | None:
    v, a, d = dimensions.as_tuple()
    for emotion, rule in SECONDARY_RULES:
        if emotion is not primary and rule(v, a, d):
            return emotion
    return None


def classify(dimensions: EmotionalDimensions) -> EmotionClassification:
    primary = classify_primary(dimensions)
    return EmotionClassification(primary=primary, secondary=classify_secondary(dimensions, primary))


def confidence_score(dimensions: EmotionalDimensions, primary: Emotion) -> float:
    """Signal strength + clarity (distance from neutral) + consistency bonus, in [0, 1]."""
    signal_strength = mean([abs(x) for x in dimensions.as_tuple()])
    bonus = CONSISTENCY_BONUS if primary.is_consistent_with(dimensions) else 0.0
    raw = (
        SIGNAL_STRENGTH_WEIGHT * signal_strength
        + DISTANCE_WEIGHT * dimensions.distance_from_neutral()
        + bonus
    )
    return clamp_unit(raw)
