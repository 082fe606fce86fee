from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from emotion_engine.defaults import HIGH_CONFIDENCE, LOW_CONFIDENCE, MEDIUM_CONFIDENCE
from emotion_engine.utils.math import clamp, vector_norm

_SQRT_3 = math.sqrt(3.0)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class EmotionalDimensions:
    """Point in valence / arousal / dominance space, every axis in [-1, 1]."""

    valence: float = 0.0
    arousal: float = 0.0
    dominance: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "valence", clamp(float(self.valence)))
        object.__setattr__(self, "arousal", clamp(float(self.arousal)))
        object.__setattr__(self, "dominance", clamp(float(self.dominance)))

    def distance_from_neutral(self) -> float:
        """Euclidean distance from the origin, normalised to [0, 1]."""
        return vector_norm(self.as_tuple()) / _SQRT_3

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.valence, self.arousal, self.dominance)


NEUTRAL_DIMENSIONS = EmotionalDimensions()


class Emotion(str, Enum):
    JOY = "JOY"
    SADNESS = "SADNESS"
    ANGER = "ANGER"
    FEAR = "FEAR"
    DISGUST = "DISGUST"
    SURPRISE = "SURPRISE"
    CONTENTMENT = "CONTENTMENT"
    EXCITEMENT = "EXCITEMENT"
    RELAXATION = "RELAXATION"
    DISAPPOINTMENT = "DISAPPOINTMENT"
    CONFUSION = "CONFUSION"
    INTEREST = "INTEREST"
    ANTICIPATION = "ANTICIPATION"
    BOREDOM = "BOREDOM"
    PRIDE = "PRIDE"
    SHAME = "SHAME"
    GUILT = "GUILT"
    ENVY = "ENVY"
    GRATITUDE = "GRATITUDE"
    ANXIETY = "ANXIETY"
    CONTEMPT = "CONTEMPT"
    HOPE = "HOPE"
    LOVE = "LOVE"
    FATIGUE = "FATIGUE"
    FRUSTRATION = "FRUSTRATION"
    AMUSEMENT = "AMUSEMENT"
    TRUST = "TRUST"
    NEUTRAL = "NEUTRAL"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def is_consistent_with(self, dimensions: EmotionalDimensions) -> bool:
        """Whether the sign of the matching VAD axis agrees with this label."""
        if self in POSITIVE_VALENCE:
            return dimensions.valence > 0
        if self in NEGATIVE_VALENCE:
            return dimensions.valence < 0
        if self in LOW_AROUSAL:
            return dimensions.arousal < 0
        return True


# Label groups shared by the consistency predicate and the lexical VAD
# conversion.
POSITIVE_VALENCE: frozenset[Emotion] = frozenset({
    Emotion.JOY, Emotion.CONTENTMENT, Emotion.EXCITEMENT, Emotion.RELAXATION,
    Emotion.PRIDE, Emotion.GRATITUDE, Emotion.INTEREST, Emotion.ANTICIPATION,
    Emotion.HOPE, Emotion.LOVE, Emotion.AMUSEMENT, Emotion.TRUST,
})
NEGATIVE_VALENCE: frozenset[Emotion] = frozenset({
    Emotion.SADNESS, Emotion.ANGER, Emotion.FEAR, Emotion.DISGUST,
    Emotion.DISAPPOINTMENT, Emotion.SHAME, Emotion.GUILT, Emotion.ENVY,
    Emotion.ANXIETY, Emotion.CONTEMPT, Emotion.FRUSTRATION,
})
HIGH_AROUSAL: frozenset[Emotion] = frozenset({
    Emotion.EXCITEMENT, Emotion.ANGER, Emotion.FEAR, Emotion.SURPRISE,
    Emotion.ANXIETY, Emotion.FRUSTRATION, Emotion.JOY,
})
LOW_AROUSAL: frozenset[Emotion] = frozenset({
    Emotion.CONTENTMENT, Emotion.RELAXATION, Emotion.SADNESS,
    Emotion.BOREDOM, Emotion.FATIGUE,
})
HIGH_DOMINANCE: frozenset[Emotion] = frozenset({
    Emotion.PRIDE, Emotion.ANGER, Emotion.CONTEMPT, Emotion.TRUST,
})
LOW_DOMINANCE: frozenset[Emotion] = frozenset({
    Emotion.FEAR, Emotion.SHAME, Emotion.GUILT, Emotion.ANXIETY,
})


class TrendDirection(str, Enum):
    INCREASING = "INCREASING"
    STABLE = "STABLE"
    DECREASING = "DECREASING"


@dataclass(frozen=True, slots=True)
class EmotionalRecognitionResult:
    dimensions: EmotionalDimensions
    primary_emotion: Emotion
    secondary_emotion: Emotion | None = None
    confidence_score: float = 0.0
    timestamp: datetime = field(default_factory=utc_now)

    @property
    def confidence_level(self) -> str:
        if self.confidence_score >= HIGH_CONFIDENCE:
            return "very_high"
        if self.confidence_score >= MEDIUM_CONFIDENCE:
            return "high"
        if self.confidence_score >= LOW_CONFIDENCE:
            return "medium"
        return "low"

    def to_metadata(self) -> dict[str, Any]:
        return {
            "primary_emotion": self.primary_emotion.value,
            "secondary_emotion": self.secondary_emotion.value if self.secondary_emotion else None,
            "valence": round(self.dimensions.valence, 3),
            "arousal": round(self.dimensions.arousal, 3),
            "dominance": round(self.dimensions.dominance, 3),
            "confidence": round(self.confidence_score, 3),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class EmotionalTrend:
    dominant_emotion: Emotion
    valence_direction: TrendDirection
    arousal_direction: TrendDirection
    dominance_direction: TrendDirection
    confidence: float
    sample_count: int = 0


NEUTRAL_TREND = EmotionalTrend(
    dominant_emotion=Emotion.NEUTRAL,
    valence_direction=TrendDirection.STABLE,
    arousal_direction=TrendDirection.STABLE,
    dominance_direction=TrendDirection.STABLE,
    confidence=0.0,
)
