from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from emotion_engine.model import EmotionalRecognitionResult

logger = logging.getLogger(__name__)

EMOTIONAL_STATE_CATEGORY = "EMOTIONAL_STATE"
NO_EMOTION = "NONE"


@dataclass(frozen=True, slots=True)
class EmotionRecord:
    """What the engine hands to the storage collaborator after each call."""

    text: str
    content: str
    category: str
    primary_emotion: str
    secondary_emotion: str
    valence: float
    arousal: float
    dominance: float
    confidence: float
    timestamp: datetime

    @classmethod
    def from_result(cls, text: str, result: EmotionalRecognitionResult) -> EmotionRecord:
        return cls(
            text=text,
            content=f"Emotional state: {result.primary_emotion.display_name}",
            category=EMOTIONAL_STATE_CATEGORY,
            primary_emotion=result.primary_emotion.value,
            secondary_emotion=result.secondary_emotion.value if result.secondary_emotion else NO_EMOTION,
            valence=result.dimensions.valence,
            arousal=result.dimensions.arousal,
            dominance=result.dimensions.dominance,
            confidence=result.confidence_score,
            timestamp=result.timestamp,
        )

    def to_metadata(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "primaryEmotion": self.primary_emotion,
            "secondaryEmotion": self.secondary_emotion,
            "valence": round(self.valence, 3),
            "arousal": round(self.arousal, 3),
            "dominance": round(self.dominance, 3),
            "confidence": round(self.confidence, 3),
            "timestamp": self.timestamp.isoformat(),
        }


class EmotionRecorder(Protocol):
    def record(self, record: EmotionRecord) -> None: ...


class LoggingRecorder:
    """Recorder that only writes each record to the log."""

    def record(self, record: EmotionRecord) -> None:
        logger.info(
            "%s: %s (secondary=%s) valence=%.2f arousal=%.2f dominance=%.2f confidence=%.2f",
            record.category,
            record.primary_emotion,
            record.secondary_emotion,
            record.valence,
            record.arousal,
            record.dominance,
            record.confidence,
        )
