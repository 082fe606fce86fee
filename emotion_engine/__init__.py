from __future__ import annotations

from emotion_engine.engine import EmotionEngine
from emotion_engine.model import (
    Emotion,
    EmotionalDimensions,
    EmotionalRecognitionResult,
    EmotionalTrend,
    TrendDirection,
)
from emotion_engine.mood.history import HistoryTracker
from emotion_engine.recording import EmotionRecord, EmotionRecorder

__all__ = [
    "Emotion",
    "EmotionEngine",
    "EmotionRecord",
    "EmotionRecorder",
    "EmotionalDimensions",
    "EmotionalRecognitionResult",
    "EmotionalTrend",
    "HistoryTracker",
    "TrendDirection",
]
