from __future__ import annotations

import logging
from datetime import timedelta

from config import (
    EMOTION_CONTEXT_WINDOW,
    EMOTION_FUSION_WEIGHTS,
    EMOTION_HISTORY_CAPACITY,
    EMOTION_LOG_RECORDS,
    EMOTION_TREND_WINDOW_HOURS,
    LOG_LEVEL,
)
from emotion_engine.engine import EmotionEngine
from emotion_engine.mood.history import HistoryTracker
from emotion_engine.pipeline.fusion import DEFAULT_WEIGHTS, FusionWeights
from emotion_engine.pipeline.lexicon import DEFAULT_LEXICON
from emotion_engine.recording import EmotionRecorder, LoggingRecorder

logger = logging.getLogger(__name__)


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))


def _resolve_weights(raw: str) -> FusionWeights:
    try:
        return FusionWeights.parse(raw)
    except ValueError as exc:
        logger.warning("Invalid EMOTION_FUSION_WEIGHTS %r, using defaults: %s", raw, exc)
        return DEFAULT_WEIGHTS


def build_engine(
    recorder: EmotionRecorder | None = None,
    *,
    history_capacity: int | None = None,
    context_window: int | None = None,
    fusion_weights: str | None = None,
) -> EmotionEngine:
    """Wire the shared engine the host application passes to its callers."""
    if recorder is None and EMOTION_LOG_RECORDS:
        recorder = LoggingRecorder()
    tracker = HistoryTracker(
        capacity=EMOTION_HISTORY_CAPACITY if history_capacity is None else history_capacity
    )
    engine = EmotionEngine(
        lexicon=DEFAULT_LEXICON,
        tracker=tracker,
        recorder=recorder,
        weights=_resolve_weights(EMOTION_FUSION_WEIGHTS if fusion_weights is None else fusion_weights),
        context_window=EMOTION_CONTEXT_WINDOW if context_window is None else context_window,
        trend_window=timedelta(hours=EMOTION_TREND_WINDOW_HOURS),
    )
    logger.info(
        "EmotionEngine ready: capacity=%d context_window=%d lexicon=%d entries",
        tracker.capacity,
        engine.context_window,
        len(DEFAULT_LEXICON),
    )
    return engine
