"""Emotional recognition engine: text (+ context hints) → classified VAD state.

Pipeline::

    tokens ─► lexical ─┐
    raw text ► pattern ─┼─► fusion ─► classifier ─► confidence ─► result
    history ─► context ─┘                                          │
                                       history tracker ◄───────────┤
                                       recorder (best effort) ◄────┘

The engine is constructed once by the host application and shared. All
static tables are read-only; the history tracker serialises its own
access, so ``recognize`` may be called from several threads at once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from typing import Any

from emotion_engine.defaults import CONTEXT_WINDOW, RECENT_STATES_DEFAULT, TREND_WINDOW_HOURS
from emotion_engine.model import (
    NEUTRAL_DIMENSIONS,
    Emotion,
    EmotionalRecognitionResult,
    EmotionalTrend,
    utc_now,
)
from emotion_engine.mood.history import HistoryTracker
from emotion_engine.pipeline.analyzer_context import analyze_context
from emotion_engine.pipeline.analyzer_lexical import LexicalAnalyzer
from emotion_engine.pipeline.analyzer_pattern import analyze_patterns
from emotion_engine.pipeline.classifier import classify, confidence_score
from emotion_engine.pipeline.fusion import DEFAULT_WEIGHTS, FusionWeights, combine
from emotion_engine.pipeline.lexicon import DEFAULT_LEXICON, Lexicon
from emotion_engine.pipeline.tokenizer import tokenize
from emotion_engine.recording import EmotionRecord, EmotionRecorder

logger = logging.getLogger(__name__)


class EmotionEngine:
    def __init__(
        self,
        *,
        lexicon: Lexicon = DEFAULT_LEXICON,
        tracker: HistoryTracker | None = None,
        recorder: EmotionRecorder | None = None,
        weights: FusionWeights = DEFAULT_WEIGHTS,
        context_window: int = CONTEXT_WINDOW,
        trend_window: timedelta = timedelta(hours=TREND_WINDOW_HOURS),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if context_window < 0:
            raise ValueError(f"context window must be non-negative, got {context_window}")
        self.lexicon = lexicon
        self.tracker = tracker if tracker is not None else HistoryTracker(clock=clock)
        self.recorder = recorder
        self.weights = weights
        self.context_window = context_window
        self.trend_window = trend_window
        self._clock = clock
        self._lexical = LexicalAnalyzer(lexicon)

    def recognize(self, text: str, context: Mapping[str, Any] | None = None) -> EmotionalRecognitionResult:
        """Analyse *text* and return the recognised emotional state.

        The result is appended to the history and handed to the recorder.
        Recorder failures are logged and never propagate.
        """
        text = text or ""
        if not text.strip():
            result = EmotionalRecognitionResult(
                dimensions=NEUTRAL_DIMENSIONS,
                primary_emotion=Emotion.NEUTRAL,
                secondary_emotion=None,
                confidence_score=0.0,
                timestamp=self._clock(),
            )
        else:
            result = self._analyze(text, context)

        self.tracker.append(result)
        self._record(text, result)
        logger.info(
            "Recognized %s (secondary=%s) confidence=%.2f",
            result.primary_emotion.value,
            result.secondary_emotion.value if result.secondary_emotion else None,
            result.confidence_score,
        )
        return result

    def recent_states(self, count: int = RECENT_STATES_DEFAULT) -> list[EmotionalRecognitionResult]:
        return self.tracker.recent(count)

    def dominant_trend(self, window: timedelta | None = None) -> EmotionalTrend:
        return self.tracker.trend(self.trend_window if window is None else window, now=self._clock())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _analyze(self, text: str, context: Mapping[str, Any] | None) -> EmotionalRecognitionResult:
        lexical = self._lexical.analyze(tokenize(text))
        pattern = analyze_patterns(text)
        contextual = analyze_context(self.tracker.recent(self.context_window), context)

        dimensions = combine(lexical.dimensions, pattern, contextual, self.weights)
        classification = classify(dimensions)
        return EmotionalRecognitionResult(
            dimensions=dimensions,
            primary_emotion=classification.primary,
            secondary_emotion=classification.secondary,
            confidence_score=confidence_score(dimensions, classification.primary),
            timestamp=self._clock(),
        )

    def _record(self, text: str, result: EmotionalRecognitionResult) -> None:
        if self.recorder is None:
            return
        try:
            self.recorder.record(EmotionRecord.from_result(text, result))
        except Exception as exc:
            logger.warning("Emotion record failed, result still returned: %s", exc)
