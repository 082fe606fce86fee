"""Bounded, thread-safe history of recognition results with trend analysis.

Usage::

    tracker = HistoryTracker(capacity=50)
    tracker.append(result)
    tracker.recent(5)
    tracker.trend(timedelta(hours=24))
"""

from __future__ import annotations

import logging
import threading
from collections import Counter, deque
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from typing import Deque

from emotion_engine.defaults import (
    HISTORY_CAPACITY,
    TREND_FULL_CONFIDENCE_SAMPLES,
    TREND_MIN_SAMPLES,
    TREND_SLOPE_THRESHOLD,
    TREND_WINDOW_HOURS,
)
from emotion_engine.model import (
    NEUTRAL_TREND,
    EmotionalRecognitionResult,
    EmotionalTrend,
    TrendDirection,
    utc_now,
)
from emotion_engine.utils.math import ols_slope

__all__ = ["HistoryTracker", "trend_direction"]

logger = logging.getLogger(__name__)


def trend_direction(values: Sequence[float]) -> TrendDirection:
    """Classify the OLS slope of *values* over their index."""
    if len(values) < TREND_MIN_SAMPLES:
        return TrendDirection.STABLE
    slope = ols_slope(values)
    if slope > TREND_SLOPE_THRESHOLD:
        return TrendDirection.INCREASING
    if slope < -TREND_SLOPE_THRESHOLD:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


class HistoryTracker:
    """Ring buffer of the last *capacity* results, oldest evicted first.

    Parameters
    ----------
    capacity:
        Maximum number of results retained.
    clock:
        Returns the current aware ``datetime``; used to resolve time
        windows. Defaults to UTC now.
    """

    def __init__(
        self,
        capacity: int = HISTORY_CAPACITY,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"history capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._clock = clock
        self._items: Deque[EmotionalRecognitionResult] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def append(self, result: EmotionalRecognitionResult) -> None:
        with self._lock:
            self._items.append(result)

    def recent(self, count: int) -> list[EmotionalRecognitionResult]:
        """Return the newest *count* results, oldest first."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return []
        with self._lock:
            return list(self._items)[-count:]

    def snapshot(self) -> list[EmotionalRecognitionResult]:
        with self._lock:
            return list(self._items)

    def within(self, window: timedelta, now: datetime | None = None) -> list[EmotionalRecognitionResult]:
        cutoff = (now or self._clock()) - window
        with self._lock:
            return [r for r in self._items if r.timestamp >= cutoff]

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def trend(
        self,
        window: timedelta = timedelta(hours=TREND_WINDOW_HOURS),
        now: datetime | None = None,
    ) -> EmotionalTrend:
        states = self.within(window, now=now)
        if not states:
            return NEUTRAL_TREND

        # most_common keeps first-seen order on ties.
        dominant, dominant_count = Counter(s.primary_emotion for s in states).most_common(1)[0]
        count = len(states)
        confidence = (
            min(count, TREND_FULL_CONFIDENCE_SAMPLES) / TREND_FULL_CONFIDENCE_SAMPLES
        ) * (dominant_count / count)

        trend = EmotionalTrend(
            dominant_emotion=dominant,
            valence_direction=trend_direction([s.dimensions.valence for s in states]),
            arousal_direction=trend_direction([s.dimensions.arousal for s in states]),
            dominance_direction=trend_direction([s.dimensions.dominance for s in states]),
            confidence=confidence,
            sample_count=count,
        )
        logger.debug(
            "Trend over %s: dominant=%s samples=%d confidence=%.2f",
            window,
            dominant.value,
            count,
            confidence,
        )
        return trend
