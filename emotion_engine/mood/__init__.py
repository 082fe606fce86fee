from __future__ import annotations

from emotion_engine.mood.history import HistoryTracker, trend_direction

__all__ = ["HistoryTracker", "trend_direction"]
