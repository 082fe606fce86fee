from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from emotion_engine.defaults import MOMENTUM_FACTOR
from emotion_engine.model import EmotionalDimensions, EmotionalRecognitionResult
from emotion_engine.utils.math import mean

logger = logging.getLogger(__name__)

USER_ACTIVITY_KEY = "userActivity"
TIME_OF_DAY_KEY = "timeOfDay"

# (valence, arousal, dominance) deltas per recognised context hint.
_ACTIVITY_DELTAS: dict[str, tuple[float, float, float]] = {
    "working": (0.0, 0.1, 0.1),
    "relaxing": (0.0, -0.2, 0.0),
    "socializing": (0.1, 0.1, 0.0),
}
_TIME_OF_DAY_DELTAS: dict[str, tuple[float, float, float]] = {
    "morning": (0.0, 0.1, 0.0),
    "night": (0.0, -0.1, 0.0),
}


def _hint_delta(table: Mapping[str, tuple[float, float, float]], value: Any) -> tuple[float, float, float]:
    if not isinstance(value, str):
        return (0.0, 0.0, 0.0)
    return table.get(value.strip().lower(), (0.0, 0.0, 0.0))


def analyze_context(
    recent: Sequence[EmotionalRecognitionResult],
    context: Mapping[str, Any] | None = None,
) -> EmotionalDimensions:
    """Blend emotional momentum from *recent* results with caller hints.

    *recent* is expected to hold the last few results (oldest first).
    Unknown context keys and values are ignored.
    """
    valence = 0.0
    arousal = 0.0
    dominance = 0.0

    if recent:
        valence += mean([r.dimensions.valence for r in recent]) * MOMENTUM_FACTOR
        arousal += mean([r.dimensions.arousal for r in recent]) * MOMENTUM_FACTOR
        dominance += mean([r.dimensions.dominance for r in recent]) * MOMENTUM_FACTOR

    context = context or {}
    for table, key in ((_ACTIVITY_DELTAS, USER_ACTIVITY_KEY), (_TIME_OF_DAY_DELTAS, TIME_OF_DAY_KEY)):
        dv, da, dd = _hint_delta(table, context.get(key))
        valence += dv
        arousal += da
        dominance += dd

    result = EmotionalDimensions(valence=valence, arousal=arousal, dominance=dominance)
    logger.debug(
        "Context analysis: history=%d hints=%s vad=(%.2f, %.2f, %.2f)",
        len(recent),
        sorted(k for k in context if k in (USER_ACTIVITY_KEY, TIME_OF_DAY_KEY)),
        *result.as_tuple(),
    )
    return result
