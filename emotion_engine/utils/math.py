"""Shared math helpers for the emotion engine.

Small pure functions used by the analyzers, the classifier and the
history tracker.
"""

from __future__ import annotations

import math
import statistics
from collections.abc import Sequence

from emotion_engine.defaults import DIMENSION_MAX, DIMENSION_MIN

__all__ = ["clamp", "clamp_unit", "mean", "ols_slope", "vector_norm"]


def clamp(value: float, low: float = DIMENSION_MIN, high: float = DIMENSION_MAX) -> float:
    return max(low, min(high, value))


def clamp_unit(value: float) -> float:
    """Clamp into [0, 1]."""
    return clamp(value, 0.0, 1.0)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    return statistics.fmean(values) if values else 0.0


def vector_norm(values: Sequence[float]) -> float:
    return math.sqrt(sum(v * v for v in values))


def ols_slope(values: Sequence[float]) -> float:
    """Least-squares slope of ``(index, value)`` pairs; 0.0 below two points."""
    if len(values) < 2:
        return 0.0
    return statistics.linear_regression(range(len(values)), values).slope
