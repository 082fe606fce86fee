"""Numeric constants for the emotion engine.

Thresholds, factors and weights for every pipeline stage, grouped by the
module that reads them. Modules import the names they need from here.
"""

from __future__ import annotations

# ── Dimensions (emotion_engine/model.py) ──────────────────────────
DIMENSION_MIN: float = -1.0
DIMENSION_MAX: float = 1.0
DIMENSION_NEUTRAL: float = 0.0

# ── Confidence levels (emotion_engine/model.py) ───────────────────
LOW_CONFIDENCE: float = 0.3
MEDIUM_CONFIDENCE: float = 0.6
HIGH_CONFIDENCE: float = 0.85

# ── Lexical analyzer (emotion_engine/pipeline/analyzer_lexical.py) ─
NEGATION_FACTOR: float = -0.7
INTENSIFIER_FACTOR: float = 1.5
DIMINISHER_FACTOR: float = 0.7
INTENSIFIER_AROUSAL_STEP: float = 0.1
INTENSIFIER_AROUSAL_CAP: float = 0.3

# ── Pattern analyzer (emotion_engine/pipeline/analyzer_pattern.py) ─
SHOUTING_RATIO: float = 0.5
SHOUTING_AROUSAL: float = 0.3
SHOUTING_DOMINANCE: float = 0.2
EXCLAMATION_AROUSAL: float = 0.1
EXCLAMATION_MAX_COUNT: int = 5
EXCLAMATION_RUN_AROUSAL: float = 0.3
QUESTION_MIN_COUNT: int = 2
QUESTION_DOMINANCE: float = -0.1
QUESTION_MAX_COUNT: int = 5
ELLIPSIS_AROUSAL: float = -0.2
ELLIPSIS_DOMINANCE: float = -0.1
EMOJI_VALENCE: float = 0.2
INTENSIFIER_WORD_AROUSAL: float = 0.1

# ── Contextual analyzer (emotion_engine/pipeline/analyzer_context.py)
CONTEXT_WINDOW: int = 5
MOMENTUM_FACTOR: float = 0.2

# ── Fusion (emotion_engine/pipeline/fusion.py) ────────────────────
LEXICAL_WEIGHT: float = 0.5
PATTERN_WEIGHT: float = 0.3
CONTEXTUAL_WEIGHT: float = 0.2

# ── Confidence (emotion_engine/pipeline/classifier.py) ────────────
SIGNAL_STRENGTH_WEIGHT: float = 0.4
DISTANCE_WEIGHT: float = 0.4
CONSISTENCY_BONUS: float = 0.2

# ── History tracker (emotion_engine/mood/history.py) ──────────────
HISTORY_CAPACITY: int = 50
TREND_WINDOW_HOURS: int = 24
TREND_SLOPE_THRESHOLD: float = 0.05
TREND_MIN_SAMPLES: int = 3
TREND_FULL_CONFIDENCE_SAMPLES: int = 10
RECENT_STATES_DEFAULT: int = 10
