"""Surface-pattern analysis on raw text.

Looks only at typography: shouting, punctuation runs, ellipses, emoji and
intensifier words. Works on the untokenized string so that casing and
repeated punctuation survive.
"""

from __future__ import annotations

import logging

from emotion_engine.defaults import (
    ELLIPSIS_AROUSAL,
    ELLIPSIS_DOMINANCE,
    EMOJI_VALENCE,
    EXCLAMATION_AROUSAL,
    EXCLAMATION_MAX_COUNT,
    EXCLAMATION_RUN_AROUSAL,
    INTENSIFIER_WORD_AROUSAL,
    QUESTION_DOMINANCE,
    QUESTION_MAX_COUNT,
    QUESTION_MIN_COUNT,
    SHOUTING_AROUSAL,
    SHOUTING_DOMINANCE,
    SHOUTING_RATIO,
)
from emotion_engine.model import NEUTRAL_DIMENSIONS, EmotionalDimensions

logger = logging.getLogger(__name__)

POSITIVE_EMOJIS: tuple[str, ...] = (
    "\U0001F60A",  # smiling face with smiling eyes
    "\U0001F601",  # beaming face
    "\U0001F604",  # grinning face with smiling eyes
    "\U0001F642",  # slightly smiling face
    "\U0001F603",  # grinning face with big eyes
    "\U0001F60D",  # heart eyes
    "❤",      # red heart (with or without variation selector)
    "\U0001F495",  # two hearts
    "\U0001F44D",  # thumbs up
    "\U0001F389",  # party popper
)
NEGATIVE_EMOJIS: tuple[str, ...] = (
    "\U0001F622",  # crying face
    "\U0001F62D",  # loudly crying face
    "\U0001F61E",  # disappointed face
    "\U0001F614",  # pensive face
    "\U0001F620",  # angry face
    "\U0001F621",  # pouting face
    "\U0001F494",  # broken heart
    "\U0001F44E",  # thumbs down
    "\U0001F612",  # unamused face
    "\U0001F629",  # weary face
)
INTENSIFIER_WORDS: tuple[str, ...] = (
    "very", "extremely", "really", "so", "totally", "absolutely", "completely",
)


def uppercase_ratio(text: str) -> float:
    letters = [ch for ch in text if ch.isalpha()]
    if not letters:
        return 0.0
    return sum(1 for ch in letters if ch.isupper()) / len(letters)


def analyze_patterns(text: str) -> EmotionalDimensions:
    if not text:
        return NEUTRAL_DIMENSIONS

    valence = 0.0
    arousal = 0.0
    dominance = 0.0

    if uppercase_ratio(text) > SHOUTING_RATIO:
        arousal += SHOUTING_AROUSAL
        dominance += SHOUTING_DOMINANCE

    exclamations = text.count("!")
    arousal += EXCLAMATION_AROUSAL * min(exclamations, EXCLAMATION_MAX_COUNT)
    if "!!!" in text:
        arousal += EXCLAMATION_RUN_AROUSAL

    questions = text.count("?")
    if questions > QUESTION_MIN_COUNT:
        dominance += QUESTION_DOMINANCE * min(questions, QUESTION_MAX_COUNT)

    if "..." in text or "…" in text:
        arousal += ELLIPSIS_AROUSAL
        dominance += ELLIPSIS_DOMINANCE

    valence += EMOJI_VALENCE * sum(1 for emoji in POSITIVE_EMOJIS if emoji in text)
    valence -= EMOJI_VALENCE * sum(1 for emoji in NEGATIVE_EMOJIS if emoji in text)

    lowered = text.lower()
    arousal += INTENSIFIER_WORD_AROUSAL * sum(1 for word in INTENSIFIER_WORDS if word in lowered)

    result = EmotionalDimensions(valence=valence, arousal=arousal, dominance=dominance)
    logger.debug("Pattern analysis: vad=(%.2f, %.2f, %.2f)", *result.as_tuple())
    return result
