"""Lexicon-driven analysis: token sequence → per-emotion scores → VAD.

The analyzer walks the tokens left to right. At every position it tries the
longest phrase first (down to a single token) and, on a hit,
skips the whole matched span. The token right before a match decides which
modifiers apply:

- negation   → intensities × ``NEGATION_FACTOR`` (flips and dampens)
- intensifier → × ``INTENSIFIER_FACTOR``
- diminisher → × ``DIMINISHER_FACTOR``

Scores are summed per emotion label across the whole text and finally
projected onto the three VAD axes through the label groups defined in
:mod:`emotion_engine.model`. Words missing from the lexicon contribute
nothing, so coverage gaps only weaken the signal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from emotion_engine.defaults import (
    DIMINISHER_FACTOR,
    INTENSIFIER_AROUSAL_CAP,
    INTENSIFIER_AROUSAL_STEP,
    INTENSIFIER_FACTOR,
    NEGATION_FACTOR,
)
from emotion_engine.model import (
    HIGH_AROUSAL,
    HIGH_DOMINANCE,
    LOW_AROUSAL,
    LOW_DOMINANCE,
    NEGATIVE_VALENCE,
    NEUTRAL_DIMENSIONS,
    POSITIVE_VALENCE,
    Emotion,
    EmotionalDimensions,
)
from emotion_engine.pipeline.lexicon import DEFAULT_LEXICON, Lexicon
from emotion_engine.pipeline.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LexicalMatch:
    """One lexicon hit inside the token stream."""

    phrase: str
    start: int
    emotions: dict[Emotion, float]
    negated: bool = False
    intensified: bool = False
    diminished: bool = False

    @property
    def word_count(self) -> int:
        return len(self.phrase.split(" "))


@dataclass(slots=True)
class LexicalAnalysis:
    dimensions: EmotionalDimensions
    scores: dict[Emotion, float] = field(default_factory=dict)
    matches: list[LexicalMatch] = field(default_factory=list)


class LexicalAnalyzer:
    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON) -> None:
        self.lexicon = lexicon

    def analyze_text(self, text: str) -> LexicalAnalysis:
        return self.analyze(tokenize(text))

    def analyze(self, tokens: Sequence[str]) -> LexicalAnalysis:
        if not tokens:
            return LexicalAnalysis(dimensions=NEUTRAL_DIMENSIONS)

        matches = list(self._match(tokens))
        scores: dict[Emotion, float] = {}
        for match in matches:
            for emotion, score in match.emotions.items():
                scores[emotion] = scores.get(emotion, 0.0) + score

        intensified = sum(1 for m in matches if m.intensified and m.emotions)
        dimensions = scores_to_dimensions(scores, intensified_count=intensified)
        logger.debug(
            "Lexical analysis: %d tokens, %d matches, vad=(%.2f, %.2f, %.2f)",
            len(tokens),
            len(matches),
            *dimensions.as_tuple(),
        )
        return LexicalAnalysis(dimensions=dimensions, scores=scores, matches=matches)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _match(self, tokens: Sequence[str]) -> Iterable[LexicalMatch]:
        index = 0
        total = len(tokens)
        while index < total:
            match = self._longest_match(tokens, index)
            if match is None:
                index += 1
                continue
            self._apply_modifiers(match, tokens)
            yield match
            index += match.word_count

    def _longest_match(self, tokens: Sequence[str], start: int) -> LexicalMatch | None:
        longest = min(self.lexicon.max_phrase_words, len(tokens) - start)
        for size in range(longest, 0, -1):
            phrase = " ".join(tokens[start:start + size])
            entry = self.lexicon.lookup(phrase)
            if entry is not None:
                return LexicalMatch(phrase=phrase, start=start, emotions=dict(entry.emotions))
        return None

    def _apply_modifiers(self, match: LexicalMatch, tokens: Sequence[str]) -> None:
        if match.start == 0:
            return
        modifier = self._preceding_modifier(tokens, match.start)
        if modifier is None:
            return

        factor = 1.0
        if self.lexicon.is_negation(modifier):
            factor *= NEGATION_FACTOR
            match.negated = True
        if self.lexicon.is_intensifier(modifier):
            factor *= INTENSIFIER_FACTOR
            match.intensified = True
        if self.lexicon.is_diminisher(modifier):
            factor *= DIMINISHER_FACTOR
            match.diminished = True

        if factor != 1.0:
            match.emotions = {emotion: score * factor for emotion, score in match.emotions.items()}

    def _preceding_modifier(self, tokens: Sequence[str], end: int) -> str | None:
        """Longest modifier phrase ending right before *end*.

        "not really" shadows the "really" it ends with.
        """
        for size in range(min(self.lexicon.max_phrase_words, end), 0, -1):
            phrase = " ".join(tokens[end - size:end])
            if (
                self.lexicon.is_negation(phrase)
                or self.lexicon.is_intensifier(phrase)
                or self.lexicon.is_diminisher(phrase)
            ):
                return phrase
        return None


def _balance(scores: Mapping[Emotion, float], high: frozenset[Emotion], low: frozenset[Emotion]) -> float:
    high_score = sum(score for emotion, score in scores.items() if emotion in high)
    low_score = sum(score for emotion, score in scores.items() if emotion in low)
    magnitude = abs(high_score) + abs(low_score)
    if magnitude == 0.0:
        return 0.0
    return (high_score - low_score) / magnitude


def scores_to_dimensions(scores: Mapping[Emotion, float], intensified_count: int = 0) -> EmotionalDimensions:
    """Project accumulated label scores onto the VAD axes.

    Each axis is the signed balance between its "high" and "low" label
    groups, so a negated score pulls the axis towards the opposite pole.
    Intensified matches add a small arousal bump.
    """
    if not scores:
        return NEUTRAL_DIMENSIONS
    arousal_bonus = min(intensified_count * INTENSIFIER_AROUSAL_STEP, INTENSIFIER_AROUSAL_CAP)
    return EmotionalDimensions(
        valence=_balance(scores, POSITIVE_VALENCE, NEGATIVE_VALENCE),
        arousal=_balance(scores, HIGH_AROUSAL, LOW_AROUSAL) + arousal_bonus,
        dominance=_balance(scores, HIGH_DOMINANCE, LOW_DOMINANCE),
    )
