"""Tests for emotion_engine.pipeline.classifier: decision lists and confidence."""

import pytest

from emotion_engine.model import Emotion, EmotionalDimensions
from emotion_engine.pipeline.classifier import (
    PRIMARY_RULES,
    SECONDARY_RULES,
    classify,
    classify_primary,
    classify_secondary,
    confidence_score,
)


def _dims(v: float, a: float, d: float) -> EmotionalDimensions:
    return EmotionalDimensions(v, a, d)


@pytest.mark.parametrize(
    ("point", "expected"),
    [
        ((0.6, 0.6, 0.6), Emotion.JOY),
        ((0.6, 0.6, -0.4), Emotion.EXCITEMENT),
        ((0.6, -0.4, 0.4), Emotion.CONTENTMENT),
        ((0.6, -0.4, -0.4), Emotion.RELAXATION),
        ((0.6, 0.0, 0.6), Emotion.PRIDE),
        ((0.6, 0.0, -0.4), Emotion.GRATITUDE),
        ((-0.6, 0.6, 0.6), Emotion.ANGER),
        ((-0.6, 0.6, -0.4), Emotion.FEAR),
        ((-0.6, -0.4, -0.4), Emotion.SADNESS),
        ((-0.6, -0.4, 0.4), Emotion.DISAPPOINTMENT),
        ((-0.6, 0.0, 0.6), Emotion.CONTEMPT),
        ((-0.6, 0.0, -0.4), Emotion.SHAME),
        ((0.0, 0.6, 0.4), Emotion.SURPRISE),
        ((0.0, 0.6, -0.4), Emotion.ANXIETY),
        ((0.0, -0.4, 0.4), Emotion.BOREDOM),
        ((0.0, -0.4, -0.4), Emotion.FATIGUE),
    ],
)
def test_primary_regions(point, expected):
    assert classify_primary(_dims(*point)) is expected


@pytest.mark.parametrize(
    "point",
    [
        (0.0, 0.0, 0.0),
        (0.6, 0.6, 0.0),  # between the Joy and Excitement dominance bands
        (0.4, 0.9, 0.9),  # valence between the neutral and positive bands
        (1.0, 0.4, 0.0),
    ],
)
def test_unmatched_regions_fall_through_to_neutral(point):
    assert classify_primary(_dims(*point)) is Emotion.NEUTRAL


def test_rule_lists_keep_their_order():
    assert [e for e, _ in PRIMARY_RULES][:2] == [Emotion.JOY, Emotion.EXCITEMENT]
    assert [e for e, _ in SECONDARY_RULES][-1] is Emotion.DISAPPOINTMENT
    assert len(PRIMARY_RULES) == 16
    assert len(SECONDARY_RULES) == 12


def test_secondary_skips_primary_label():
    result = classify(_dims(0.6, 0.6, 0.6))
    assert result.primary is Emotion.JOY
    # Joy matches the looser list first but equals the primary.
    assert result.secondary is Emotion.PRIDE


def test_secondary_for_blended_neutral_point():
    assert classify(_dims(0.35, 0.35, 0.0)).secondary is Emotion.JOY
    assert classify(_dims(0.2, 0.2, 0.2)).secondary is Emotion.INTEREST
    assert classify(_dims(-0.2, 0.2, -0.2)).secondary is Emotion.CONFUSION
    assert classify(_dims(-0.2, -0.2, 0.0)).secondary is Emotion.DISAPPOINTMENT


def test_secondary_absent_when_nothing_matches():
    assert classify(_dims(0.0, 0.0, 0.0)).secondary is None
    assert classify_secondary(_dims(0.05, 0.05, 0.05), Emotion.NEUTRAL) is None


def test_confidence_without_signal_keeps_consistency_bonus():
    assert confidence_score(_dims(0.0, 0.0, 0.0), Emotion.NEUTRAL) == pytest.approx(0.2)
    assert confidence_score(_dims(0.0, 0.0, 0.0), Emotion.JOY) == 0.0


def test_confidence_with_consistency_bonus():
    # signal 0.6, distance 0.6 → 0.24 + 0.24 + 0.2
    assert confidence_score(_dims(0.6, 0.6, 0.6), Emotion.JOY) == pytest.approx(0.68)


def test_confidence_without_bonus_when_inconsistent():
    assert confidence_score(_dims(-0.6, 0.6, 0.6), Emotion.JOY) == pytest.approx(0.48)


def test_confidence_is_clamped():
    assert confidence_score(_dims(1.0, 1.0, 1.0), Emotion.JOY) == pytest.approx(1.0)
    assert confidence_score(_dims(1.0, 1.0, 1.0), Emotion.JOY) <= 1.0


def test_consistency_predicates():
    positive = _dims(0.5, 0.5, 0.5)
    negative = _dims(-0.5, 0.5, -0.5)
    calm = _dims(0.0, -0.5, 0.0)

    assert Emotion.JOY.is_consistent_with(positive)
    assert not Emotion.JOY.is_consistent_with(negative)
    assert Emotion.SADNESS.is_consistent_with(negative)
    assert Emotion.FATIGUE.is_consistent_with(calm)
    assert not Emotion.BOREDOM.is_consistent_with(positive)
    for emotion in (Emotion.NEUTRAL, Emotion.CONFUSION, Emotion.SURPRISE):
        assert emotion.is_consistent_with(positive)
        assert emotion.is_consistent_with(negative)
