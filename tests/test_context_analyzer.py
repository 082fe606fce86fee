"""Tests for emotion_engine.pipeline.analyzer_context."""

import pytest

from emotion_engine.model import Emotion, EmotionalDimensions, EmotionalRecognitionResult
from emotion_engine.pipeline.analyzer_context import analyze_context


def _result(valence: float, arousal: float = 0.0, dominance: float = 0.0) -> EmotionalRecognitionResult:
    return EmotionalRecognitionResult(
        dimensions=EmotionalDimensions(valence, arousal, dominance),
        primary_emotion=Emotion.NEUTRAL,
    )


def test_no_history_no_hints_is_neutral():
    assert analyze_context([], None).as_tuple() == (0.0, 0.0, 0.0)
    assert analyze_context([], {}).as_tuple() == (0.0, 0.0, 0.0)


def test_history_momentum_is_twenty_percent_of_mean():
    recent = [_result(0.5, 0.3), _result(0.5, 0.3), _result(1.0, -0.3)]
    dims = analyze_context(recent)
    assert dims.valence == pytest.approx(0.2 * (2.0 / 3.0))
    assert dims.arousal == pytest.approx(0.2 * 0.1)
    assert dims.dominance == 0.0


@pytest.mark.parametrize(
    ("context", "expected"),
    [
        ({"userActivity": "Working"}, (0.0, 0.1, 0.1)),
        ({"userActivity": "RELAXING"}, (0.0, -0.2, 0.0)),
        ({"userActivity": "socializing"}, (0.1, 0.1, 0.0)),
        ({"timeOfDay": "Morning"}, (0.0, 0.1, 0.0)),
        ({"timeOfDay": "NIGHT"}, (0.0, -0.1, 0.0)),
        ({"userActivity": "Working", "timeOfDay": "Night"}, (0.0, 0.0, 0.1)),
    ],
)
def test_context_hints(context, expected):
    assert analyze_context([], context).as_tuple() == pytest.approx(expected)


@pytest.mark.parametrize(
    "context",
    [
        {"mood": "great"},
        {"userActivity": "Sleeping"},
        {"userActivity": 42},
        {"timeOfDay": None},
    ],
)
def test_unrecognised_hints_are_ignored(context):
    assert analyze_context([], context).as_tuple() == (0.0, 0.0, 0.0)


def test_hints_and_momentum_combine():
    dims = analyze_context([_result(0.5)], {"userActivity": "Socializing"})
    assert dims.valence == pytest.approx(0.1 + 0.1)
