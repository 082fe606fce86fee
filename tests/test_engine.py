"""End-to-end tests for EmotionEngine.recognize and the history queries."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from emotion_engine import Emotion, EmotionEngine, HistoryTracker
from emotion_engine.model import NEUTRAL_TREND, EmotionalDimensions, EmotionalRecognitionResult
from emotion_engine.recording import EMOTIONAL_STATE_CATEGORY, NO_EMOTION, EmotionRecord

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class ListRecorder:
    def __init__(self) -> None:
        self.records: list[EmotionRecord] = []

    def record(self, record: EmotionRecord) -> None:
        self.records.append(record)


class BrokenRecorder:
    def record(self, record: EmotionRecord) -> None:
        raise RuntimeError("storage offline")


@pytest.fixture
def engine() -> EmotionEngine:
    return EmotionEngine(clock=lambda: NOW)


def test_blank_text_is_neutral(engine):
    for text in ("", "   \n\t"):
        result = engine.recognize(text)
        assert result.primary_emotion is Emotion.NEUTRAL
        assert result.secondary_emotion is None
        assert result.dimensions.as_tuple() == (0.0, 0.0, 0.0)
        assert result.confidence_score == 0.0
        assert result.timestamp == NOW
    assert len(engine.recent_states()) == 2


def test_results_are_deterministic():
    texts = ["I am so happy today!", "ugh, this is terrible...", "hello", "WHY? WHAT? HOW?"]
    first = EmotionEngine(clock=lambda: NOW)
    second = EmotionEngine(clock=lambda: NOW)
    assert [first.recognize(t) for t in texts] == [second.recognize(t) for t in texts]


@pytest.mark.parametrize(
    "text",
    [
        "I am absolutely furious and disgusted!!!",
        "so so so so very very happy \U0001F60A\U0001F60A\U0001F60A",
        "not sad, not angry, not afraid",
        "whatever...",
        "???",
    ],
)
def test_outputs_stay_in_range(engine, text):
    result = engine.recognize(text, {"userActivity": "Working", "timeOfDay": "Morning"})
    assert all(-1.0 <= v <= 1.0 for v in result.dimensions.as_tuple())
    assert 0.0 <= result.confidence_score <= 1.0


def test_negation_lowers_valence():
    good = EmotionEngine(clock=lambda: NOW).recognize("good")
    not_good = EmotionEngine(clock=lambda: NOW).recognize("not good")
    assert good.dimensions.valence == pytest.approx(0.5)
    assert not_good.dimensions.valence == pytest.approx(-0.5)


def test_intensifier_never_lowers_valence():
    plain = EmotionEngine(clock=lambda: NOW).recognize("happy")
    boosted = EmotionEngine(clock=lambda: NOW).recognize("very happy")
    assert boosted.dimensions.valence >= plain.dimensions.valence
    assert boosted.dimensions.arousal >= plain.dimensions.arousal


def test_excited_shout(engine):
    result = engine.recognize("I am SO excited!!!")
    assert result.dimensions.valence == pytest.approx(0.5)
    assert result.dimensions.arousal == pytest.approx(0.71)
    assert Emotion.JOY in (result.primary_emotion, result.secondary_emotion)
    assert result.confidence_score == pytest.approx(0.562, abs=0.01)


def test_activity_hint_lowers_arousal(engine):
    result = engine.recognize("hello", {"userActivity": "Relaxing"})
    assert result.dimensions.arousal == pytest.approx(-0.04)
    assert result.dimensions.valence == 0.0


def test_history_carries_momentum(engine):
    engine.recognize("I am so happy")
    result = engine.recognize("hello")
    assert result.dimensions.valence > 0.0


def test_context_window_zero_ignores_history():
    engine = EmotionEngine(context_window=0, clock=lambda: NOW)
    engine.recognize("I am so happy")
    assert engine.recognize("hello").dimensions.as_tuple() == (0.0, 0.0, 0.0)


def test_negative_context_window_rejected():
    with pytest.raises(ValueError):
        EmotionEngine(context_window=-1)


def test_recorder_receives_each_result():
    recorder = ListRecorder()
    engine = EmotionEngine(recorder=recorder, clock=lambda: NOW)
    result = engine.recognize("")

    (record,) = recorder.records
    assert record.text == ""
    assert record.content == "Emotional state: Neutral"
    assert record.category == EMOTIONAL_STATE_CATEGORY
    assert record.primary_emotion == "NEUTRAL"
    assert record.secondary_emotion == NO_EMOTION
    assert record.confidence == result.confidence_score
    assert record.timestamp == NOW


def test_recorder_failure_does_not_propagate(caplog):
    engine = EmotionEngine(recorder=BrokenRecorder(), clock=lambda: NOW)
    with caplog.at_level(logging.WARNING, logger="emotion_engine.engine"):
        result = engine.recognize("I am happy")
    assert result.primary_emotion in Emotion
    assert "storage offline" in caplog.text
    assert len(engine.recent_states()) == 1


def test_recent_states_and_trend(engine):
    texts = ["I am happy", "really happy!", "happy again"]
    results = [engine.recognize(t) for t in texts]

    assert engine.recent_states(2) == results[1:]
    assert engine.recent_states() == results

    trend = engine.dominant_trend()
    assert trend.sample_count == 3
    assert trend.dominant_emotion in {r.primary_emotion for r in results}


def test_shared_tracker_is_used():
    tracker = HistoryTracker(capacity=5)
    engine = EmotionEngine(tracker=tracker, clock=lambda: NOW)
    engine.recognize("hello")
    assert len(tracker) == 1


def test_concurrent_recognize_is_safe():
    engine = EmotionEngine(tracker=HistoryTracker(capacity=50), clock=lambda: NOW)
    texts = ["I am happy", "so sad...", "WHAT?!", "hello", "not bad at all"] * 40

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(engine.recognize, texts))

    assert len(results) == 200
    assert len(engine.recent_states(100)) == 50
    assert all(0.0 <= r.confidence_score <= 1.0 for r in results)


def test_text_without_signal_scores_consistency_bonus(engine):
    result = engine.recognize("the meeting is at 3")
    assert result.primary_emotion is Emotion.NEUTRAL
    assert result.confidence_score == pytest.approx(0.2)
    assert engine.recognize("hello").confidence_score == pytest.approx(0.2)


def test_zero_length_trend_window_is_respected(engine):
    engine.tracker.append(
        EmotionalRecognitionResult(
            dimensions=EmotionalDimensions(0.8, 0.6, 0.6),
            primary_emotion=Emotion.JOY,
            timestamp=NOW - timedelta(hours=1),
        )
    )
    assert engine.dominant_trend(timedelta(0)) == NEUTRAL_TREND
    assert engine.dominant_trend().dominant_emotion is Emotion.JOY
