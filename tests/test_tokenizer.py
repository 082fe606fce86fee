"""Tests for emotion_engine.pipeline.tokenizer."""

from emotion_engine.pipeline.tokenizer import tokenize


def test_empty_text_yields_no_tokens():
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_lowercases_and_isolates_punctuation():
    assert tokenize("  Hello,   World! ") == ["hello", ",", "world", "!"]


def test_contraction_apostrophes_preserved():
    assert tokenize("I can't believe it's 'real'") == ["i", "can't", "believe", "it's", "real"]


def test_punctuation_runs_split_into_single_tokens():
    assert tokenize("wait...") == ["wait", ".", ".", "."]
    assert tokenize("!!!") == ["!", "!", "!"]


def test_whitespace_collapsed():
    assert tokenize("so\n\n  very    happy") == ["so", "very", "happy"]


def test_typographic_apostrophes_fold_to_ascii():
    assert tokenize("It isn’t ‘fine’") == ["it", "isn't", "fine"]
