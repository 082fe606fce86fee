"""Static emotion lexicon: words, multi-word expressions and modifiers.

Every entry maps a word (or a phrase of up to four tokens) to emotion
intensities plus linguistic tags. Modifier words (negations, intensifiers,
diminishers) live in the same table with an empty emotion mapping, so a
single lookup answers both "what does this token express" and "how does it
modify its neighbour".

The tables are built once at import time and exposed read-only through
:class:`Lexicon`; callers share one instance and never mutate it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from emotion_engine.model import Emotion

__all__ = [
    "DEFAULT_LEXICON",
    "EXPRESSIONS",
    "Lexicon",
    "LexiconEntry",
    "TAG_DIMINISHER",
    "TAG_INTENSIFIER",
    "TAG_NEGATION",
    "WORDS",
]

TAG_NEGATION = "negation"
TAG_INTENSIFIER = "intensifier"
TAG_DIMINISHER = "diminisher"
TAG_POSITIVE = "positive"
TAG_NEGATIVE = "negative"
TAG_NEUTRAL = "neutral"
TAG_IDIOM = "idiom"


@dataclass(frozen=True, slots=True)
class LexiconEntry:
    emotions: Mapping[Emotion, float] = field(default_factory=lambda: MappingProxyType({}))
    tags: frozenset[str] = frozenset()


def _entry(tag: str, **scores: float) -> LexiconEntry:
    emotions = {Emotion[name.upper()]: score for name, score in scores.items()}
    return LexiconEntry(emotions=MappingProxyType(emotions), tags=frozenset({tag}))


def _idiom(tag: str, **scores: float) -> LexiconEntry:
    entry = _entry(tag, **scores)
    return LexiconEntry(emotions=entry.emotions, tags=entry.tags | {TAG_IDIOM})


def _modifiers(tag: str, *words: str) -> dict[str, LexiconEntry]:
    entry = LexiconEntry(tags=frozenset({tag}))
    return {word: entry for word in words}


_P, _N, _0 = TAG_POSITIVE, TAG_NEGATIVE, TAG_NEUTRAL

# ── Single words ──────────────────────────────────────────────────
_EMOTION_WORDS: dict[str, LexiconEntry] = {
    # Joy cluster
    "happy": _entry(_P, joy=0.8),
    "happiness": _entry(_P, joy=0.8),
    "joy": _entry(_P, joy=0.9),
    "joyful": _entry(_P, joy=0.9, excitement=0.3),
    "delight": _entry(_P, joy=0.7),
    "delighted": _entry(_P, joy=0.8, excitement=0.3),
    "pleasure": _entry(_P, joy=0.6),
    "cheerful": _entry(_P, joy=0.7),
    "glad": _entry(_P, joy=0.6),
    "good": _entry(_P, joy=0.5, contentment=0.2),
    "great": _entry(_P, joy=0.7),
    "nice": _entry(_P, joy=0.4, contentment=0.2),
    "wonderful": _entry(_P, joy=0.8),
    "amazing": _entry(_P, joy=0.8, excitement=0.4),
    "awesome": _entry(_P, joy=0.8, excitement=0.5),
    "fantastic": _entry(_P, joy=0.9, excitement=0.4),
    "brilliant": _entry(_P, joy=0.7, pride=0.3),
    "excellent": _entry(_P, joy=0.7, pride=0.2),
    # Excitement cluster
    "excited": _entry(_P, excitement=0.8, joy=0.4),
    "exciting": _entry(_P, excitement=0.7, joy=0.3),
    "thrilled": _entry(_P, excitement=0.9, joy=0.5),
    "ecstatic": _entry(_P, excitement=1.0, joy=0.6),
    "pumped": _entry(_P, excitement=0.8),
    "eager": _entry(_P, anticipation=0.7, excitement=0.4),
    # Contentment / relaxation cluster
    "content": _entry(_P, contentment=0.7),
    "satisfied": _entry(_P, contentment=0.7, pride=0.2),
    "peaceful": _entry(_P, contentment=0.8, relaxation=0.4),
    "calm": _entry(_P, contentment=0.6, relaxation=0.5),
    "relaxed": _entry(_P, relaxation=0.8, contentment=0.4),
    "serene": _entry(_P, contentment=0.9, relaxation=0.5),
    "tranquil": _entry(_P, relaxation=0.8, contentment=0.4),
    "comfortable": _entry(_P, contentment=0.6, relaxation=0.3),
    "safe": _entry(_P, trust=0.5, contentment=0.4),
    "secure": _entry(_P, trust=0.6, contentment=0.3),
    # Pride cluster
    "proud": _entry(_P, pride=0.8),
    "accomplished": _entry(_P, pride=0.7),
    "confident": _entry(_P, pride=0.6, trust=0.3),
    "successful": _entry(_P, pride=0.7, joy=0.3),
    "triumphant": _entry(_P, pride=0.9, excitement=0.5),
    "empowered": _entry(_P, pride=0.7),
    "determined": _entry(_P, pride=0.5, anticipation=0.3),
    "strong": _entry(_P, pride=0.5),
    # Gratitude cluster
    "grateful": _entry(_P, gratitude=0.8),
    "thankful": _entry(_P, gratitude=0.7),
    "appreciative": _entry(_P, gratitude=0.6),
    "thanks": _entry(_P, gratitude=0.5),
    "blessed": _entry(_P, gratitude=0.7, joy=0.3),
    # Hope / anticipation / interest
    "hopeful": _entry(_P, hope=0.7, anticipation=0.4),
    "hope": _entry(_P, hope=0.6),
    "optimistic": _entry(_P, hope=0.6),
    "curious": _entry(_P, interest=0.7),
    "interested": _entry(_P, interest=0.6),
    "interesting": _entry(_P, interest=0.5),
    "fascinated": _entry(_P, interest=0.8, excitement=0.3),
    "inspired": _entry(_P, interest=0.5, hope=0.4),
    "motivated": _entry(_P, anticipation=0.5, pride=0.3),
    # Love / trust / amusement
    "love": _entry(_P, love=0.8),
    "loved": _entry(_P, love=0.9),
    "loving": _entry(_P, love=0.8),
    "adore": _entry(_P, love=0.9),
    "cherished": _entry(_P, love=0.8),
    "trusted": _entry(_P, trust=0.7),
    "trusting": _entry(_P, trust=0.6),
    "trust": _entry(_P, trust=0.6),
    "amused": _entry(_P, amusement=0.7, joy=0.3),
    "funny": _entry(_P, amusement=0.6),
    "hilarious": _entry(_P, amusement=0.9, joy=0.3),
    "lol": _entry(_P, amusement=0.5),
    # Sadness cluster
    "sad": _entry(_N, sadness=0.8),
    "unhappy": _entry(_N, sadness=0.7),
    "depressed": _entry(_N, sadness=0.9),
    "miserable": _entry(_N, sadness=0.9),
    "melancholy": _entry(_N, sadness=0.6),
    "gloomy": _entry(_N, sadness=0.5),
    "heartbroken": _entry(_N, sadness=1.0),
    "lonely": _entry(_N, sadness=0.7),
    "hopeless": _entry(_N, sadness=0.8, fear=0.2),
    "grief": _entry(_N, sadness=0.9),
    "crying": _entry(_N, sadness=0.7),
    "bad": _entry(_N, sadness=0.4, disappointment=0.2),
    "terrible": _entry(_N, sadness=0.6, disgust=0.2),
    "awful": _entry(_N, sadness=0.6, disgust=0.2),
    "horrible": _entry(_N, sadness=0.5, disgust=0.4),
    # Anger cluster
    "angry": _entry(_N, anger=0.8),
    "mad": _entry(_N, anger=0.7),
    "furious": _entry(_N, anger=0.9),
    "livid": _entry(_N, anger=1.0),
    "irritated": _entry(_N, anger=0.5),
    "annoyed": _entry(_N, anger=0.4, frustration=0.3),
    "outraged": _entry(_N, anger=0.9),
    "hate": _entry(_N, anger=0.7, disgust=0.4),
    # Fear / anxiety cluster
    "afraid": _entry(_N, fear=0.8),
    "scared": _entry(_N, fear=0.7),
    "terrified": _entry(_N, fear=0.9),
    "frightened": _entry(_N, fear=0.8),
    "panicked": _entry(_N, fear=0.8, anxiety=0.5),
    "anxious": _entry(_N, anxiety=0.8, fear=0.4),
    "worried": _entry(_N, anxiety=0.7, fear=0.3),
    "nervous": _entry(_N, anxiety=0.7),
    "stressed": _entry(_N, anxiety=0.7, frustration=0.3),
    "tense": _entry(_N, anxiety=0.5),
    "uneasy": _entry(_N, anxiety=0.4),
    "overwhelmed": _entry(_N, anxiety=0.7, fear=0.4),
    # Disgust / contempt cluster
    "disgusted": _entry(_N, disgust=0.8),
    "disgusting": _entry(_N, disgust=0.8),
    "repulsed": _entry(_N, disgust=0.7),
    "grossed": _entry(_N, disgust=0.6),
    "gross": _entry(_N, disgust=0.6),
    "contempt": _entry(_N, contempt=0.8),
    "pathetic": _entry(_N, contempt=0.6),
    # Self-conscious emotions
    "guilty": _entry(_N, guilt=0.7),
    "sorry": _entry(_N, guilt=0.4, sadness=0.2),
    "ashamed": _entry(_N, shame=0.8),
    "embarrassed": _entry(_N, shame=0.6),
    "humiliated": _entry(_N, shame=0.9),
    "envious": _entry(_N, envy=0.6),
    "jealous": _entry(_N, envy=0.7),
    # Disappointment / frustration
    "disappointed": _entry(_N, disappointment=0.8, sadness=0.3),
    "disappointing": _entry(_N, disappointment=0.7),
    "discouraged": _entry(_N, disappointment=0.6, sadness=0.3),
    "frustrated": _entry(_N, frustration=0.8, anger=0.3),
    "frustrating": _entry(_N, frustration=0.7),
    "pessimistic": _entry(_N, sadness=0.4, fear=0.3),
    # Low-energy states
    "bored": _entry(_N, boredom=0.6),
    "boring": _entry(_N, boredom=0.5),
    "tired": _entry(_N, fatigue=0.7),
    "exhausted": _entry(_N, fatigue=0.9),
    "sleepy": _entry(_N, fatigue=0.6),
    "drained": _entry(_N, fatigue=0.8, sadness=0.2),
    # Neutral-valence states
    "confused": _entry(_0, confusion=0.7),
    "confusing": _entry(_0, confusion=0.6),
    "puzzled": _entry(_0, confusion=0.6, interest=0.2),
    "lost": _entry(_0, confusion=0.5, sadness=0.2),
    "surprised": _entry(_0, surprise=0.8),
    "shocked": _entry(_0, surprise=0.9, fear=0.2),
    "astonished": _entry(_0, surprise=0.9),
    "wow": _entry(_0, surprise=0.6, excitement=0.3),
}

_MODIFIER_WORDS: dict[str, LexiconEntry] = {
    **_modifiers(
        TAG_NEGATION,
        "not", "no", "never", "none", "nothing", "nowhere", "neither", "nor",
        "cannot", "can't", "won't", "don't", "doesn't", "didn't", "isn't",
        "aren't", "wasn't", "weren't", "haven't", "hasn't", "hadn't", "ain't",
    ),
    **_modifiers(
        TAG_INTENSIFIER,
        "very", "really", "so", "extremely", "incredibly", "absolutely",
        "totally", "completely", "utterly", "highly", "super", "amazingly",
        "awfully", "terribly", "especially", "truly",
    ),
    **_modifiers(
        TAG_DIMINISHER,
        "slightly", "somewhat", "kind", "sort", "fairly", "rather", "pretty",
        "quite", "barely", "kinda", "sorta",
    ),
}

# ── Multi-word expressions (two to four tokens) ──────────────────
_EXPRESSIONS: dict[str, LexiconEntry] = {
    # Positive idioms
    "on cloud nine": _idiom(_P, joy=0.9, excitement=0.5),
    "over the moon": _idiom(_P, joy=0.8, excitement=0.4),
    "head over heels": _idiom(_P, love=0.8, joy=0.4),
    "can't wait": _idiom(_P, anticipation=0.8, excitement=0.5),
    "looking forward": _idiom(_P, anticipation=0.7, hope=0.3),
    "thank you": _idiom(_P, gratitude=0.7),
    "in love": _idiom(_P, love=0.9),
    "at ease": _idiom(_P, relaxation=0.7, contentment=0.3),
    "made my day": _idiom(_P, joy=0.8, gratitude=0.3),
    # Sadness idioms
    "feeling blue": _idiom(_N, sadness=0.7),
    "down in the dumps": _idiom(_N, sadness=0.8),
    "let down": _idiom(_N, disappointment=0.8, sadness=0.3),
    "broken heart": _idiom(_N, sadness=1.0),
    # Frustration / anger idioms
    "at my wit's end": _idiom(_N, frustration=0.8, anger=0.3),
    "at wit's end": _idiom(_N, frustration=0.8, anger=0.3),
    "fed up": _idiom(_N, frustration=0.8, anger=0.3),
    "sick of": _idiom(_N, frustration=0.7, disgust=0.3),
    "sick and tired": _idiom(_N, frustration=0.8, fatigue=0.4),
    "seeing red": _idiom(_N, anger=0.9),
    "hot under the collar": _idiom(_N, anger=0.8),
    "pissed off": _idiom(_N, anger=0.9),
    # Anxiety idioms
    "on pins and needles": _idiom(_N, anxiety=0.8, fear=0.3),
    "on edge": _idiom(_N, anxiety=0.7),
    "biting nails": _idiom(_N, anxiety=0.7),
    "freaking out": _idiom(_N, anxiety=0.9, fear=0.4),
    "stressed out": _idiom(_N, anxiety=0.8, frustration=0.3),
    # Fatigue idioms
    "worn out": _idiom(_N, fatigue=0.8),
    "burned out": _idiom(_N, fatigue=0.9, frustration=0.3),
    "burnt out": _idiom(_N, fatigue=0.9, frustration=0.3),
    # Modifier phrases
    **_modifiers(TAG_DIMINISHER, "a bit", "a little", "kind of", "sort of", "a tad"),
    **_modifiers(TAG_NEGATION, "not at all", "no longer", "not really"),
}

WORDS: Mapping[str, LexiconEntry] = MappingProxyType({**_EMOTION_WORDS, **_MODIFIER_WORDS})
EXPRESSIONS: Mapping[str, LexiconEntry] = MappingProxyType(_EXPRESSIONS)


class Lexicon:
    """Read-only view over a word table and a multi-word expression table."""

    def __init__(
        self,
        words: Mapping[str, LexiconEntry] | None = None,
        expressions: Mapping[str, LexiconEntry] | None = None,
    ) -> None:
        self._words = MappingProxyType(dict(WORDS if words is None else words))
        self._expressions = MappingProxyType(dict(EXPRESSIONS if expressions is None else expressions))
        longest = max((len(key.split()) for key in self._expressions), default=1)
        self.max_phrase_words = max(1, longest)

    def __len__(self) -> int:
        return len(self._words) + len(self._expressions)

    def lookup(self, phrase: str) -> LexiconEntry | None:
        if " " in phrase:
            return self._expressions.get(phrase)
        return self._words.get(phrase)

    def has_tag(self, phrase: str | None, tag: str) -> bool:
        if not phrase:
            return False
        entry = self.lookup(phrase)
        return entry is not None and tag in entry.tags

    def is_negation(self, phrase: str | None) -> bool:
        return self.has_tag(phrase, TAG_NEGATION)

    def is_intensifier(self, phrase: str | None) -> bool:
        return self.has_tag(phrase, TAG_INTENSIFIER)

    def is_diminisher(self, phrase: str | None) -> bool:
        return self.has_tag(phrase, TAG_DIMINISHER)


DEFAULT_LEXICON = Lexicon()
