from __future__ import annotations

import re

# Typographic apostrophes are folded to ASCII first.
_CURLY_APOSTROPHE = re.compile("[\u2018\u2019]")
# Apostrophes not wedged between two word characters (quotes, leading or
# trailing marks). Contractions such as "can't" keep theirs.
_STRAY_APOSTROPHE = re.compile(r"(?<!\w)'|'(?!\w)")
_PUNCTUATION = re.compile(r"([^\w\s'])")
_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Split *text* into lowercase word tokens with punctuation isolated.

    >>> tokenize("I'm SO happy!!")
    ["i'm", 'so', 'happy', '!', '!']
    """
    if not text:
        return []
    processed = _CURLY_APOSTROPHE.sub("'", text.lower())
    processed = _STRAY_APOSTROPHE.sub("", processed)
    processed = _PUNCTUATION.sub(r" \1 ", processed)
    processed = _WHITESPACE.sub(" ", processed).strip()
    if not processed:
        return []
    return processed.split(" ")
