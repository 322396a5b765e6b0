"""DemoBot - normalizer.py

Turns raw user text into the clean token string used for matching.
ASCII-only: anything outside [a-z0-9] and whitespace becomes a separator.
"""

import re

STOPWORDS = frozenset(
    {
        "a", "an", "the",
        "is", "are", "was", "were", "be",
        "do", "does", "did",
        "in", "on", "at", "to", "for", "of",
        "and", "or", "not",
        "how", "what", "when", "where", "which", "that",
        "i", "you",
    }
)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def normalize(raw: str) -> str:
    """Lowercase, strip punctuation, and drop stopwords.

    normalize("What is the time?") -> "time"
    """
    # str.lower() would also fold non-ASCII letters; those get blanked below anyway.
    lowered = (raw or "").lower()
    cleaned = _NON_ALNUM.sub(" ", lowered)
    tokens = [tok for tok in cleaned.split() if tok not in STOPWORDS]
    return " ".join(tokens)
