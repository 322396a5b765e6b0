"""DemoBot - vector_model.py

Bag-of-words term frequencies. No IDF weighting.
"""

from collections import Counter


def term_frequencies(normalized_text: str | None) -> Counter[str]:
    """Count whitespace-separated tokens of an already normalized string."""
    if not normalized_text:
        return Counter()
    return Counter(normalized_text.split())
