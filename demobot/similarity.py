# DemoBot - similarity.py
# Copyright (C) 2026 The DemoBot Contributors

import logging
import math
from collections.abc import Iterable, Mapping

from demobot.vector_model import term_frequencies

logger = logging.getLogger(__name__)


def cosine(a: Mapping[str, int], b: Mapping[str, int]) -> float:
    """Cosine similarity of two count maps; 0.0 when either side is empty."""
    if not a or not b:
        return 0.0

    dot = sum(count * b.get(token, 0) for token, count in a.items())
    norm_a = math.sqrt(sum(v * v for v in a.values()))
    norm_b = math.sqrt(sum(v * v for v in b.values()))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    # Clamp float drift so identical vectors report exactly 1.0 at most.
    return min(1.0, dot / (norm_a * norm_b))


def best_match(
    query_vector: Mapping[str, int],
    questions: Iterable[str],
) -> tuple[int | None, float]:
    """Scan stored (normalized) questions and return (index, score) of the best one.

    Ties keep the earliest question. An empty store yields (None, -1.0).
    """
    best_idx: int | None = None
    best_score = -1.0

    for idx, question in enumerate(questions):
        score = cosine(query_vector, term_frequencies(question))
        if score > best_score:
            best_score = score
            best_idx = idx

    logger.debug(f"[Matcher] Best candidate {best_idx} scored {best_score:.3f}")
    return best_idx, best_score
