"""Tests for cosine similarity and best-match ranking."""

import math

from demobot.config import CONFIDENCE_THRESHOLD
from demobot.similarity import best_match, cosine
from demobot.vector_model import term_frequencies


def test_identical_vectors_score_one():
    v = term_frequencies("clear chat")
    assert cosine(v, v) == 1.0


def test_empty_vector_scores_zero():
    v = term_frequencies("clear chat")
    assert cosine({}, v) == 0.0
    assert cosine(v, {}) == 0.0
    assert cosine({}, {}) == 0.0


def test_cosine_is_symmetric_and_bounded():
    a = term_frequencies("reset password account")
    b = term_frequencies("password password reset")
    assert cosine(a, b) == cosine(b, a)
    assert 0.0 <= cosine(a, b) <= 1.0


def test_cosine_known_value():
    a = term_frequencies("your name")
    b = term_frequencies("name")
    assert math.isclose(cosine(a, b), 1 / math.sqrt(2))


def test_best_match_on_empty_store():
    assert best_match(term_frequencies("anything"), []) == (None, -1.0)


def test_best_match_prefers_earliest_on_ties():
    questions = ["clear chat", "train", "clear chat"]
    idx, score = best_match(term_frequencies("clear chat"), questions)
    assert idx == 0
    assert score == 1.0


def test_best_match_with_no_overlap_reports_zero_for_first_entry():
    idx, score = best_match(term_frequencies("zzz"), ["clear chat", "train"])
    assert idx == 0
    assert score == 0.0


def test_default_threshold():
    assert CONFIDENCE_THRESHOLD == 0.30
