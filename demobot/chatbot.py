# DemoBot - chatbot.py
# Copyright (C) 2026 The DemoBot Contributors

import logging
from dataclasses import dataclass

from demobot.config import CONFIDENCE_THRESHOLD
from demobot.conversation_patterns import (
    ConversationPattern,
    compile_patterns,
    match_rule,
    seed_patterns,
)
from demobot.knowledge_store import KnowledgeStore
from demobot.normalizer import normalize
from demobot.similarity import best_match
from demobot.vector_model import term_frequencies

logger = logging.getLogger(__name__)

TRAIN_PREFIX = "train:"

EMPTY_INPUT_MESSAGE = "Please type something."
TRAIN_FORMAT_MESSAGE = "Training failed. Use format: train:question|answer"
TRAIN_EMPTY_MESSAGE = "Training failed. Question or answer empty."
FALLBACK_MESSAGE = (
    "Sorry, I don't know the answer to that. "
    "You can teach me using:\ntrain:Your question?|Your answer"
)


@dataclass(frozen=True)
class Response:
    text: str
    confidence: float  # cosine score, or 1.0 for rule/training replies


def format_confidence(response: Response) -> str:
    """Suffix shown next to similarity answers; empty for rules and misses."""
    if 0.0 < response.confidence < 1.0:
        return f" (confidence: {response.confidence:.2f})"
    return ""


class Chatbot:
    """Routes one user message through rules, training, then FAQ similarity."""

    def __init__(
        self,
        store: KnowledgeStore,
        patterns: list[ConversationPattern] | None = None,
        threshold: float = CONFIDENCE_THRESHOLD,
    ):
        self.store = store
        self.patterns = patterns if patterns is not None else seed_patterns()
        compile_patterns(self.patterns)
        self.threshold = threshold

    def answer(self, user_input: str) -> Response:
        trimmed = (user_input or "").strip()
        if not trimmed:
            return Response(EMPTY_INPUT_MESSAGE, 0.0)

        with self.store.lock:
            rule_reply = match_rule(trimmed, self.patterns)
            if rule_reply is not None:
                return Response(rule_reply, 1.0)

            if trimmed.startswith(TRAIN_PREFIX):
                return Response(self.train(trimmed), 1.0)

            query_vector = term_frequencies(normalize(trimmed))
            best_idx, best = best_match(query_vector, self.store.questions)

            if best_idx is not None and best >= self.threshold:
                return Response(self.store.answer_at(best_idx), best)

            logger.debug(f"[Chatbot] Fallback for '{trimmed}' (best {best:.2f})")
            return Response(FALLBACK_MESSAGE, max(best, 0.0))

    def train(self, raw: str) -> str:
        """Handle "train:question|answer" and return the status line to show."""
        payload = raw.strip()
        if payload.startswith(TRAIN_PREFIX):
            payload = payload[len(TRAIN_PREFIX):]

        question, sep, answer = payload.strip().partition("|")
        if not sep:
            return TRAIN_FORMAT_MESSAGE

        question = question.strip()
        answer = answer.strip()
        if not question or not answer:
            return TRAIN_EMPTY_MESSAGE

        with self.store.lock:
            self.store.append(question, answer)
        logger.info(f"[Chatbot] Learned a new response for '{question}'")
        return f'Thanks — I learned a new response for: "{question}"'
