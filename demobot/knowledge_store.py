# DemoBot - knowledge_store.py
# Copyright (C) 2026 The DemoBot Contributors
#
# Append-only Q/A store persisted as "normalized question|||answer" lines.

import logging
import os
import threading

from demobot.config import FAQ_PATH
from demobot.normalizer import normalize

logger = logging.getLogger(__name__)

DELIMITER = "|||"

DEFAULT_FAQS = [
    (
        "what can you do",
        "I can answer frequently asked questions. You may also teach me new "
        "Q->A pairs using: train:question|answer",
    ),
    (
        "how do i train you",
        "Type: train:Your question?|Your answer. Example: "
        "train:What is your name?|I am DemoBot.",
    ),
    (
        "how do i clear chat",
        "Use the Clear button in the UI to clear the conversation pane.",
    ),
    (
        "what languages do you support",
        "This demo uses simple English-only preprocessing. You can expand it later.",
    ),
]


class KnowledgeStore:
    """Parallel question/answer sequences backed by a flat text file.

    Entries are only ever appended. Every public method runs under `lock`, a
    re-entrant lock that callers (the chatbot) also hold while they read and
    train, so an answer never sees a half-written entry.
    """

    def __init__(self, path: str = FAQ_PATH):
        self.path = path
        self.lock = threading.RLock()
        self._questions: list[str] = []
        self._answers: list[str] = []

    @classmethod
    def open(cls, path: str = FAQ_PATH) -> "KnowledgeStore":
        """Load the store from disk, seeding the defaults when nothing loads."""
        store = cls(path)
        if not store.load():
            store.seed_defaults()
        return store

    def __len__(self) -> int:
        with self.lock:
            return len(self._questions)

    @property
    def questions(self) -> list[str]:
        with self.lock:
            return list(self._questions)

    def answer_at(self, index: int) -> str:
        with self.lock:
            return self._answers[index]

    def entries(self) -> list[tuple[str, str]]:
        with self.lock:
            return list(zip(self._questions, self._answers))

    def load(self) -> bool:
        """Replace memory with the persisted file. True if any entry was read."""
        with self.lock:
            if not os.path.exists(self.path):
                return False

            try:
                with open(self.path, encoding="utf-8") as f:
                    lines = [raw.rstrip("\n") for raw in f]
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"[Store] Could not read {self.path}: {e}")
                return False

            questions: list[str] = []
            answers: list[str] = []
            for line in lines:
                if not line.strip():
                    continue
                question, sep, answer = line.partition(DELIMITER)
                if not sep:
                    continue
                questions.append(question)
                answers.append(answer)

            self._questions = questions
            self._answers = answers
            if questions:
                logger.info(
                    f"[Store] Loaded {len(questions)} entries from {self.path}"
                )
            return bool(questions)

    def seed_defaults(self) -> None:
        with self.lock:
            logger.info("[Store] Seeding default FAQs")
            for question, answer in DEFAULT_FAQS:
                self.add(question, answer)

    def add(self, question: str, answer: str) -> None:
        """Normalize the question and append the pair in memory only."""
        with self.lock:
            self._questions.append(normalize(question))
            self._answers.append(answer)

    def append(self, question: str, answer: str) -> None:
        """Add an entry and rewrite the whole file so disk mirrors memory."""
        with self.lock:
            self.add(question, answer)
            self.save()

    def save(self) -> bool:
        """Overwrite the persisted file. Failures are logged, never raised."""
        with self.lock:
            try:
                with open(self.path, "w", encoding="utf-8") as f:
                    for question, answer in zip(self._questions, self._answers):
                        f.write(f"{question}{DELIMITER}{answer}\n")
            except OSError as e:
                logger.error(f"[Store] Could not save {self.path}: {e}")
                return False

            logger.info(f"[Store] Saved {len(self._questions)} entries to {self.path}")
            return True
