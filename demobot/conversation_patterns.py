"""Define and match the canned conversational rules of DemoBot.

Rules are checked before the knowledge base. Each rule pairs a case-insensitive
regex with a fixed reply; the list order is the priority order and the first
rule whose regex matches the whole trimmed input wins.
"""

import re
from dataclasses import dataclass


@dataclass
class ConversationPattern:
    """Lightweight, rule-based pattern for fast input → response matching."""

    name: str
    raw_pattern: str
    response: str
    # Compiled at startup (or lazily on first use)
    regex: re.Pattern | None = None

    def compile(self) -> None:
        """Compile raw_pattern for full-string, case-insensitive matching.

        Patterns are anchored by fullmatch, so a rule that should fire on an
        embedded keyword must carry its own leading/trailing `.*`. `.` stops at
        line breaks, so input spanning several lines never matches.
        """
        self.regex = re.compile(self.raw_pattern, re.IGNORECASE)

    def matches(self, text: str) -> bool:
        if self.regex is None:
            self.compile()
        return self.regex.fullmatch(text) is not None


def seed_patterns() -> list[ConversationPattern]:
    """Build the fixed rule table in priority order."""
    return [
        ConversationPattern(
            name="greeting",
            raw_pattern=r"(hi|hello|hey|good morning|good afternoon|good evening)\b.*",
            response="Hello! How can I help you today?",
        ),
        ConversationPattern(
            name="thanks",
            raw_pattern=r".*\b(thanks|thank you|thx)\b.*",
            response="You're welcome — happy to help!",
        ),
        ConversationPattern(
            name="farewell",
            raw_pattern=r"(bye|goodbye|see ya|exit)\b.*",
            response="Goodbye! If you need anything else, just start a new chat.",
        ),
        ConversationPattern(
            name="help",
            raw_pattern=r".*\b(help|support)\b.*",
            response=(
                "I can answer FAQs or you can teach me new Q→A pairs using: "
                "train:question|answer"
            ),
        ),
    ]


def compile_patterns(patterns: list[ConversationPattern]) -> None:
    """Compile regex for each pattern in-place."""
    for p in patterns:
        p.compile()


def match_rule(
    text: str,
    patterns: list[ConversationPattern],
) -> str | None:
    """Return the reply of the first pattern matching the trimmed text, if any."""
    trimmed = (text or "").strip()
    if not trimmed:
        return None

    for p in patterns:
        if p.matches(trimmed):
            return p.response
    return None
