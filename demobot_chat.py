#!/usr/bin/env python3
"""DemoBot Terminal Chat.

This module provides a command-line interface to talk to the FAQ bot directly,
without running the HTTP node. Everything typed goes through the same
`answer()` call the node uses, including inline training
(`train:question|answer`).
"""

import logging
import os
import sys

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from demobot.bot_logger import setup_logger
from demobot.chatbot import Chatbot, Response, format_confidence
from demobot.config import CONFIDENCE_THRESHOLD, FAQ_PATH
from demobot.knowledge_store import KnowledgeStore
from demobot.system_health import compute_health_snapshot

CYAN = "\033[96m"
GREEN = "\033[92m"
GRAY = "\033[90m"
RESET = "\033[0m"

WELCOME = (
    "Hi — I'm a demo chatbot. Ask me something or teach me using "
    "'train:question|answer'."
)


def render_reply(response: Response) -> str:
    return f"{CYAN}bot>{RESET} {response.text}{format_confidence(response)}"


def render_stats(bot: Chatbot) -> str:
    snap = compute_health_snapshot(bot.store, bot.threshold)
    return (
        f"{GRAY}[Stats] {snap['total_entries']} entries in {snap['faq_path']} "
        f"({snap['faq_file_bytes']} bytes on disk), "
        f"threshold {snap['confidence_threshold']:.2f}{RESET}"
    )


def main():
    """Execute the interactive chat loop until /quit or EOF."""
    setup_logger(logging.WARNING)

    bot = Chatbot(KnowledgeStore.open(FAQ_PATH), threshold=CONFIDENCE_THRESHOLD)

    print(f"{CYAN}◈ DemoBot Terminal Chat{RESET}")
    print(f"  FAQ file: {FAQ_PATH}")
    print("  Commands: /stats | /quit")
    print("  Teach: train:How do I reset my password?|Settings -> Account -> Reset Password.")
    print()
    print(f"{CYAN}bot>{RESET} {WELCOME}")

    while True:
        try:
            line = input(f"{GREEN}you>{RESET} ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye.")
            break
        if not line:
            continue
        if line.lower() in ("/quit", "/exit"):
            print("Bye.")
            break
        if line.lower() == "/stats":
            print(render_stats(bot))
            continue

        print(render_reply(bot.answer(line)))


if __name__ == "__main__":
    main()
