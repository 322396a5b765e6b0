# DemoBot - bot_logger.py
# Copyright (C) 2026 The DemoBot Contributors
#
# Console output for the node and terminal chat. Messages carry a leading
# component tag ("[Store] ...", "[Chatbot] ...") that picks the colour; the
# level picks the icon, and anything at WARNING or above is shown in red.

import logging
import re
import sys
from datetime import datetime

RESET = "\033[0m"
DIM = "\033[2m"
RED = "\033[91m"
YELLOW = "\033[93m"
MAGENTA = "\033[95m"
CYAN = "\033[96m"
WHITE = "\033[97m"

TAG_COLORS = {
    "Store": CYAN,
    "Chatbot": MAGENTA,
    "Node": YELLOW,
    "Matcher": DIM,
}

LEVEL_ICONS = {
    logging.DEBUG: "·",
    logging.INFO: "•",
    logging.WARNING: "!",
    logging.ERROR: "✖",
    logging.CRITICAL: "✖",
}

_TAG = re.compile(r"^\[(\w+)\]")


class BotFormatter(logging.Formatter):
    """12-hour timestamp, level icon, and a colour chosen by component tag."""

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%I:%M:%S%p")
        msg = record.getMessage()

        if record.levelno >= logging.WARNING:
            color = RED
        else:
            tag = _TAG.match(msg)
            color = TAG_COLORS.get(tag.group(1), WHITE) if tag else WHITE
        icon = LEVEL_ICONS.get(record.levelno, "•")

        return f"{DIM}{timestamp}{RESET} {color}{icon} {msg}{RESET}"


def setup_logger(level=logging.INFO):
    """Point the root logger at stdout through BotFormatter (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(BotFormatter())
    root.addHandler(handler)

    # Werkzeug logs every request at INFO; keep only its errors.
    logging.getLogger("werkzeug").setLevel(logging.ERROR)
