# DemoBot - config.py
# Copyright (C) 2026 The DemoBot Contributors
#
# Tunable parameters via environment variables. Restart the bot after changing.
#
# Knowledge base:
#   DEMOBOT_FAQ_PATH              (str, default "faqs.txt") – persisted Q/A file
#   DEMOBOT_CONFIDENCE_THRESHOLD  (float, default 0.30)     – min cosine to answer
#
# HTTP node:
#   DEMOBOT_HOST                  (str, default "0.0.0.0")
#   DEMOBOT_PORT                  (int, default 8010)
#   DEMOBOT_SELF_CHECK_TIMEOUT    (float, default 3.0)      – seconds per query

import os


def _int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _str(key: str, default: str) -> str:
    raw = os.environ.get(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# --- Knowledge base ---
# Flat file holding one "question|||answer" per line, relative to the working dir.
FAQ_PATH = _str("DEMOBOT_FAQ_PATH", "faqs.txt")

# Cosine score a stored question needs before its answer is returned.
# Example: 0.2 = chattier, 0.5 = stricter.
CONFIDENCE_THRESHOLD = _float("DEMOBOT_CONFIDENCE_THRESHOLD", 0.30)

# --- HTTP node ---
HOST = _str("DEMOBOT_HOST", "0.0.0.0")
PORT = _int("DEMOBOT_PORT", 8010)

# Per-request timeout used by the self-check suite.
SELF_CHECK_TIMEOUT = _float("DEMOBOT_SELF_CHECK_TIMEOUT", 3.0)
