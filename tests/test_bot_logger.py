"""Tests for the console log formatter."""

import logging

from demobot.bot_logger import (
    CYAN,
    MAGENTA,
    RED,
    WHITE,
    YELLOW,
    BotFormatter,
    setup_logger,
)


def _record(msg, level=logging.INFO):
    return logging.LogRecord("demobot", level, __file__, 1, msg, None, None)


def test_colors_follow_component_tag():
    fmt = BotFormatter()
    assert CYAN in fmt.format(_record("[Store] Saved 5 entries to faqs.txt"))
    assert MAGENTA in fmt.format(_record("[Chatbot] Learned a new response for 'x'"))
    assert YELLOW in fmt.format(_record("[Node] Starting DemoBot"))
    assert WHITE in fmt.format(_record("untagged message"))
    assert WHITE in fmt.format(_record("[Unknown] tag"))


def test_errors_are_red_regardless_of_tag():
    out = BotFormatter().format(_record("[Store] Could not save faqs.txt", logging.ERROR))
    assert RED in out
    assert CYAN not in out
    assert "✖" in out


def test_message_text_is_kept():
    out = BotFormatter().format(_record("[Chatbot] Learned a new response for 'x'"))
    assert "Learned a new response for 'x'" in out


def test_setup_logger_replaces_root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logger()
        setup_logger(logging.DEBUG)
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, BotFormatter)
        assert root.level == logging.DEBUG
        assert logging.getLogger("werkzeug").level == logging.ERROR
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
