"""Tests for the terminal chat loop."""

from unittest.mock import patch

import pytest

import demobot_chat
from demobot.chatbot import Chatbot, Response
from demobot.knowledge_store import KnowledgeStore


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch.object(demobot_chat, "setup_logger"):
        yield


def test_render_reply_adds_confidence_for_similarity_answers():
    assert demobot_chat.render_reply(Response("Use Clear.", 0.8165)).endswith(
        "Use Clear. (confidence: 0.82)"
    )
    assert demobot_chat.render_reply(Response("Hello!", 1.0)).endswith("Hello!")


def test_render_stats(tmp_path):
    bot = Chatbot(KnowledgeStore.open(str(tmp_path / "faqs.txt")))
    assert "4 entries" in demobot_chat.render_stats(bot)


def test_main_loop(tmp_path, capsys):
    faq_path = str(tmp_path / "faqs.txt")
    lines = iter(["hello", "", "train:Who built you?|The team.", "/stats", "/quit"])
    with patch.object(demobot_chat, "FAQ_PATH", faq_path), patch(
        "builtins.input", lambda _prompt: next(lines)
    ):
        demobot_chat.main()

    out = capsys.readouterr().out
    assert "Hello! How can I help you today?" in out
    assert 'I learned a new response for: "Who built you?"' in out
    assert "5 entries" in out
    assert out.rstrip().endswith("Bye.")


def test_main_exits_on_eof(tmp_path, capsys):
    def raise_eof(_prompt):
        raise EOFError

    with patch.object(demobot_chat, "FAQ_PATH", str(tmp_path / "faqs.txt")), patch(
        "builtins.input", raise_eof
    ):
        demobot_chat.main()
    assert "Bye." in capsys.readouterr().out
