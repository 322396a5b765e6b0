# DemoBot - node.py
# Copyright (C) 2026 The DemoBot Contributors

import logging

from flask import Flask, jsonify, request
from flask_cors import CORS

from demobot.bot_logger import setup_logger
from demobot.chatbot import (
    TRAIN_EMPTY_MESSAGE,
    TRAIN_FORMAT_MESSAGE,
    TRAIN_PREFIX,
    Chatbot,
)
from demobot.config import CONFIDENCE_THRESHOLD, FAQ_PATH, HOST, PORT
from demobot.knowledge_store import KnowledgeStore
from demobot.system_health import compute_health_snapshot

logger = logging.getLogger("node")

app = Flask(__name__)
CORS(app, resources={r"/*": {"origins": "*"}})
bot_instance: Chatbot | None = None


def _not_ready():
    return jsonify({"error": "Bot is not initialized"}), 503


@app.route("/answer", methods=["GET"])
def handle_answer():
    if bot_instance is None:
        return _not_ready()

    query = request.args.get("query", "")
    if not query.strip():
        return jsonify({"error": "Missing query"}), 400

    reply = bot_instance.answer(query)
    return jsonify({"response": reply.text, "confidence": reply.confidence})


@app.route("/train", methods=["POST"])
def handle_train():
    """Teach a Q/A pair from JSON {"question": ..., "answer": ...}."""
    if bot_instance is None:
        return _not_ready()

    payload = request.get_json(silent=True) or {}
    question = str(payload.get("question") or "").strip()
    answer = str(payload.get("answer") or "").strip()
    if not question or not answer:
        return jsonify({"error": "Both 'question' and 'answer' are required"}), 400

    # The first pipe separates the pair, so it cannot appear in the question.
    if "|" in question:
        return jsonify({"error": "'question' must not contain '|'"}), 400

    with bot_instance.store.lock:
        reply = bot_instance.train(f"{TRAIN_PREFIX}{question}|{answer}")
        entries = len(bot_instance.store)
    if reply in (TRAIN_FORMAT_MESSAGE, TRAIN_EMPTY_MESSAGE):
        return jsonify({"error": reply, "entries": entries}), 400
    return jsonify({"response": reply, "entries": entries})


@app.route("/health", methods=["GET"])
def handle_health():
    if bot_instance is None:
        return _not_ready()
    return jsonify(
        compute_health_snapshot(bot_instance.store, bot_instance.threshold)
    )


def create_bot(faq_path: str = FAQ_PATH) -> Chatbot:
    store = KnowledgeStore.open(faq_path)
    return Chatbot(store, threshold=CONFIDENCE_THRESHOLD)


if __name__ == "__main__":
    setup_logger()
    logger.info(f"[Node] Starting DemoBot with knowledge base at {FAQ_PATH}")
    bot_instance = create_bot()
    app.run(host=HOST, port=PORT, debug=False)
