"""
DemoBot - system_health.py

Lightweight snapshot of the knowledge base for the /health endpoint
and the terminal /stats command.
"""

import os
from typing import Any, Dict

from demobot.knowledge_store import KnowledgeStore


def compute_health_snapshot(store: KnowledgeStore, threshold: float) -> Dict[str, Any]:
    with store.lock:
        total_entries = len(store)
        path = store.path
        exists = os.path.exists(path)
        try:
            size = os.path.getsize(path) if exists else 0
        except OSError:
            size = 0

    return {
        "total_entries": int(total_entries),
        "faq_path": path,
        "faq_file_exists": exists,
        "faq_file_bytes": int(size),
        "confidence_threshold": float(threshold),
    }
