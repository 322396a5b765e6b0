"""DemoBot - self_check.py

Deterministic self-query checks for the /answer endpoint of a running node.
These are light sanity checks, not full tests.

    python -m demobot.self_check --url http://127.0.0.1:8010
"""

import argparse
import sys
from dataclasses import dataclass

import requests

from demobot.config import PORT, SELF_CHECK_TIMEOUT


@dataclass
class SelfCheckCase:
    query: str
    must_contain: list[str]


SELF_CHECKS: list[SelfCheckCase] = [
    SelfCheckCase(
        query="hello",
        must_contain=["hello"],
    ),
    SelfCheckCase(
        query="I need help",
        must_contain=["train:question|answer"],
    ),
    SelfCheckCase(
        query="how do I train you?",
        must_contain=["train:"],
    ),
]


def run_self_checks(
    base_url: str,
    timeout: float = SELF_CHECK_TIMEOUT,
) -> list[dict]:
    """Run a small suite of self-queries against /answer and report pass/fail."""
    results: list[dict] = []
    for case in SELF_CHECKS:
        try:
            resp = requests.get(
                f"{base_url.rstrip('/')}/answer",
                params={"query": case.query},
                timeout=timeout,
            )
            resp.raise_for_status()
            data = resp.json()
            answer = str(data.get("response", "")).lower()
            missing = [
                kw for kw in case.must_contain if kw.lower() not in answer
            ]
            results.append(
                {
                    "query": case.query,
                    "ok": not missing,
                    "missing_keywords": missing,
                }
            )
        except (requests.RequestException, ValueError) as e:
            results.append(
                {
                    "query": case.query,
                    "ok": False,
                    "error": str(e),
                }
            )
    return results


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Probe a running DemoBot node.")
    parser.add_argument("--url", default=f"http://127.0.0.1:{PORT}")
    parser.add_argument("--timeout", type=float, default=SELF_CHECK_TIMEOUT)
    args = parser.parse_args(argv)

    results = run_self_checks(args.url, timeout=args.timeout)
    for r in results:
        status = "PASS" if r["ok"] else "FAIL"
        detail = r.get("error") or ", ".join(r.get("missing_keywords", []))
        print(f"[{status}] {r['query']}" + (f"  ({detail})" if detail else ""))
    return 0 if all(r["ok"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
