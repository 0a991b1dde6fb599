"""Logging utilities"""

import json
from datetime import datetime
from zoneinfo import ZoneInfo

import quick_book_autofill.config as config


class ProgressLog:
    """
    Ordered, human-readable record of one fill run.

    Every line is kept for the FillResult details and echoed to the console
    as it happens, so a crashed run still shows how far it got.
    """

    def __init__(self, echo=True):
        self.lines = []
        self.echo = echo

    def add(self, line):
        self.lines.append(line)
        if self.echo:
            print(f"  {line}")

    def section(self, title):
        if self.echo:
            print()
        self.add(f"=== {title} ===")

    def __len__(self):
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)


def log_result(page_url, status, reason="", passengers=0):
    """Log fill result to JSONL file"""
    result = {
        "timestamp": datetime.now(ZoneInfo(config.LOG_TIMEZONE)).isoformat(),
        "page_url": page_url,
        "status": status,
        "passengers": passengers,
    }
    if reason:
        result["reason"] = reason

    with open(config.RESULT_LOG_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(result, ensure_ascii=False) + "\n")

    print(f"[{status}] {page_url}")
    if reason:
        print(f"  Reason: {reason}")
