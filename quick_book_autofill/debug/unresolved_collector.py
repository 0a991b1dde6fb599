"""
Debug-only unresolved field collector

Read-only observability into lookups that found nothing. It does NOT change
pipeline behavior; a missing field is still only a logged warning.

Usage:
    1. Fillers call record_unresolved_field() whenever a chain is exhausted
    2. With --debug-unresolved, flush_unresolved_fields() writes the buffer
       at the end of the run; otherwise discard_unresolved_fields() drops it

Output:
    debug_unresolved.jsonl - one JSON object per unresolved field
"""

import json
from datetime import datetime
from typing import Dict, List
from zoneinfo import ZoneInfo

import quick_book_autofill.config as config
from quick_book_autofill.perception.resolver import describe_chain

_unresolved_buffer: List[Dict] = []


def record_unresolved_field(*, site, page_url, step, field, chain, entry=None):
    """
    Record an unresolved field to the in-memory buffer.

    Args:
        site: Filler name (e.g., IRCTC Filler)
        page_url: URL of the page being filled
        step: Pipeline step (grow, passengers, contact, payment, submit)
        field: Logical field name (e.g., passenger_age)
        chain: The fallback chain that was exhausted
        entry: 1-based passenger index for repeated fields, else None
    """
    _unresolved_buffer.append(
        {
            "timestamp": datetime.now(ZoneInfo(config.LOG_TIMEZONE)).isoformat(),
            "site": site,
            "page_url": page_url,
            "step": step,
            "field": field,
            "entry": entry,
            "chain": describe_chain(chain),
        }
    )


def pending_unresolved_fields():
    return list(_unresolved_buffer)


def flush_unresolved_fields(path=None):
    """
    Append all buffered records to the debug file and clear the buffer.
    Returns the number of records written.
    """
    if not _unresolved_buffer:
        return 0

    count = len(_unresolved_buffer)
    with open(path or config.DEBUG_UNRESOLVED_FILE, "a", encoding="utf-8") as f:
        for record in _unresolved_buffer:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    _unresolved_buffer.clear()
    return count


def discard_unresolved_fields():
    _unresolved_buffer.clear()
