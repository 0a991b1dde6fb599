"""Timing utilities"""

import time

from quick_book_autofill.errors import WaitTimeout


def pause(ms):
    """Fixed settle delay, in milliseconds"""
    if ms > 0:
        time.sleep(ms / 1000)


def wait_until(predicate, timeout_ms, interval_ms, description="condition"):
    """
    Poll predicate until it produces a result or the budget runs out.

    The predicate is evaluated at least once. Returns the first result that is
    neither None nor False; raises WaitTimeout when timeout_ms elapses first.
    """
    deadline = time.monotonic() + timeout_ms / 1000
    while True:
        result = predicate()
        if result is not None and result is not False:
            return result
        if time.monotonic() >= deadline:
            raise WaitTimeout(description, timeout_ms)
        pause(interval_ms)
