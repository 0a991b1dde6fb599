"""Element resolution through ordered fallback chains

The target page renders the same logical field under different markup
depending on its library version, so every lookup is a chain of Lookup
descriptors tried in order. The first descriptor with a live match wins.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import quick_book_autofill.config as config
from quick_book_autofill.errors import ElementWaitTimeout, WaitTimeout
from quick_book_autofill.utils.timing import wait_until


@dataclass(frozen=True)
class Lookup:
    """
    One lookup descriptor.

    selector:    CSS selector evaluated inside the scope (or inside `within`)
    within:      optional region selector; the first region found is searched
    text:        case-insensitive keywords, any of which the text must contain
    where:       optional predicate over a candidate element
    prefer_last: pick the last candidate instead of the first
    """

    selector: str
    within: Optional[str] = None
    text: Tuple[str, ...] = ()
    where: Optional[Callable] = None
    prefer_last: bool = False

    def describe(self):
        parts = [self.selector]
        if self.within:
            parts.insert(0, f"{self.within} >>")
        if self.text:
            parts.append(f"text~{'|'.join(self.text)}")
        if self.where is not None:
            parts.append(f"where={getattr(self.where, '__name__', 'predicate')}")
        if self.prefer_last:
            parts.append("(last)")
        return " ".join(parts)


def as_chain(target):
    """Accept a selector string, a single Lookup, or a sequence of either"""
    if isinstance(target, str):
        return (Lookup(target),)
    if isinstance(target, Lookup):
        return (target,)
    return tuple(Lookup(item) if isinstance(item, str) else item for item in target)


def describe_chain(chain):
    return " -> ".join(lookup.describe() for lookup in as_chain(chain))


def candidates(scope, lookup) -> List:
    """All live elements matching one descriptor, in document order"""
    root = scope
    if lookup.within:
        region = scope.locator(lookup.within)
        if region.count() == 0:
            return []
        root = region.first

    matches = root.locator(lookup.selector)
    if lookup.text:
        pattern = "|".join(re.escape(keyword) for keyword in lookup.text)
        matches = matches.filter(has_text=re.compile(pattern, re.IGNORECASE))

    found = []
    for i in range(matches.count()):
        element = matches.nth(i)
        if lookup.where is not None and not lookup.where(element):
            continue
        found.append(element)
    return found


def locate(scope, chain):
    """Return (lookup, element) for the first descriptor with a match, else (None, None)"""
    for lookup in as_chain(chain):
        found = candidates(scope, lookup)
        if found:
            return lookup, (found[-1] if lookup.prefer_last else found[0])
    return None, None


def resolve(scope, chain):
    """First live element along the chain, or None"""
    return locate(scope, chain)[1]


def resolve_all(scope, chain):
    """
    Resolve a list of repeated fields tier by tier.

    The first descriptor yielding a non-empty collection wins as a whole, so
    entries never mix markup shapes. Returns (lookup, elements).
    """
    for lookup in as_chain(chain):
        found = candidates(scope, lookup)
        if found:
            return lookup, found
    return None, []


def count_matches(scope, chain):
    return len(resolve_all(scope, chain)[1])


def await_element(scope, chain, timeout_ms=None):
    """
    Block until the chain resolves, polling at the configured interval.

    Raises ElementWaitTimeout when the budget elapses without a match.
    """
    chain = as_chain(chain)
    if timeout_ms is None:
        timeout_ms = config.TIMING["element_timeout"]
    description = describe_chain(chain)
    try:
        return wait_until(
            lambda: resolve(scope, chain),
            timeout_ms,
            config.TIMING["poll_interval"],
            description=description,
        )
    except WaitTimeout:
        raise ElementWaitTimeout(description, timeout_ms) from None
