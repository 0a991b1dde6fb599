"""Site filler interface"""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlparse

from quick_book_autofill.models import FillRequest, FillResult


@dataclass(frozen=True)
class PageContext:
    """What a filler may inspect to decide whether it handles a page"""

    url: str
    hostname: str

    @classmethod
    def from_url(cls, url):
        return cls(url=url or "", hostname=(urlparse(url or "").hostname or "").lower())

    def on_host(self, host):
        """True for host itself or any of its subdomains"""
        return self.hostname == host or self.hostname.endswith("." + host)


class SiteFiller(Protocol):
    """
    A capability-scoped automation unit bound to one site.

    Instances hold no per-fill state; one instance serves every fill for the
    lifetime of the process.
    """

    name: str

    def can_handle(self, context: PageContext) -> bool:
        ...

    def fill(self, page, request: FillRequest) -> FillResult:
        ...
