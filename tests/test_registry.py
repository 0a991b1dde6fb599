from quick_book_autofill.fillers.base import PageContext
from quick_book_autofill.fillers.irctc import IRCTCFiller
from quick_book_autofill.registry import FillerRegistry, build_default_registry


class FakeFiller:
    def __init__(self, name, host):
        self.name = name
        self.host = host

    def can_handle(self, context):
        return context.on_host(self.host)

    def fill(self, page, request):
        raise AssertionError("not used")


def test_first_capable_filler_wins():
    first = FakeFiller("first", "example.com")
    second = FakeFiller("second", "example.com")
    registry = FillerRegistry([first, second])

    assert registry.active_filler(PageContext.from_url("https://example.com/x")) is first


def test_order_is_priority():
    other = FakeFiller("other", "other.org")
    match = FakeFiller("match", "example.com")
    registry = FillerRegistry([other, match])

    assert registry.active_filler(PageContext.from_url("https://shop.example.com/")) is match
    assert len(registry) == 2


def test_no_capable_filler():
    registry = FillerRegistry([FakeFiller("a", "example.com")])
    assert registry.active_filler(PageContext.from_url("https://elsewhere.net/")) is None
    assert FillerRegistry([]).active_filler(PageContext.from_url("https://x.y/")) is None


def test_registry_is_fixed_after_construction():
    fillers = [FakeFiller("a", "example.com")]
    registry = FillerRegistry(fillers)
    fillers.append(FakeFiller("b", "other.org"))

    assert len(registry) == 1
    assert isinstance(registry.fillers, tuple)


def test_page_context_host_matching():
    context = PageContext.from_url("https://WWW.IRCTC.CO.IN/nget/booking/psgninput")
    assert context.hostname == "www.irctc.co.in"
    assert context.on_host("irctc.co.in")
    assert not PageContext.from_url("https://notirctc.co.in/").on_host("irctc.co.in")
    assert PageContext.from_url(None).hostname == ""


def test_default_registry_serves_irctc():
    registry = build_default_registry()
    filler = registry.active_filler(PageContext.from_url("https://www.irctc.co.in/nget/train-search"))

    assert isinstance(filler, IRCTCFiller)
    assert registry.active_filler(PageContext.from_url("https://www.google.com/")) is None
