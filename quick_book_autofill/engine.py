"""Fill request entry point

Turns one payload into one FillResult. Whatever happens, the caller gets a
result back, never an exception.
"""

from quick_book_autofill.errors import InvalidFillRequest
from quick_book_autofill.fillers.base import PageContext
from quick_book_autofill.models import FillRequest, FillResult

UNSUPPORTED_SITE_MESSAGE = "site not supported"


def handle_fill_request(registry, page, payload):
    """
    Run the matching filler for page against payload.

    payload is a FillRequest or its dict form. Unsupported sites and invalid
    payloads are rejected before any DOM interaction.
    """
    context = PageContext.from_url(page.url)
    filler = registry.active_filler(context)
    if filler is None:
        return FillResult(success=False, message=UNSUPPORTED_SITE_MESSAGE, details=[])

    try:
        if isinstance(payload, FillRequest):
            request = payload
            request.validate()
        else:
            request = FillRequest.from_dict(payload)
    except InvalidFillRequest as e:
        return FillResult(success=False, message=f"Invalid fill request: {e}", details=[])

    print(f"Using {filler.name} to fill form")

    try:
        return filler.fill(page, request)
    except Exception as e:
        print(f"❌ {filler.name} crashed: {e}")
        return FillResult(success=False, message=str(e), details=[])
