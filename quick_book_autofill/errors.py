"""Exception types raised by the autofill engine"""


class AutofillError(Exception):
    """Base exception for all autofill errors."""


class InvalidFillRequest(AutofillError):
    """The fill payload is incomplete or malformed."""


class ElementNotFound(AutofillError):
    """A lookup chain was exhausted without a live match."""

    def __init__(self, description, message=None):
        self.description = description
        AutofillError.__init__(self, message or f"Element not found: {description}")


class WaitTimeout(AutofillError):
    """A bounded wait ran out before its condition was met."""

    def __init__(self, description, timeout_ms, message=None):
        self.description = description
        self.timeout_ms = timeout_ms
        AutofillError.__init__(
            self, message or f"Timed out after {timeout_ms}ms waiting for {description}"
        )


class ElementWaitTimeout(ElementNotFound, WaitTimeout):
    """Raised by await_element when nothing matched within its budget."""

    def __init__(self, description, timeout_ms):
        self.description = description
        self.timeout_ms = timeout_ms
        AutofillError.__init__(
            self, f"Element {description} not found within {timeout_ms}ms"
        )
