"""Registry of known site fillers"""

from quick_book_autofill.fillers.irctc import IRCTCFiller


class FillerRegistry:
    """
    Fixed, ordered collection of site fillers.

    Built once by the entry point and passed to whatever runs a fill. The
    order is the matching priority; nothing is added after construction.
    """

    def __init__(self, fillers):
        self._fillers = tuple(fillers)

    @property
    def fillers(self):
        return self._fillers

    def active_filler(self, context):
        """First filler whose capability check accepts context, or None (unsupported site)"""
        for filler in self._fillers:
            if filler.can_handle(context):
                return filler
        return None

    def __len__(self):
        return len(self._fillers)


def build_default_registry():
    return FillerRegistry([IRCTCFiller()])
