"""Select dropdown resolution logic"""


def pick_option_index(options, desired):
    """
    Resolve a desired value to an option index, or None.

    options is a list of {"value": str, "text": str} dicts in document order.
    Strict priority across the whole list: exact value, then exact display
    text, then display text containing desired. First match wins per tier.
    """
    if desired is None:
        return None
    desired = str(desired)

    for i, option in enumerate(options):
        if option.get("value") == desired:
            return i

    for i, option in enumerate(options):
        if option.get("text") == desired:
            return i

    if desired:
        for i, option in enumerate(options):
            if desired in (option.get("text") or ""):
                return i

    return None
