"""Select dropdown detection"""


def read_options(control):
    """
    Read the options of a <select> in document order.
    Returns list of {"value": str, "text": str} dicts.
    """
    return control.evaluate(
        """el => Array.from(el.options || []).map(o => ({value: o.value, text: o.text}))"""
    )
