"""Value injection into framework-bound inputs"""

from quick_book_autofill.browser.dom import notify_changed, read_value, tag_name, write_value

# Compound widgets wrapping a primitive <input>
COMPOSITE_TAGS = ("P-AUTOCOMPLETE", "NG-AUTOCOMPLETE")


def primitive_input(element):
    """Drill into a composite widget's embedded input; fall back to the widget itself"""
    if tag_name(element) in COMPOSITE_TAGS:
        inner = element.locator("input")
        if inner.count() > 0:
            return inner.first
    return element


def set_value(element, value):
    """
    Write value and replay the change notifications.

    The raw write alone is invisible to the page's reactive framework, the
    notification sequence is what makes it look like a user edit.
    Returns False when there is no element to write to.
    """
    if element is None:
        return False

    target = primitive_input(element)
    write_value(target, value)
    notify_changed(target)
    return True


def existing_value(element):
    """Trimmed value currently shown by the element (or its embedded input)"""
    if element is None:
        return ""
    return read_value(primitive_input(element)).strip()
