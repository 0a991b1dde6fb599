"""Dropdown interactions"""

from quick_book_autofill.browser.dom import notify_changed
from quick_book_autofill.perception.selects import read_options
from quick_book_autofill.reasoning.resolve_select import pick_option_index


def select_option(control, desired):
    """
    Select the option matching desired (value > text > partial text).
    Returns False without touching the control when nothing matches.
    """
    if control is None:
        return False

    control.focus()
    options = read_options(control)
    index = pick_option_index(options, desired)
    if index is None:
        return False

    control.evaluate("(el, index) => { el.selectedIndex = index; }", index)
    notify_changed(control, ("change",))
    return True
