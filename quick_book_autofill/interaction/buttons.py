"""Button interactions"""

import quick_book_autofill.config as config
from quick_book_autofill.browser.dom import dom_click, is_disabled, scroll_into_view, text_of
from quick_book_autofill.utils.timing import pause

# Outcomes of activate_submit
SUBMIT_CLICKED = "clicked"
SUBMIT_DISABLED = "disabled"
SUBMIT_NOT_FOUND = "not_found"


def activate_submit(button, log):
    """
    Click a resolved submit button unless it is disabled.

    A disabled button is left for the operator: something on the form still
    needs attention, clicking would do nothing useful.
    """
    if button is None:
        return SUBMIT_NOT_FOUND

    disabled = is_disabled(button)
    log.add(f'Button found: "{text_of(button)}"')
    log.add(f"Button classes: {button.get_attribute('class') or ''}")
    log.add(f"Button disabled: {str(disabled).lower()}")

    if disabled:
        log.add("⚠ Continue button is disabled")
        log.add("Please verify all fields are correct")
        return SUBMIT_DISABLED

    scroll_into_view(button)
    pause(config.TIMING["scroll_settle"])
    dom_click(button)
    log.add("✓ Continue button clicked!")
    return SUBMIT_CLICKED
