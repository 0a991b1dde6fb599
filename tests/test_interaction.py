"""Value injection, dropdown selection and submit activation on live DOM"""

from irctc_pages import events_for, passenger_page
from quick_book_autofill.browser.dom import NOTIFY_SEQUENCE
from quick_book_autofill.interaction.buttons import (
    SUBMIT_CLICKED,
    SUBMIT_DISABLED,
    SUBMIT_NOT_FOUND,
    activate_submit,
)
from quick_book_autofill.interaction.inject import existing_value, primitive_input, set_value
from quick_book_autofill.interaction.selects import select_option
from quick_book_autofill.utils.logging import ProgressLog


def test_set_value_fires_notifications_in_order(page):
    page.set_content(passenger_page(rows=1))
    mobile = page.locator('input[formcontrolname="mobileNumber"]')

    assert set_value(mobile, "9876543210")
    assert mobile.input_value() == "9876543210"
    assert events_for(page, "mobileNumber") == list(NOTIFY_SEQUENCE)


def test_set_value_drills_into_composite_widget(page):
    page.set_content(passenger_page(rows=1))
    widget = page.locator('p-autocomplete[formcontrolname="passengerName"]')

    assert set_value(widget, "Rahul Sharma")
    assert widget.locator("input").input_value() == "Rahul Sharma"
    assert events_for(page, "input") == list(NOTIFY_SEQUENCE)


def test_composite_without_inner_input_falls_back_to_itself(page):
    page.set_content('<p-autocomplete id="bare"></p-autocomplete>')
    widget = page.locator("#bare")

    assert primitive_input(widget) is widget
    assert set_value(widget, "x")


def test_set_value_without_element():
    assert set_value(None, "x") is False
    assert existing_value(None) == ""


def test_existing_value_is_trimmed(page):
    page.set_content(passenger_page(mobile="  9999999999 "))
    assert existing_value(page.locator('input[formcontrolname="mobileNumber"]')) == "9999999999"


# --- dropdowns ---

def test_select_option_prefers_exact_value(page):
    page.set_content(
        '<select id="s"><option value="2">Lower</option><option value="1">Lower Berth</option></select>'
        "<script>window.__changes = 0;"
        "document.addEventListener('change', function () { window.__changes += 1; });</script>"
    )
    control = page.locator("#s")

    assert select_option(control, "1")
    assert control.input_value() == "1"
    assert page.evaluate("window.__changes") == 1


def test_select_option_by_text(page):
    page.set_content(passenger_page(rows=1))
    berth = page.locator('select[formcontrolname="passengerBerthChoice"]')

    assert select_option(berth, "Lower")
    assert berth.input_value() == "LB"
    assert events_for(page, "passengerBerthChoice") == ["change"]


def test_select_option_no_match_leaves_control_untouched(page):
    page.set_content(passenger_page(rows=1))
    gender = page.locator('select[formcontrolname="passengerGender"]')

    assert select_option(gender, "X") is False
    assert gender.input_value() == ""
    assert events_for(page, "passengerGender") == []
    assert select_option(None, "M") is False


# --- submit ---

def test_activate_submit_clicks_enabled_button(page):
    page.set_content(passenger_page())
    log = ProgressLog(echo=False)

    assert activate_submit(page.locator("#continue"), log) == SUBMIT_CLICKED
    assert page.evaluate("window.__submitted") == ["continue"]
    assert 'Button found: "Continue"' in log.lines
    assert "Button disabled: false" in log.lines
    assert log.lines[-1] == "✓ Continue button clicked!"


def test_activate_submit_holds_on_disabled_button(page):
    page.set_content(passenger_page(submit="disabled"))
    log = ProgressLog(echo=False)

    assert activate_submit(page.locator("#continue"), log) == SUBMIT_DISABLED
    assert page.evaluate("window.__submitted") == []
    assert "⚠ Continue button is disabled" in log.lines


def test_activate_submit_without_button():
    assert activate_submit(None, ProgressLog(echo=False)) == SUBMIT_NOT_FOUND
