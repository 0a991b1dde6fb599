"""Exclusive-choice (radio-style) interactions"""

import quick_book_autofill.config as config
from quick_book_autofill.browser.dom import dom_click, force_checked, notify_changed, set_attribute
from quick_book_autofill.data import irctc_markup as markup
from quick_book_autofill.errors import ElementNotFound
from quick_book_autofill.interaction.inject import set_value
from quick_book_autofill.perception.radios import detect_toggle_members
from quick_book_autofill.perception.resolver import await_element
from quick_book_autofill.reasoning.resolve_radio import match_toggle_member
from quick_book_autofill.state.toggle import ToggleState, detect_toggle_state

ACTIVATION_EVENTS = ("click", "change", "input")


def activate_member(member, box_selector=markup.RADIO_BOX):
    """
    Full activation sequence for one group member.

    Some widgets bind to the container click, others to the raw input's
    checked property, so every channel is driven.
    """
    radio = member["input"]
    container = member["container"]
    clicked_box = False

    box = container.locator(box_selector)
    if box.count() > 0:
        dom_click(box.first)
        clicked_box = True

    dom_click(radio)
    force_checked(radio)
    set_attribute(container, "aria-checked", "true")
    notify_changed(radio, ACTIVATION_EVENTS)
    return clicked_box


def select_exclusive(page, group_selector, target, log):
    """
    Select target inside an exclusive-choice group, once.

    State goes UNKNOWN -> UNSELECTED -> SELECTED. An already selected member is
    left alone so change handlers never fire twice.
    Returns True when the target ends up selected (or already was).
    """
    members = detect_toggle_members(page, group_selector)
    log.add(f"Found {len(members)} options in group")

    index = match_toggle_member(members, target)
    if index is None:
        log.add(f"⚠ {target.label} option not found")
        log.add("Available options:")
        for member in members:
            log.add(f"  - {member['label']} (id={member['id']})")
        return False

    member = members[index]
    log.add(f'Found {target.label} option: id={member["id"]}, value={member["value"]}, text="{member["label"][:50]}"')

    state = detect_toggle_state(member["container"])
    log.add(f"Current state: {state.value}")
    if state is ToggleState.SELECTED:
        log.add(f"✓ {target.label} already selected")
        return True

    if activate_member(member):
        log.add("✓ Clicked radio button box")
    log.add(f"✓ {target.label} selected (id={member['id']})")

    if target.dependent_field and target.dependent_value:
        fill_dependent_field(page, target, log)

    return True


def fill_dependent_field(page, target, log):
    """Wait for a field that renders only after selection, then fill it"""
    try:
        field = await_element(
            page, target.dependent_field, config.TIMING["dependent_field_timeout"]
        )
    except ElementNotFound:
        log.add(f"⚠ {target.dependent_label} field not visible yet")
        return False

    set_value(field, target.dependent_value)
    log.add(f"✓ {target.dependent_label} filled: {target.dependent_value}")
    return True
