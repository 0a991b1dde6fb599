"""Exclusive-choice state detection - NO ACTIONS, only detection"""

from enum import Enum


class ToggleState(Enum):
    UNKNOWN = "unknown"  # Not inspected yet
    UNSELECTED = "unselected"
    SELECTED = "selected"


def detect_toggle_state(container):
    """Read the accessibility-checked flag of a choice container"""
    if container is None or container.count() == 0:
        return ToggleState.UNKNOWN
    if container.get_attribute("aria-checked") == "true":
        return ToggleState.SELECTED
    return ToggleState.UNSELECTED
