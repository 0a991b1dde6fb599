"""DOM primitives the fillers build on

Everything that touches a live node through page-side JavaScript goes through
here, so the pipeline never assembles event sequences itself.
"""

# Order matters: frameworks that sync their model on input/change still
# expect the blur and key events a real edit would produce.
NOTIFY_SEQUENCE = ("input", "change", "blur", "keydown", "keyup")


def tag_name(element):
    """Upper-case tag name, e.g. 'P-AUTOCOMPLETE'"""
    return element.evaluate("el => el.tagName")


def text_of(element):
    return (element.text_content() or "").strip()


def write_value(element, value):
    """Focus the node and write straight into its value slot (no events)"""
    element.evaluate(
        """(el, value) => {
            if (typeof el.focus === 'function') el.focus();
            el.value = value;
        }""",
        value,
    )


def read_value(element):
    return element.evaluate("el => (el.value === undefined || el.value === null) ? '' : String(el.value)")


def notify_changed(element, kinds=NOTIFY_SEQUENCE):
    """Replay the notification sequence on element, bubbling"""
    for kind in kinds:
        element.dispatch_event(kind, {"bubbles": True})


def dom_click(element):
    """Native element.click(), works on visually hidden inputs too"""
    element.evaluate("el => el.click()")


def is_disabled(element):
    return element.evaluate("el => el.disabled === true || el.hasAttribute('disabled')")


def force_checked(element):
    element.evaluate("el => { el.checked = true; }")


def set_attribute(element, name, value):
    element.evaluate("(el, [name, value]) => el.setAttribute(name, value)", [name, value])


def scroll_into_view(element):
    element.evaluate("el => el.scrollIntoView({behavior: 'smooth', block: 'center'})")
