"""Radio group detection"""

from quick_book_autofill.data import irctc_markup as markup


def detect_toggle_members(page, group_selector, container_tag=markup.RADIO_CONTAINER_TAG):
    """
    Detect and extract metadata for every radio input in an exclusive group.

    Each member is wrapped in a framework container (p-radiobutton) whose
    aria-checked mirrors the selection; the visible label sits next to the
    container. Members without a container are skipped.

    Returns list of dicts: id, value, label, input (locator), container (locator).
    """
    members = []
    radios = page.locator(group_selector)

    for i in range(radios.count()):
        radio = radios.nth(i)
        info = radio.evaluate(
            """(el, tag) => {
                const container = el.closest(tag);
                let label = '';
                if (container && container.parentElement) {
                    const labelEl = container.parentElement.querySelector('label');
                    if (labelEl) label = labelEl.textContent.trim();
                }
                return {id: el.id || '', value: el.value || '', label: label, hasContainer: !!container};
            }""",
            container_tag,
        )
        if not info["hasContainer"]:
            continue

        members.append(
            {
                "id": info["id"],
                "value": info["value"],
                "label": info["label"],
                "input": radio,
                "container": radio.locator(f"xpath=ancestor::{container_tag}[1]"),
            }
        )

    return members
