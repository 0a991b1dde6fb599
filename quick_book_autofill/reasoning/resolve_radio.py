"""Exclusive-choice (radio) resolution logic"""

from dataclasses import dataclass
from typing import Optional, Tuple

from quick_book_autofill.data import irctc_markup as markup
from quick_book_autofill.models import PaymentMethod
from quick_book_autofill.reasoning.normalize import normalize_text


@dataclass(frozen=True)
class ToggleTarget:
    """
    What to select inside an exclusive-choice group.

    keywords match the member's label text; positional_id is the fallback
    id/value the site has historically used for this option. A dependent
    field, when given, only renders after the option is selected.
    """

    label: str
    keywords: Tuple[str, ...]
    positional_id: Optional[str] = None
    dependent_field: Optional[tuple] = None
    dependent_value: Optional[str] = None
    dependent_label: str = "dependent field"


def payment_target(payment):
    """Build the ToggleTarget for a PaymentInfo"""
    if payment.method is PaymentMethod.UPI:
        return ToggleTarget(
            label=payment.method.label,
            keywords=markup.UPI_KEYWORDS,
            positional_id=markup.UPI_OPTION_ID,
            dependent_field=markup.UPI_ID_FIELD,
            dependent_value=payment.upi_id,
            dependent_label="UPI ID",
        )
    return ToggleTarget(
        label=payment.method.label,
        keywords=markup.CARD_KEYWORDS,
        positional_id=markup.CARD_OPTION_ID,
    )


def match_toggle_member(members, target):
    """
    Pick the group member for target. Returns its index or None.

    Label keywords are tried across every member first; only when no label
    matches does the positional id/value fallback apply.
    """
    for i, member in enumerate(members):
        label = normalize_text(member.get("label"))
        if any(normalize_text(keyword) in label for keyword in target.keywords):
            return i

    if target.positional_id is not None:
        for i, member in enumerate(members):
            if target.positional_id in (member.get("id"), member.get("value")):
                return i

    return None
