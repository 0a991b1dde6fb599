"""IRCTC passenger-page markup the filler depends on

Attribute names and class tokens of a site we do not control. When IRCTC
ships a redesign this is the file that breaks first; every entry is a
fallback chain, most precise lookup first. Run the CLI with --inspect to see
which tiers still match on a live page.
"""

from quick_book_autofill.perception.resolver import Lookup


def mentions_email(element):
    """Placeholder, id or name mentions email"""
    return element.evaluate(
        """el => ['placeholder', 'id', 'name'].some(
            attr => (el.getAttribute(attr) || '').toLowerCase().includes('email'))"""
    )


HOSTS = ("irctc.co.in",)

# ========================================
# PASSENGER FORMS
# ========================================
# Counting existing passenger forms
PASSENGER_COUNT = (
    Lookup('p-autocomplete[formcontrolname="passengerName"]'),
    Lookup('input[formcontrolname="passengerAge"]'),
)

ADD_PASSENGER_BUTTON = (
    Lookup("button, a", text=("add passenger",)),
    Lookup("button, a", text=("add infant",)),
)

PASSENGER_SECTIONS = (
    Lookup("app-passenger-list .passengerrow"),
    Lookup("app-passenger-list > div > div"),
    Lookup(".passenger-detail-section"),
)

# Per-passenger fields, resolved inside a section or page-wide by index
PASSENGER_NAME = (
    Lookup('p-autocomplete[formcontrolname="passengerName"]'),
    Lookup('input[formcontrolname="passengerName"]'),
)
PASSENGER_AGE = (Lookup('input[formcontrolname="passengerAge"]'),)
PASSENGER_GENDER = (Lookup('select[formcontrolname="passengerGender"]'),)
PASSENGER_BERTH = (Lookup('select[formcontrolname="passengerBerthChoice"]'),)

# ========================================
# CONTACT DETAILS
# ========================================
MOBILE_FIELD = (
    Lookup('input[formcontrolname="mobileNumber"]'),
    Lookup('input[formcontrolname="mobileNo"]'),
    Lookup('input[placeholder*="Mobile"]'),
    Lookup('input[placeholder*="mobile"]'),
    Lookup('input[id*="mobile"]'),
    Lookup('input[type="tel"]'),
)

EMAIL_FIELD = (
    Lookup('input[formcontrolname="email"]'),
    Lookup('input[formcontrolname="emailId"]'),
    Lookup('input[type="text"], input[type="email"]', where=mentions_email),
)

# ========================================
# PAYMENT
# ========================================
PAYMENT_GROUP = 'p-radiobutton[formcontrolname="paymentType"] input[type="radio"]'
RADIO_CONTAINER_TAG = "p-radiobutton"
RADIO_BOX = ".ui-radiobutton-box"

UPI_KEYWORDS = ("bhim", "upi")
UPI_OPTION_ID = "2"
CARD_KEYWORDS = ("credit", "debit", "card", "net banking", "wallet")
CARD_OPTION_ID = "1"

UPI_ID_FIELD = (
    Lookup('input[placeholder*="UPI"]'),
    Lookup('input[placeholder*="upi"]'),
    Lookup('input[formcontrolname*="upi"]'),
)

# ========================================
# SUBMISSION
# ========================================
SUBMIT_REGION = "div.pull-right"

# The price summary on the left also reads "Continue"; the real submit
# button comes later in document order.
CONTINUE_BUTTON = (
    Lookup('div.pull-right button.mob-bot-btn.search_btn[type="submit"]'),
    Lookup('button[type="submit"]', within=SUBMIT_REGION),
    Lookup("button", within=SUBMIT_REGION, text=("continue",)),
    Lookup("button", text=("continue",), prefer_last=True),
)

# Named chains reported by the page survey
CHAINS = {
    "passenger_count": PASSENGER_COUNT,
    "add_passenger_button": ADD_PASSENGER_BUTTON,
    "passenger_sections": PASSENGER_SECTIONS,
    "passenger_name": PASSENGER_NAME,
    "passenger_age": PASSENGER_AGE,
    "passenger_gender": PASSENGER_GENDER,
    "passenger_berth": PASSENGER_BERTH,
    "mobile": MOBILE_FIELD,
    "email": EMAIL_FIELD,
    "payment_options": (Lookup(PAYMENT_GROUP),),
    "upi_id": UPI_ID_FIELD,
    "continue_button": CONTINUE_BUTTON,
}
