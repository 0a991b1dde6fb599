"""IRCTC passenger-details filler

Pipeline: grow passenger forms -> fill passengers -> fill contact ->
fill payment (optional) -> click Continue. Every missing field or control is
a logged warning; only an unexpected exception fails the fill.
"""

from playwright.sync_api import Error as PlaywrightError

import quick_book_autofill.config as config
from quick_book_autofill.browser.dom import dom_click, text_of
from quick_book_autofill.data import irctc_markup as markup
from quick_book_autofill.debug.unresolved_collector import record_unresolved_field
from quick_book_autofill.interaction.buttons import SUBMIT_CLICKED, activate_submit
from quick_book_autofill.interaction.inject import existing_value, set_value
from quick_book_autofill.interaction.selects import select_option
from quick_book_autofill.interaction.toggles import select_exclusive
from quick_book_autofill.models import FillResult
from quick_book_autofill.perception.resolver import (
    Lookup,
    candidates,
    count_matches,
    locate,
    resolve,
    resolve_all,
)
from quick_book_autofill.reasoning.normalize import map_gender
from quick_book_autofill.reasoning.plan import fillable_count, growth_needed
from quick_book_autofill.reasoning.resolve_radio import payment_target
from quick_book_autofill.utils.logging import ProgressLog
from quick_book_autofill.utils.timing import pause

FILLED_MESSAGE = "Form filled successfully!"
HOLD_MESSAGE = "Form filled - please review and click Continue manually"

# Per-passenger fields, in fill order
PASSENGER_FIELDS = {
    "name": markup.PASSENGER_NAME,
    "age": markup.PASSENGER_AGE,
    "gender": markup.PASSENGER_GENDER,
    "berth": markup.PASSENGER_BERTH,
}


class IRCTCFiller:
    """Fills the IRCTC passenger-details page"""

    name = "IRCTC Filler"

    def can_handle(self, context):
        return any(context.on_host(host) for host in markup.HOSTS)

    def fill(self, page, request):
        passengers = request.passengers
        log = ProgressLog()

        try:
            # Wait a bit for the page to be ready
            pause(config.TIMING["page_settle"])

            log.section("Starting IRCTC Form Fill")
            log.add(f"Passengers to fill: {len(passengers)}")

            # STEP 1: Add passenger forms if needed
            self.add_passenger_forms(page, len(passengers), log)
            pause(config.TIMING["forms_settle"])

            # STEP 2: Fill passenger details
            self.fill_passenger_details(page, passengers, log)

            # STEP 3: Fill contact details
            self.fill_contact_details(page, request.contact, log)

            # STEP 4: Fill payment details (if provided)
            if request.payment is not None:
                self.fill_payment_details(page, request.payment, log)

            # STEP 5: Auto-click Continue button
            outcome = self.click_continue_button(page, log)
        except Exception as e:
            print(f"❌ IRCTC AutoFill error: {e}")
            return FillResult(success=False, message=f"Error: {e}", details=list(log.lines))

        message = FILLED_MESSAGE if outcome == SUBMIT_CLICKED else HOLD_MESSAGE
        return FillResult(success=True, message=message, details=list(log.lines))

    # ========================================
    # STEP 1: PASSENGER FORMS
    # ========================================

    def add_passenger_forms(self, page, required_count, log):
        """Click "Add Passenger" until enough passenger forms exist. Returns clicks made."""
        log.section("Adding Passenger Forms")

        existing = self._find(
            log, "Passenger form", count_matches, page, markup.PASSENGER_COUNT, missing=0
        )
        log.add(f"Existing forms: {existing}")
        log.add(f"Required forms: {required_count}")

        needed = growth_needed(required_count, existing)
        if needed == 0:
            log.add("✓ Sufficient passenger forms already present")
            return 0

        button = self._find(log, "Add Passenger", resolve, page, markup.ADD_PASSENGER_BUTTON)
        if button is None:
            self._unresolved(
                page, log, "grow", "add_passenger_button", markup.ADD_PASSENGER_BUTTON,
                "✗ Add Passenger button not found",
            )
            log.add("⚠ Please manually add passenger forms first")
            return 0

        label = self._attempt(log, "Add Passenger", lambda: text_of(button)) or ""
        log.add(f'✓ Add Passenger button found: "{label}"')

        added = 0
        for i in range(needed):
            log.add(f"Adding passenger form {existing + i + 1}...")
            try:
                dom_click(button)
            except PlaywrightError as e:
                log.add(f"✗ Add Passenger click error: {e}")
                break
            added += 1
            pause(config.TIMING["grow_click"])

        log.add(f"✓ Added {added} passenger form(s)")
        return added

    # ========================================
    # STEP 2: PASSENGER DETAILS
    # ========================================

    def fill_passenger_details(self, page, passengers, log):
        """Fill each passenger into its own form. Returns how many were attempted."""
        log.section("Filling Passenger Details")

        _, sections = self._find(
            log, "Passenger section", resolve_all, page, markup.PASSENGER_SECTIONS, missing=(None, [])
        )
        log.add(f"Found {len(sections)} passenger sections")

        if sections:
            count = fillable_count(len(passengers), len(sections))
            for i in range(count):
                fields = {
                    key: self._find(log, key.capitalize(), locate, sections[i], chain, missing=(None, None))
                    for key, chain in PASSENGER_FIELDS.items()
                }
                self._fill_passenger(page, fields, passengers[i], i + 1, log)
        else:
            # No section containers, pair page-wide field lists by index
            columns = {
                key: self._find(log, key.capitalize(), resolve_all, page, chain, missing=(None, []))
                for key, chain in PASSENGER_FIELDS.items()
            }
            log.add("Direct field search:")
            for key, (_, elements) in columns.items():
                log.add(f"- {key.capitalize()} fields: {len(elements)}")

            available = max(len(elements) for _, elements in columns.values())
            count = fillable_count(len(passengers), available)
            for i in range(count):
                fields = {}
                for key, (lookup, elements) in columns.items():
                    fields[key] = (lookup, elements[i]) if i < len(elements) else (None, None)
                self._fill_passenger(page, fields, passengers[i], i + 1, log)

        if count < len(passengers):
            log.add(
                f"⚠ Only {count} passenger form(s) available, "
                f"{len(passengers) - count} passenger(s) not filled"
            )
        return count

    def _fill_passenger(self, page, fields, passenger, number, log):
        log.add(f"Filling passenger {number}: {passenger.name}")

        name_lookup, name_field = fields["name"]
        if name_field is None:
            self._unresolved(page, log, "passengers", "passenger_name", markup.PASSENGER_NAME,
                             "✗ Name field not found", entry=number)
        elif self._attempt(log, "Name", lambda: set_value(name_field, passenger.name)):
            via = " (via autocomplete)" if name_lookup == markup.PASSENGER_NAME[0] else ""
            log.add(f"✓ Name filled{via}")

        _, age_field = fields["age"]
        if age_field is None:
            self._unresolved(page, log, "passengers", "passenger_age", markup.PASSENGER_AGE,
                             "✗ Age field not found", entry=number)
        elif self._attempt(log, "Age", lambda: set_value(age_field, str(passenger.age))):
            log.add("✓ Age filled")

        _, gender_field = fields["gender"]
        if gender_field is None:
            self._unresolved(page, log, "passengers", "passenger_gender", markup.PASSENGER_GENDER,
                             "✗ Gender field not found", entry=number)
        else:
            code = map_gender(passenger.gender)
            selected = self._attempt(log, "Gender", lambda: select_option(gender_field, code))
            if selected:
                log.add(f"✓ Gender filled ({code})")
            elif selected is False:
                log.add(f"⚠ Gender option {code!r} not available")

        if passenger.berth:
            _, berth_field = fields["berth"]
            if berth_field is None:
                self._unresolved(page, log, "passengers", "passenger_berth", markup.PASSENGER_BERTH,
                                 "⚠ Berth preference field not found", entry=number)
            else:
                selected = self._attempt(log, "Berth", lambda: select_option(berth_field, passenger.berth))
                if selected:
                    log.add("✓ Berth preference filled")
                elif selected is False:
                    log.add(f"⚠ Berth preference {passenger.berth!r} not available")

        pause(config.TIMING["passenger_row"])

    # ========================================
    # STEP 3: CONTACT DETAILS
    # ========================================

    def fill_contact_details(self, page, contact, log):
        """Fill mobile and email, keeping whatever the site already filled in"""
        log.section("Filling Contact Details")

        pause(config.TIMING["contact_settle"])

        mobile_field = self._find(log, "Mobile", resolve, page, markup.MOBILE_FIELD)
        email_field = self._find(log, "Email", resolve, page, markup.EMAIL_FIELD)

        log.add(f"Mobile input found: {str(mobile_field is not None).lower()}")
        log.add(f"Email input found: {str(email_field is not None).lower()}")

        if mobile_field is None:
            self._unresolved(page, log, "contact", "mobile", markup.MOBILE_FIELD,
                             "✗ Mobile number field not found")
        else:
            self._fill_preserving(log, mobile_field, contact.mobile, "Mobile", "✓ Mobile number filled")

        if email_field is None:
            self._unresolved(page, log, "contact", "email", markup.EMAIL_FIELD,
                             "⚠ Email field not found (may be pre-filled from login)")
        else:
            self._fill_preserving(log, email_field, contact.email, "Email", "✓ Email filled")

    def _fill_preserving(self, log, field, value, label, filled_message):
        current = self._attempt(log, label, lambda: existing_value(field))
        if current is None:
            return False
        if current:
            # Pre-filled by the site itself (e.g. from the login profile)
            log.add(f"⚠ {label} already filled: {current} (keeping existing)")
            return False
        if self._attempt(log, label, lambda: set_value(field, value)):
            log.add(filled_message)
            return True
        return False

    # ========================================
    # STEP 4: PAYMENT
    # ========================================

    def fill_payment_details(self, page, payment, log):
        log.section("Filling Payment Details")

        pause(config.TIMING["payment_settle"])

        log.add(f"Payment method: {payment.method.label}")
        target = payment_target(payment)
        selected = self._attempt(
            log, "Payment", lambda: select_exclusive(page, markup.PAYMENT_GROUP, target, log)
        )
        if selected is False:
            self._record(page, "payment", "payment_option", (Lookup(markup.PAYMENT_GROUP),))
        return bool(selected)

    # ========================================
    # STEP 5: SUBMIT
    # ========================================

    def click_continue_button(self, page, log):
        """Find and click Continue. Returns the activate_submit outcome, or None."""
        log.section("Auto-clicking Continue Button")

        pause(config.TIMING["submit_settle"])

        lookup, button = self._find(
            log, "Continue button", locate, page, markup.CONTINUE_BUTTON, missing=(None, None)
        )
        if button is None:
            self._unresolved(page, log, "submit", "continue_button", markup.CONTINUE_BUTTON,
                             "✗ Continue button not found")
            log.add("Please click Continue manually")
            total = self._find(log, "Button", page.locator("button").count, missing=0)
            log.add(f"Total buttons on page: {total}")
            return None

        if lookup == markup.CONTINUE_BUTTON[1]:
            log.add("Found Continue button in pull-right div")
        elif lookup.prefer_last:
            total = len(self._find(log, "Continue button", candidates, page, lookup, missing=[]))
            log.add(f"Found Continue button ({total} candidates, using last one)")

        return self._attempt(log, "Continue button", lambda: activate_submit(button, log))

    # ========================================
    # HELPERS
    # ========================================

    def _attempt(self, log, label, action):
        """Run one component operation; a browser-side failure is logged, not raised"""
        try:
            return action()
        except PlaywrightError as e:
            log.add(f"✗ {label} error: {e}")
            return None

    def _find(self, log, label, lookup, *args, missing=None):
        """Run a resolver call; a browser-side failure reads as nothing found"""
        found = self._attempt(log, f"{label} lookup", lambda: lookup(*args))
        return missing if found is None else found

    def _record(self, page, step, field, chain, entry=None):
        record_unresolved_field(
            site=self.name, page_url=page.url, step=step, field=field, chain=chain, entry=entry
        )

    def _unresolved(self, page, log, step, field, chain, message, entry=None):
        log.add(message)
        self._record(page, step, field, chain, entry=entry)
