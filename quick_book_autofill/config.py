"""Configuration and timing profiles for IRCTC form autofill"""

# ========================================
# SPEED MODE CONFIGURATION
# ========================================
# Choose one mode (set all others to False):
# - DEV_TEST_SPEED: roughly 2x faster waits
# - SUPER_DEV_SPEED: minimal waits, only for synthetic/local pages
# - Production: All False (default, safest against the live site)

DEV_TEST_SPEED = False
SUPER_DEV_SPEED = False

# ========================================
# TIMING PROFILES
# ========================================
# All delays are in milliseconds (ms)
# The live site re-renders asynchronously after every injected change,
# these waits give its framework time to settle between dependent steps.

TIMING_PROFILES = {
    "default": {
        "page_settle": 500,  # Before the pipeline starts
        "grow_click": 500,  # After each "Add Passenger" click
        "forms_settle": 800,  # After all passenger forms were added
        "passenger_row": 300,  # After each filled passenger
        "contact_settle": 300,  # Before contact details
        "payment_settle": 500,  # Before payment selection
        "dependent_field_timeout": 700,  # Budget for the UPI id field to render
        "submit_settle": 1000,  # Before looking for Continue
        "scroll_settle": 300,  # After scrolling Continue into view
        "poll_interval": 100,  # Poll step for blocking lookups
        "element_timeout": 5000,  # Default budget for blocking lookups
    },
    "dev_test": {
        "page_settle": 300,
        "grow_click": 300,
        "forms_settle": 450,
        "passenger_row": 150,
        "contact_settle": 150,
        "payment_settle": 300,
        "dependent_field_timeout": 700,  # Kept: the UPI field renders slowly
        "submit_settle": 500,
        "scroll_settle": 150,
        "poll_interval": 50,
        "element_timeout": 3000,
    },
    "super_dev": {
        "page_settle": 50,
        "grow_click": 50,
        "forms_settle": 100,
        "passenger_row": 30,
        "contact_settle": 30,
        "payment_settle": 50,
        "dependent_field_timeout": 400,
        "submit_settle": 100,
        "scroll_settle": 30,
        "poll_interval": 25,  # Absolute minimum (safety floor)
        "element_timeout": 1500,
    },
}

# ========================================
# FILES AND DEFAULTS
# ========================================
BROWSER_DATA_DIR = "./browser_data"
RESULT_LOG_FILE = "log.jsonl"
DEBUG_UNRESOLVED_FILE = "debug_unresolved.jsonl"
DEFAULT_START_URL = "https://www.irctc.co.in/nget/train-search"
LOG_TIMEZONE = "Asia/Kolkata"

# ========================================
# SAFETY VALIDATIONS
# ========================================
_MIN_POLL_INTERVAL_MS = 25


def validate_timing(timing):
    """Return a list of human-readable violations for a timing profile"""
    violations = []
    for key, value in timing.items():
        if value < 0:
            violations.append(f"{key}={value}ms is negative")
    if timing["poll_interval"] < _MIN_POLL_INTERVAL_MS:
        violations.append(
            f"poll_interval={timing['poll_interval']}ms < {_MIN_POLL_INTERVAL_MS}ms minimum"
        )
    if timing["dependent_field_timeout"] < timing["poll_interval"]:
        violations.append(
            "dependent_field_timeout is shorter than one poll_interval"
        )
    return violations


def get_active_timing():
    """Get the active timing profile based on current speed mode settings"""
    if SUPER_DEV_SPEED:
        profile = TIMING_PROFILES["super_dev"]
    elif DEV_TEST_SPEED:
        profile = TIMING_PROFILES["dev_test"]
    else:
        profile = TIMING_PROFILES["default"]

    violations = validate_timing(profile)
    if violations:
        print("⚠️ TIMING PROFILE VIOLATIONS - Falling back to default profile:")
        for violation in violations:
            print(f"  - {violation}")
        profile = TIMING_PROFILES["default"]

    return dict(profile)


# Initialize TIMING with current settings
TIMING = get_active_timing()
