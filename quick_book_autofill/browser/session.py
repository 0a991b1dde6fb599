"""Browser session management"""

from playwright.sync_api import sync_playwright

import quick_book_autofill.config as config

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"


def launch_browser(headless=False):
    """
    Launch persistent browser context and return (playwright, context, page).
    Reuses the IRCTC login session across runs.
    """
    print("Launching browser...")

    p = sync_playwright().start()

    context = p.chromium.launch_persistent_context(
        user_data_dir=config.BROWSER_DATA_DIR,
        headless=headless,
        args=[
            "--disable-blink-features=AutomationControlled",
        ],
        viewport={"width": 1366, "height": 768},
        user_agent=USER_AGENT,
        locale="en-IN",
        timezone_id=config.LOG_TIMEZONE,
    )

    page = context.pages[0] if context.pages else context.new_page()

    return p, context, page


def close_browser(p, context):
    context.close()
    p.stop()
