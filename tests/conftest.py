"""
Shared pytest fixtures for all tests.
"""
import pytest
from playwright.sync_api import sync_playwright

import quick_book_autofill.config as config
from quick_book_autofill.debug.unresolved_collector import discard_unresolved_fields


@pytest.fixture(scope="session")
def browser():
    """Shared headless Chromium for all browser tests"""
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        yield browser
        browser.close()


@pytest.fixture
def page(browser):
    """Fresh context per test so pages never share state"""
    context = browser.new_context(viewport={"width": 1280, "height": 800})
    page = context.new_page()
    yield page
    context.close()


@pytest.fixture(autouse=True)
def fast_timing(monkeypatch):
    """Synthetic pages settle instantly, run every test on the shortest profile"""
    monkeypatch.setattr(config, "TIMING", dict(config.TIMING_PROFILES["super_dev"]))


@pytest.fixture(autouse=True)
def clean_unresolved_buffer():
    discard_unresolved_fields()
    yield
    discard_unresolved_fields()
