#!/usr/bin/env python3
"""
Quick Book AutoFill - IRCTC passenger form filler
Reads saved passenger/contact/payment data and fills the booking page
"""

import argparse
import json
import sys
import time

import quick_book_autofill.config as config
from quick_book_autofill.browser.session import close_browser, launch_browser
from quick_book_autofill.debug.survey import print_survey
from quick_book_autofill.debug.unresolved_collector import (
    discard_unresolved_fields,
    flush_unresolved_fields,
)
from quick_book_autofill.engine import handle_fill_request
from quick_book_autofill.errors import InvalidFillRequest
from quick_book_autofill.models import FillRequest
from quick_book_autofill.registry import build_default_registry
from quick_book_autofill.utils.logging import log_result


def load_fill_request(file_path):
    """Load and validate a FillRequest from a JSON file"""
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return FillRequest.from_dict(data)


def configure_speed(speed):
    """Apply --speed to config and rebuild TIMING"""
    if speed == "dev":
        config.DEV_TEST_SPEED = True
        config.SUPER_DEV_SPEED = False
        print("⚡ DEV_TEST_SPEED enabled\n")
    elif speed == "super":
        config.DEV_TEST_SPEED = False
        config.SUPER_DEV_SPEED = True
        print("⚡⚡ SUPER_DEV_SPEED enabled (synthetic pages only)\n")
    else:
        config.DEV_TEST_SPEED = False
        config.SUPER_DEV_SPEED = False

    config.TIMING = config.get_active_timing()


def print_result(result):
    print("\n" + "=" * 60)
    status = "✅" if result.success else "❌"
    print(f"{status} {result.message}")
    print("=" * 60)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Quick Book AutoFill - fill the IRCTC passenger details page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Speed Modes:
  --speed dev       About 2x shorter waits
  --speed super     Minimal waits (local/synthetic pages only)
  (default)         Production waits - safest against the live site

Examples:
  python -m quick_book_autofill.main --data profile.json
  python -m quick_book_autofill.main --data profile.json --debug-unresolved
  python -m quick_book_autofill.main --inspect
        """,
    )
    parser.add_argument(
        "url", nargs="?", default=config.DEFAULT_START_URL, help="Page to open first"
    )
    parser.add_argument("--data", help="JSON file with passengers, contact and payment")
    parser.add_argument("--speed", choices=["dev", "super"], help="Speed mode: dev or super")
    parser.add_argument(
        "--debug-unresolved",
        action="store_true",
        help=f"Write every field that could not be found to {config.DEBUG_UNRESOLVED_FILE}",
    )
    parser.add_argument(
        "--inspect",
        action="store_true",
        help="Only survey which markup tiers match on the page, fill nothing",
    )
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Do not pause for manual login/navigation before filling",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.inspect and not args.data:
        parser.error("--data is required unless --inspect is used")

    configure_speed(args.speed)

    request = None
    if args.data:
        try:
            request = load_fill_request(args.data)
        except (OSError, json.JSONDecodeError, InvalidFillRequest) as e:
            print(f"❌ Could not load fill data from {args.data}: {e}")
            return 1
        print(f"📋 Loaded {len(request.passengers)} passenger(s) from {args.data}\n")

    registry = build_default_registry()
    p, context, page = launch_browser()

    try:
        print(f"Navigating to {args.url}...")
        page.goto(args.url, wait_until="domcontentloaded", timeout=60000)

        if not args.no_wait:
            print()
            print("Please log in, search your train and open the Passenger Details page.")
            print("(Login and CAPTCHA are always manual.)")
            input("Press Enter here when the Passenger Details page is open...")

        if args.inspect:
            print_survey(page)
            return 0

        start_time = time.time()
        result = handle_fill_request(registry, page, request)
        print_result(result)
        print(f"⏱️  Total time: {time.time() - start_time:.1f}s")

        status = "FILLED" if result.success else "FAILED"
        log_result(page.url, status, result.message, len(request.passengers))

        if args.debug_unresolved:
            written = flush_unresolved_fields()
            print(f"🔍 {written} unresolved field(s) written to {config.DEBUG_UNRESOLVED_FILE}")
        else:
            discard_unresolved_fields()

        if not args.no_wait:
            input("\nReview the page, then press Enter here to close the browser...")
        return 0 if result.success else 2
    finally:
        close_browser(p, context)


if __name__ == "__main__":
    sys.exit(main())
