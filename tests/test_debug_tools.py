import json

import quick_book_autofill.config as config
from irctc_pages import passenger_page
from quick_book_autofill.data import irctc_markup as markup
from quick_book_autofill.debug.survey import print_survey, survey_page
from quick_book_autofill.debug.unresolved_collector import (
    discard_unresolved_fields,
    flush_unresolved_fields,
    pending_unresolved_fields,
    record_unresolved_field,
)
from quick_book_autofill.utils.logging import ProgressLog, log_result


def test_unresolved_fields_flush_to_jsonl(tmp_path):
    path = tmp_path / "unresolved.jsonl"
    record_unresolved_field(
        site="IRCTC Filler",
        page_url="https://www.irctc.co.in/nget/booking/psgninput",
        step="contact",
        field="mobile",
        chain=markup.MOBILE_FIELD[:2],
    )

    assert flush_unresolved_fields(path) == 1
    assert pending_unresolved_fields() == []

    record = json.loads(path.read_text(encoding="utf-8").strip())
    assert record["field"] == "mobile"
    assert record["entry"] is None
    assert record["chain"] == (
        'input[formcontrolname="mobileNumber"] -> input[formcontrolname="mobileNo"]'
    )
    assert record["timestamp"].endswith("+05:30")


def test_empty_buffer_writes_nothing(tmp_path):
    path = tmp_path / "unresolved.jsonl"
    assert flush_unresolved_fields(path) == 0
    assert not path.exists()


def test_discard_drops_buffer():
    record_unresolved_field(site="s", page_url="u", step="submit", field="continue_button", chain="button")
    discard_unresolved_fields()
    assert pending_unresolved_fields() == []


def test_survey_counts_every_tier(page):
    page.set_content(passenger_page(rows=2))
    rows = survey_page(page)
    counts = {(name, tier): count for name, tier, _, count in rows}

    assert counts[("passenger_sections", 1)] == 2
    assert counts[("passenger_name", 1)] == 2
    assert counts[("mobile", 1)] == 1
    assert counts[("mobile", 2)] == 0
    assert counts[("payment_options", 1)] == 2
    assert counts[("continue_button", 1)] == 1
    assert len(rows) == sum(len(chain) for chain in markup.CHAINS.values())


def test_print_survey(page, capsys):
    page.set_content(passenger_page(rows=1))
    print_survey(page, {"mobile": markup.MOBILE_FIELD[:1]})

    out = capsys.readouterr().out
    assert "mobile:" in out
    assert "tier 1:   1" in out


def test_progress_log(capsys):
    log = ProgressLog()
    log.section("Filling Contact Details")
    log.add("✓ Email filled")

    assert list(log) == ["=== Filling Contact Details ===", "✓ Email filled"]
    assert len(log) == 2
    assert "  ✓ Email filled" in capsys.readouterr().out


def test_log_result_appends_jsonl(tmp_path, monkeypatch):
    path = tmp_path / "log.jsonl"
    monkeypatch.setattr(config, "RESULT_LOG_FILE", str(path))

    log_result("https://www.irctc.co.in/x", "FILLED", passengers=2)
    log_result("https://www.irctc.co.in/x", "FAILED", "site not supported", 1)

    first, second = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert first["status"] == "FILLED" and "reason" not in first
    assert second["reason"] == "site not supported"
