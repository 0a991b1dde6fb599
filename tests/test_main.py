import json

import pytest

import quick_book_autofill.config as config
import quick_book_autofill.main as main_module
from irctc_pages import sample_payload


@pytest.fixture
def speed_flags(monkeypatch):
    monkeypatch.setattr(config, "DEV_TEST_SPEED", False)
    monkeypatch.setattr(config, "SUPER_DEV_SPEED", False)


def test_load_fill_request(tmp_path):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(sample_payload(payment={"method": "UPI", "upiId": "a@upi"})), encoding="utf-8")

    request = main_module.load_fill_request(str(path))

    assert len(request.passengers) == 2
    assert request.payment.upi_id == "a@upi"


def test_data_is_required_without_inspect(speed_flags):
    with pytest.raises(SystemExit) as info:
        main_module.main([])
    assert info.value.code == 2


def test_bad_data_file_exits_before_browser_launch(tmp_path, monkeypatch, speed_flags):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({"passengers": []}), encoding="utf-8")

    def no_browser(*args, **kwargs):
        raise AssertionError("browser must not start")

    monkeypatch.setattr(main_module, "launch_browser", no_browser)

    assert main_module.main(["--data", str(path), "--no-wait"]) == 1


def test_configure_speed(speed_flags):
    main_module.configure_speed("dev")
    assert config.TIMING == config.TIMING_PROFILES["dev_test"]

    main_module.configure_speed(None)
    assert config.TIMING == config.TIMING_PROFILES["default"]


def test_parser_defaults():
    args = main_module.build_parser().parse_args(["--data", "p.json"])
    assert args.url == config.DEFAULT_START_URL
    assert args.speed is None
    assert not args.inspect
