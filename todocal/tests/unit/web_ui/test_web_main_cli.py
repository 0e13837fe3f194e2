from __future__ import annotations

import logging
from datetime import date

import pytest

from todocal.web_ui import main as web_main


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_parse_args_defaults() -> None:
    args = web_main._parse_args([])

    assert args.host == "127.0.0.1"
    assert args.port == 8080
    assert args.today is None
    assert args.smoke_test is False


def test_parse_args_pins_today() -> None:
    args = web_main._parse_args(["--today", "2024-06-15", "--port", "9000"])

    assert args.today == date(2024, 6, 15)
    assert args.port == 9000


def test_parse_args_rejects_bad_today() -> None:
    with pytest.raises(SystemExit) as excinfo:
        web_main._parse_args(["--today", "2024-13-01"])
    assert excinfo.value.code == 2


def test_smoke_test_builds_vm_without_serving(monkeypatch, capsys) -> None:
    def _fail(*_args, **_kwargs):
        raise AssertionError("ui.run must not be called in smoke mode")

    monkeypatch.setattr(web_main.ui, "run", _fail)

    web_main.main(["--smoke-test", "--today", "2024-06-15"])

    assert capsys.readouterr().out.strip() == "web-smoke-ok June 2024 weeks=6"


def test_main_logs_effective_level(monkeypatch, caplog) -> None:
    monkeypatch.setenv("TODOCAL_DEBUG", "1")
    monkeypatch.setattr(web_main.ui, "run", lambda *_args, **_kwargs: None)

    with caplog.at_level(logging.DEBUG, logger="todocal.web_ui.main"):
        web_main.main(["--smoke-test", "--today", "2024-06-15"])

    assert "Effective log level: DEBUG" in caplog.text
