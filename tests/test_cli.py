"""Tests for the command-line entry point."""

from unittest.mock import patch

from fakes import FakeValidator

from phonecheck import main as cli
from phonecheck.core.app import PhoneCheckApp


def fake_build_app(validator):
    return lambda settings=None, prefers_dark=False: PhoneCheckApp(validator)


def test_resolve_prefix() -> None:
    assert cli.resolve_prefix("in") == "+91"
    assert cli.resolve_prefix("+44") == "+44"
    assert cli.resolve_prefix("+999") == ""
    assert cli.resolve_prefix("XX") == ""
    assert cli.resolve_prefix("") == ""


def test_list_countries(capsys) -> None:
    assert cli.main(["--list-countries"]) == 0
    out = capsys.readouterr().out
    assert "JP  🇯🇵 Japan (+81)" in out


def test_prints_rows(capsys) -> None:
    validator = FakeValidator(payload={"valid": True, "country": {"name": "Japan"}})
    with patch.object(cli, "build_app", fake_build_app(validator)):
        code = cli.main(["9012345678", "--country", "JP"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Phone Number" in out and "+819012345678" in out
    assert validator.requests[0].full_number == "+819012345678"


def test_input_error_exit_code(capsys) -> None:
    validator = FakeValidator()
    with patch.object(cli, "build_app", fake_build_app(validator)):
        code = cli.main(["12345"])

    assert code == 1
    assert "Please select a country code." in capsys.readouterr().err
    assert validator.requests == []
