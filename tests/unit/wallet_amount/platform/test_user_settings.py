from __future__ import annotations

from pathlib import Path

import pytest

from wallet_amount.platform.settings.user_settings import DEFAULT_USER_SETTINGS, FIAT_CURRENCY_ENV, SHOW_BALANCES_ENV, UserSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    # setenv records the original state, so values written by load_dotenv are removed on teardown
    for name in (FIAT_CURRENCY_ENV, SHOW_BALANCES_ENV):
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)


def test_defaults():
    assert DEFAULT_USER_SETTINGS == UserSettings(fiat_currency="USD", show_balances=True)


def test_fiat_currency_is_normalized():
    assert UserSettings(fiat_currency=" gbp ").fiat_currency == "GBP"


def test_empty_fiat_currency_is_rejected():
    with pytest.raises(ValueError):
        UserSettings(fiat_currency=" ")


def test_from_env_without_variables(tmp_path: Path):
    assert UserSettings.from_env(tmp_path / "missing.env") == DEFAULT_USER_SETTINGS


def test_from_env_reads_dotenv_file(tmp_path: Path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("FIAT_CURRENCY=gbp\nSHOW_BALANCES=false\n")

    assert UserSettings.from_env(dotenv_file) == UserSettings(fiat_currency="GBP", show_balances=False)


def test_process_environment_wins_over_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("FIAT_CURRENCY=GBP\n")
    monkeypatch.setenv(FIAT_CURRENCY_ENV, "EUR")
    monkeypatch.setenv(SHOW_BALANCES_ENV, "yes")

    assert UserSettings.from_env(dotenv_file) == UserSettings(fiat_currency="EUR", show_balances=True)


def test_invalid_show_balances(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv(SHOW_BALANCES_ENV, "maybe")
    with pytest.raises(ValueError):
        UserSettings.from_env(tmp_path / "missing.env")
