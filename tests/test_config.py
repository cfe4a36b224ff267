"""Tests for shared configuration helpers."""

from decimal import Decimal

from shared import config


def test_app_env_defaults_to_dev(monkeypatch) -> None:
    monkeypatch.delenv("APP_ENV", raising=False)

    assert config.app_env() == "dev"


def test_log_level_defaults_to_info(monkeypatch) -> None:
    monkeypatch.delenv("EXPENSE_TRACKER_LOG_LEVEL", raising=False)

    assert config.log_level() == "INFO"


def test_log_level_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", " debug ")

    assert config.log_level() == "DEBUG"


def test_log_level_warns_and_defaults_on_unknown_value(monkeypatch, caplog) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "verbose")

    assert config.log_level() == "INFO"
    assert "log_level_invalid" in caplog.text


def test_max_transaction_amount_defaults(monkeypatch) -> None:
    monkeypatch.delenv("EXPENSE_TRACKER_MAX_AMOUNT", raising=False)

    assert config.max_transaction_amount() == Decimal("1000")


def test_max_transaction_amount_parses_value(monkeypatch) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_MAX_AMOUNT", "2500.50")

    assert config.max_transaction_amount() == Decimal("2500.50")


def test_max_transaction_amount_uses_default_on_invalid(monkeypatch) -> None:
    for raw_value in ("invalid", "-5", "0", "inf"):
        monkeypatch.setenv("EXPENSE_TRACKER_MAX_AMOUNT", raw_value)

        assert config.max_transaction_amount() == Decimal("1000")


def test_date_format_default_and_override(monkeypatch) -> None:
    monkeypatch.delenv("EXPENSE_TRACKER_DATE_FORMAT", raising=False)
    assert config.date_format() == "%d-%m-%Y %H:%M"

    monkeypatch.setenv("EXPENSE_TRACKER_DATE_FORMAT", "%Y/%m/%d")
    assert config.date_format() == "%Y/%m/%d"
