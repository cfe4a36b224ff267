"""Configuration helpers for environment variables."""

from __future__ import annotations

import os
import logging
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_MAX_AMOUNT = Decimal("1000")
_DEFAULT_DATE_FORMAT = "%d-%m-%Y %H:%M"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _should_load_dotenv() -> bool:
    """Return whether local dotenv loading should run."""
    app_env = os.getenv("APP_ENV", "dev").strip().lower()
    return app_env in {"dev", "local"}


if _should_load_dotenv():
    load_dotenv()


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def app_env() -> str:
    """Return the current application environment."""
    return (get_env("APP_ENV", "dev") or "dev").strip() or "dev"


def log_level() -> str:
    """Return the configured log level name, defaulting to INFO."""
    raw_value = (get_env("EXPENSE_TRACKER_LOG_LEVEL", "") or "").strip().upper()
    if not raw_value:
        return _DEFAULT_LOG_LEVEL

    if raw_value not in _LOG_LEVELS:
        logger.warning("log_level_invalid value=%s; using %s", raw_value, _DEFAULT_LOG_LEVEL)
        return _DEFAULT_LOG_LEVEL

    return raw_value


def max_transaction_amount() -> Decimal:
    """Return the inclusive upper bound accepted for a transaction amount."""
    raw_value = (get_env("EXPENSE_TRACKER_MAX_AMOUNT", "") or "").strip()
    if not raw_value:
        return _DEFAULT_MAX_AMOUNT

    try:
        parsed = Decimal(raw_value)
    except InvalidOperation:
        logger.warning("max_transaction_amount_invalid value=%s", raw_value)
        return _DEFAULT_MAX_AMOUNT

    if not parsed.is_finite() or parsed <= 0:
        logger.warning("max_transaction_amount_invalid value=%s", raw_value)
        return _DEFAULT_MAX_AMOUNT

    return parsed


def date_format() -> str:
    """Return the strftime pattern used when rendering transaction timestamps."""
    return (get_env("EXPENSE_TRACKER_DATE_FORMAT", "") or "").strip() or _DEFAULT_DATE_FORMAT
