"""Core value models for the expense tracker."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared import config


class TransactionCategory(str, Enum):
    """Categories accepted for an expense."""

    FOOD = "food"
    TRAVEL = "travel"
    BILLS = "bills"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"


def normalize_category(value: object) -> object:
    """Strip and case-fold raw category strings, leave other values untouched."""
    if isinstance(value, str):
        return value.strip().casefold()
    return value


class Transaction(BaseModel):
    """Immutable expense record held by the tracker model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: Decimal = Field(..., description="Positive expense amount.")
    category: TransactionCategory
    timestamp: datetime = Field(default_factory=datetime.now)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, value: Decimal) -> Decimal:
        if not value.is_finite() or value <= 0:
            raise ValueError("amount must be greater than 0")

        maximum = config.max_transaction_amount()
        if value > maximum:
            raise ValueError(f"amount must be at most {maximum}")

        return value

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category_value(cls, value: object) -> object:
        return normalize_category(value)
