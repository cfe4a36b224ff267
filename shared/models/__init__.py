"""Pydantic models shared across the tracker layers."""

from .finance import (
    Transaction,
    TransactionCategory,
    normalize_category,
)

__all__ = [
    "Transaction",
    "TransactionCategory",
    "normalize_category",
]
