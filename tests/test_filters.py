"""Tests for transaction filters and matched index computation."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from shared.models import Transaction, TransactionCategory
from tracker.errors import InvalidArgumentError
from tracker.filters import AmountFilter, CategoryFilter, matched_indices


_FIXED_TIME = datetime(2025, 1, 10, 12, 30)

_TRANSACTIONS = [
    Transaction(amount=Decimal("12.30"), category="food", timestamp=_FIXED_TIME),
    Transaction(amount=Decimal("250"), category="travel", timestamp=_FIXED_TIME),
    Transaction(amount=Decimal("80"), category="bills", timestamp=_FIXED_TIME),
    Transaction(amount=Decimal("12.30"), category="food", timestamp=_FIXED_TIME),
]


def test_amount_filter_keeps_inclusive_range() -> None:
    kept = AmountFilter("12.30", 80).filter(_TRANSACTIONS)

    assert [transaction.amount for transaction in kept] == [
        Decimal("12.30"),
        Decimal("80"),
        Decimal("12.30"),
    ]


@pytest.mark.parametrize(
    ("minimum", "maximum"),
    [(-1, 10), (10, 5), (None, 10), ("abc", 10), ("NaN", 10)],
)
def test_amount_filter_rejects_invalid_bounds(minimum: object, maximum: object) -> None:
    with pytest.raises(InvalidArgumentError):
        AmountFilter(minimum, maximum)


def test_category_filter_normalizes_input() -> None:
    category_filter = CategoryFilter(" TRAVEL ")

    assert category_filter.category is TransactionCategory.TRAVEL
    assert category_filter.filter(_TRANSACTIONS) == [_TRANSACTIONS[1]]


@pytest.mark.parametrize("category", ["groceries", "", None])
def test_category_filter_rejects_unknown_category(category: object) -> None:
    with pytest.raises(InvalidArgumentError):
        CategoryFilter(category)


def test_matched_indices_returns_positions_including_duplicates() -> None:
    assert matched_indices(_TRANSACTIONS, CategoryFilter("food")) == [0, 3]
    assert matched_indices(_TRANSACTIONS, AmountFilter(100, 1000)) == [1]
    assert matched_indices(_TRANSACTIONS, CategoryFilter("entertainment")) == []
    assert matched_indices([], CategoryFilter("food")) == []
