"""Transaction filters applied by the controller."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Protocol

from shared.models import Transaction, TransactionCategory, normalize_category
from tracker.errors import InvalidArgumentError


class TransactionFilter(Protocol):
    def filter(self, transactions: Sequence[Transaction]) -> list[Transaction]:
        """Return kept transactions in their original order."""


def _to_decimal(value: object, *, name: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number")
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"{name} must be a number") from exc
    if not parsed.is_finite():
        raise InvalidArgumentError(f"{name} must be finite")
    return parsed


class AmountFilter:
    """Keep transactions whose amount lies in an inclusive range."""

    def __init__(self, min_amount: Decimal | float | str, max_amount: Decimal | float | str) -> None:
        minimum = _to_decimal(min_amount, name="min_amount")
        maximum = _to_decimal(max_amount, name="max_amount")
        if minimum < 0 or maximum < 0:
            raise InvalidArgumentError("Amount bounds must be non-negative.")
        if minimum > maximum:
            raise InvalidArgumentError("min_amount must not exceed max_amount.")

        self.min_amount = minimum
        self.max_amount = maximum

    def filter(self, transactions: Sequence[Transaction]) -> list[Transaction]:
        return [
            transaction
            for transaction in transactions
            if self.min_amount <= transaction.amount <= self.max_amount
        ]


class CategoryFilter:
    """Keep transactions of a single category."""

    def __init__(self, category: TransactionCategory | str) -> None:
        try:
            self.category = TransactionCategory(normalize_category(category))
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown category: {category!r}") from exc

    def filter(self, transactions: Sequence[Transaction]) -> list[Transaction]:
        return [transaction for transaction in transactions if transaction.category == self.category]


def matched_indices(
    transactions: Sequence[Transaction],
    transaction_filter: TransactionFilter,
) -> list[int]:
    """Return positions in `transactions` of the rows kept by the filter.

    Duplicated values are matched position by position so that two equal
    transactions only yield both indices when the filter keeps both.
    """

    remaining = list(transaction_filter.filter(transactions))
    indices: list[int] = []
    for index, transaction in enumerate(transactions):
        if transaction in remaining:
            remaining.remove(transaction)
            indices.append(index)
    return indices
