"""Headless table view fed by model state changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from shared import config
from tracker.model import ExpenseTrackerModel


@dataclass(slots=True, frozen=True)
class TransactionTableRow:
    serial: int
    amount: Decimal
    category: str
    date: str


@dataclass(slots=True, eq=False)
class TransactionTableView:
    """Listener rebuilding table rows, total and highlights on each update."""

    date_format: str = field(default_factory=config.date_format)
    rows: list[TransactionTableRow] = field(default_factory=list)
    total_cost: Decimal = Decimal("0")
    highlighted_rows: list[int] = field(default_factory=list)
    update_count: int = 0

    def update(self, model: ExpenseTrackerModel) -> None:
        transactions = model.get_transactions()
        self.rows = [
            TransactionTableRow(
                serial=position,
                amount=transaction.amount,
                category=transaction.category.value,
                date=transaction.timestamp.strftime(self.date_format),
            )
            for position, transaction in enumerate(transactions, start=1)
        ]
        self.total_cost = sum((transaction.amount for transaction in transactions), Decimal("0"))
        self.highlighted_rows = model.get_matched_filter_indices()
        self.update_count += 1
