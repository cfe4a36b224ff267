"""Controller mediating user input and the expense tracker model."""

from __future__ import annotations

import logging
from decimal import Decimal

from pydantic import ValidationError

from shared.models import Transaction, TransactionCategory
from tracker.filters import TransactionFilter, matched_indices
from tracker.model import ExpenseTrackerModel


logger = logging.getLogger(__name__)


class ExpenseTrackerController:
    """Validate input, mutate the model and trigger listener updates."""

    def __init__(self, model: ExpenseTrackerModel) -> None:
        self.model = model

    def add_transaction(
        self,
        amount: Decimal | float | str,
        category: TransactionCategory | str,
    ) -> bool:
        """Add a transaction built from raw input.

        Returns False, leaving the model untouched, when the amount or the
        category is invalid.
        """

        try:
            transaction = Transaction(amount=amount, category=category)
        except ValidationError as exc:
            logger.warning(
                "transaction_rejected amount=%s category=%s errors=%s",
                amount,
                category,
                exc.error_count(),
            )
            return False

        self.model.add_transaction(transaction)
        self.model.state_changed()
        logger.info(
            "transaction_added amount=%s category=%s",
            transaction.amount,
            transaction.category.value,
        )
        return True

    def remove_transaction(self, index: int) -> bool:
        """Remove the transaction displayed at `index`."""
        transactions = self.model.get_transactions()
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(transactions):
            logger.warning("transaction_remove_invalid_index index=%s count=%s", index, len(transactions))
            return False

        self.model.remove_transaction(transactions[index])
        self.model.state_changed()
        logger.info("transaction_removed index=%s", index)
        return True

    def apply_filter(self, transaction_filter: TransactionFilter) -> list[int]:
        indices = matched_indices(self.model.get_transactions(), transaction_filter)
        self.model.set_matched_filter_indices(indices)
        self.model.state_changed()
        logger.info(
            "filter_applied filter=%s matches=%s",
            type(transaction_filter).__name__,
            len(indices),
        )
        return indices

    def clear_filter(self) -> None:
        self.model.set_matched_filter_indices([])
        self.model.state_changed()
