"""In-memory expense tracker model.

The model owns the transactions, the indices matched by the last applied
filter and the registered listeners. Mutations never notify listeners on their
own: callers decide when to invoke `state_changed`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shared.models import Transaction
from tracker.errors import InvalidArgumentError
from tracker.listeners import ExpenseTrackerModelListener


logger = logging.getLogger(__name__)


class ExpenseTrackerModel:
    """Observable container of transactions and matched filter indices."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._matched_filter_indices: list[int] = []
        self._listeners: list[ExpenseTrackerModelListener] | None = []

    def add_transaction(self, transaction: Transaction | None) -> None:
        if transaction is None:
            raise InvalidArgumentError("The new transaction must be non-null.")

        self._transactions.append(transaction)
        # Positions may have shifted.
        self._matched_filter_indices.clear()
        logger.debug("transaction_added count=%s", len(self._transactions))

    def remove_transaction(self, transaction: Transaction | None) -> None:
        """Remove the first transaction equal to `transaction`, if any."""
        try:
            self._transactions.remove(transaction)
        except ValueError:
            logger.debug("transaction_remove_missing count=%s", len(self._transactions))
        else:
            logger.debug("transaction_removed count=%s", len(self._transactions))
        self._matched_filter_indices.clear()

    def get_transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Iterable[int] | None) -> None:
        """Replace matched filter indices after validating every position."""
        if indices is None:
            raise InvalidArgumentError("The matched filter indices list must be non-null.")

        candidate = list(indices)
        upper_bound = len(self._transactions)
        for index in candidate:
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidArgumentError(
                    f"Each matched filter index must be an integer, got {index!r}."
                )
            if index < 0 or index >= upper_bound:
                raise InvalidArgumentError(
                    "Each matched filter index must be between 0 (inclusive) "
                    "and the number of transactions (exclusive)."
                )

        self._matched_filter_indices = candidate
        logger.debug("matched_filter_indices_set count=%s", len(candidate))

    def get_matched_filter_indices(self) -> list[int]:
        return list(self._matched_filter_indices)

    def register(self, listener: ExpenseTrackerModelListener | None) -> bool:
        """Register a listener for state change events.

        Returns True when the listener is non-null and not already registered,
        False otherwise.
        """
        if listener is None or self._listeners is None or listener in self._listeners:
            return False

        self._listeners.append(listener)
        logger.debug("listener_registered count=%s", len(self._listeners))
        return True

    def unregister(self, listener: ExpenseTrackerModelListener | None) -> bool:
        if listener is None or not self.contains_listener(listener):
            return False

        self._listeners.remove(listener)
        logger.debug("listener_unregistered count=%s", len(self._listeners))
        return True

    def number_of_listeners(self) -> int:
        if self._listeners is None:
            return 0
        return len(self._listeners)

    def contains_listener(self, listener: ExpenseTrackerModelListener | None) -> bool:
        return self._listeners is not None and listener in self._listeners

    def state_changed(self) -> None:
        """Notify every listener, in registration order, with this model."""
        listeners = list(self._listeners or [])
        logger.debug("state_changed listeners=%s", len(listeners))
        for listener in listeners:
            listener.update(self)
