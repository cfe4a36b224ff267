"""Observer contract for expense tracker model state changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tracker.model import ExpenseTrackerModel


class ExpenseTrackerModelListener(Protocol):
    def update(self, model: ExpenseTrackerModel) -> None:
        """Refresh from the given model after a state change."""
