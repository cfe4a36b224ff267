"""Composition root for the expense tracker."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shared import config
from tracker.controller import ExpenseTrackerController
from tracker.model import ExpenseTrackerModel
from tracker.views import TransactionTableView


@dataclass(slots=True)
class ExpenseTracker:
    model: ExpenseTrackerModel
    view: TransactionTableView
    controller: ExpenseTrackerController


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(level=config.log_level())


def build_expense_tracker() -> ExpenseTracker:
    """Build a model with a registered table view and its controller."""

    model = ExpenseTrackerModel()
    view = TransactionTableView(date_format=config.date_format())
    model.register(view)
    return ExpenseTracker(
        model=model,
        view=view,
        controller=ExpenseTrackerController(model),
    )
