"""Error types raised by the expense tracker."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised before any mutation when an argument is missing or out of range."""
