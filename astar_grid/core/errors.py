"""Exceptions raised by the grid and search core."""

from __future__ import annotations


class ContractViolation(AssertionError):
    """A caller broke an API contract (bad coordinate, wrong state, ...).

    These are programming errors and are not meant to be caught and
    recovered from.
    """


class GridBusyError(RuntimeError):
    """Raised when the grid is edited while a search is running."""


__all__ = ["ContractViolation", "GridBusyError"]
