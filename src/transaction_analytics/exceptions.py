"""Exception types raised by the query engine and its collaborators."""

from __future__ import annotations

from typing import Any


class TransactionAnalyticsError(Exception):
    """Base class for all errors raised by this package."""


class InvalidMonth(TransactionAnalyticsError, ValueError):
    """A month name is missing or not one of the twelve English month names."""

    def __init__(self, value: Any) -> None:
        self.value = value
        if value is None or (isinstance(value, str) and not value.strip()):
            message = "A month is required (e.g. 'March')."
        else:
            message = f"Unrecognized month: {value!r}"
        super().__init__(message)


class StoreUnavailable(TransactionAnalyticsError):
    """The record store could not serve a query."""


class SeedError(TransactionAnalyticsError):
    """The seed document could not be fetched or has an unexpected shape."""
