"""The read interface the query engine needs from a record store."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from transaction_analytics.models import Transaction
from transaction_analytics.query.filters import TransactionFilter


@runtime_checkable
class RecordStore(Protocol):
    """Read-only access to transaction records.

    Implementations return records in ascending `id` order so that pagination
    and aggregation results are reproducible, and raise `StoreUnavailable`
    when the backing storage cannot answer.
    """

    def find(self, flt: TransactionFilter, skip: int, limit: int) -> list[Transaction]:
        ...

    def count(self, flt: TransactionFilter) -> int:
        ...

    def find_all(self, flt: TransactionFilter) -> list[Transaction]:
        ...
