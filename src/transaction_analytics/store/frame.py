"""In-memory record store backed by a pandas DataFrame.

Records are validated once at construction and kept in id order; filters are
evaluated as boolean masks over the columns they touch. Sale dates are
normalized to UTC (naive values are taken as UTC) so month matching agrees
with MongoDB's `$month`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from transaction_analytics.models import Transaction
from transaction_analytics.query.filters import TransactionFilter

log = logging.getLogger(__name__)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class FrameRecordStore:
    """Record store over an in-memory collection of transactions.

    Args:
        records: `Transaction` models or mappings in the seed's shape.

    Raises:
        ValueError: if two records share an id.
    """

    def __init__(self, records: Iterable[Transaction | Mapping[str, Any]]) -> None:
        validated = [
            r if isinstance(r, Transaction) else Transaction.model_validate(r)
            for r in records
        ]
        validated.sort(key=lambda r: r.id)

        ids = [r.id for r in validated]
        if len(set(ids)) != len(ids):
            raise ValueError("Transaction ids must be unique")

        self._records = validated
        self._frame = pd.DataFrame(
            {
                "title": pd.Series([r.title for r in validated], dtype=object),
                "description": pd.Series([r.description for r in validated], dtype=object),
                "price": pd.Series([r.price for r in validated], dtype="float64"),
                "date_of_sale": pd.to_datetime(
                    pd.Series([_as_utc(r.date_of_sale) for r in validated], dtype=object),
                    utc=True,
                ),
            }
        )
        log.debug("FrameRecordStore holding %d records", len(validated))

    def _mask(self, flt: TransactionFilter) -> pd.Series:
        df = self._frame
        mask = pd.Series(True, index=df.index)

        if flt.month is not None:
            # NaT months are NaN and never equal an ordinal
            mask &= df["date_of_sale"].dt.month.eq(flt.month)

        if flt.has_search:
            hit = df["title"].str.contains(flt.search, case=False, regex=False, na=False)
            hit |= df["description"].str.contains(flt.search, case=False, regex=False, na=False)
            if flt.search_price is not None:
                hit |= df["price"].eq(flt.search_price)
            mask &= hit

        return mask

    def _matching(self, flt: TransactionFilter) -> list[Transaction]:
        positions = np.flatnonzero(self._mask(flt).to_numpy(dtype=bool))
        return [self._records[i] for i in positions]

    def find(self, flt: TransactionFilter, skip: int, limit: int) -> list[Transaction]:
        return self._matching(flt)[skip : skip + limit]

    def count(self, flt: TransactionFilter) -> int:
        return int(self._mask(flt).sum())

    def find_all(self, flt: TransactionFilter) -> list[Transaction]:
        return self._matching(flt)
