"""Conversion of fetched records into the small frame the aggregators share."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from transaction_analytics.models import Transaction

COLUMNS = ["id", "category", "price", "sold"]


def records_to_frame(records: Iterable[Transaction]) -> pd.DataFrame:
    """Return a DataFrame with `COLUMNS`; missing prices become NaN."""
    df = pd.DataFrame(
        [
            {"id": r.id, "category": r.category, "price": r.price, "sold": r.sold}
            for r in records
        ],
        columns=COLUMNS,
    )
    df["price"] = pd.to_numeric(df["price"], errors="coerce")
    df["sold"] = df["sold"].astype(bool)
    return df
