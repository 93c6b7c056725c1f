"""Statistics Aggregator: sale totals for one month."""

from __future__ import annotations

import logging

from transaction_analytics.aggregate.frames import records_to_frame
from transaction_analytics.models import StatisticsResult
from transaction_analytics.query.filters import month_filter
from transaction_analytics.store.base import RecordStore

log = logging.getLogger(__name__)


def compute_statistics(store: RecordStore, month: int) -> StatisticsResult:
    """Return total sale amount, sold count and unsold count for `month`.

    The sale amount sums the prices of sold records only (missing prices add
    nothing) and is rounded to cents. An empty month gives all zeros.

    Args:
        store: Record store to read from.
        month: Month ordinal (1-12), already validated.
    """
    df = records_to_frame(store.find_all(month_filter(month)))

    sold = df["sold"]
    total_sold = int(sold.sum())
    amount = float(df.loc[sold, "price"].sum()) if total_sold else 0.0

    result = StatisticsResult(
        total_sale_amount=round(amount, 2),
        total_sold_count=total_sold,
        total_not_sold_count=int(len(df) - total_sold),
    )
    log.debug("Statistics for month=%d: %s", month, result)
    return result
