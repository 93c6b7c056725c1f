"""Category Aggregator: record counts per category present in a month."""

from __future__ import annotations

import logging

from transaction_analytics.aggregate.frames import records_to_frame
from transaction_analytics.models import CategoryCount
from transaction_analytics.query.filters import month_filter
from transaction_analytics.store.base import RecordStore

log = logging.getLogger(__name__)


def compute_categories(store: RecordStore, month: int) -> list[CategoryCount]:
    """Return one `CategoryCount` per distinct category sold in `month`.

    Categories with no records that month are omitted. Entries are sorted by
    category label so repeated calls print identically.

    Args:
        store: Record store to read from.
        month: Month ordinal (1-12), already validated.
    """
    df = records_to_frame(store.find_all(month_filter(month)))
    if df.empty:
        return []

    counts = df.groupby("category", sort=True, dropna=False).size()
    log.debug("Categories for month=%d: %d distinct", month, len(counts))
    return [
        CategoryCount(category=str(category), item_count=int(n))
        for category, n in counts.items()
    ]
