"""Histogram Aggregator: counts per fixed price range.

The ten ranges are declared in ascending order. A non-negative price belongs
to the first range whose upper bound is at least the price, so the ranges are
contiguous for fractional prices too (100.5 counts towards "101-200").
Negative and missing prices fall in no range and are left out of every count.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from transaction_analytics.aggregate.frames import records_to_frame
from transaction_analytics.models import HistogramBucket
from transaction_analytics.query.filters import month_filter
from transaction_analytics.store.base import RecordStore

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceRange:
    label: str
    upper: float


PRICE_RANGES: tuple[PriceRange, ...] = (
    PriceRange("0-100", 100),
    PriceRange("101-200", 200),
    PriceRange("201-300", 300),
    PriceRange("301-400", 400),
    PriceRange("401-500", 500),
    PriceRange("501-600", 600),
    PriceRange("601-700", 700),
    PriceRange("701-800", 800),
    PriceRange("801-900", 900),
    PriceRange("901-above", math.inf),
)


def bucket_label(price: float | None) -> str | None:
    """Return the label of the range holding `price`, or None."""
    if price is None or math.isnan(price) or price < 0:
        return None
    for r in PRICE_RANGES:
        if price <= r.upper:
            return r.label
    return None


def compute_histogram(store: RecordStore, month: int) -> list[HistogramBucket]:
    """Return one bucket per price range for `month`, in declaration order.

    Empty ranges are reported with a count of zero.

    Args:
        store: Record store to read from.
        month: Month ordinal (1-12), already validated.
    """
    df = records_to_frame(store.find_all(month_filter(month)))
    labels = df["price"].map(bucket_label).dropna()
    counts = labels.value_counts()

    buckets = [
        HistogramBucket(range=r.label, count=int(counts.get(r.label, 0)))
        for r in PRICE_RANGES
    ]
    log.debug("Histogram for month=%d: %d of %d records bucketed", month, len(labels), len(df))
    return buckets
