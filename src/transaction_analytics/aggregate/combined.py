"""Composite Coordinator.

Runs the statistics, histogram and category aggregations for one month as
three Dask delayed tasks on the threaded scheduler and merges them into a
`CombinedResult`. Each branch builds its own month filter and only reads from
the store.

Every branch is allowed to settle before anything is reported. If any branch
failed, the first failure in (statistics, histogram, categories) order is
re-raised and the other results are dropped; there is no partial result.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from dask import compute, delayed  # type: ignore[attr-defined]

from transaction_analytics.aggregate.categories import compute_categories
from transaction_analytics.aggregate.histogram import compute_histogram
from transaction_analytics.aggregate.statistics import compute_statistics
from transaction_analytics.models import CombinedResult
from transaction_analytics.store.base import RecordStore

log = logging.getLogger(__name__)

Outcome = tuple[Any, Exception | None]


def _settle(fn: Callable[[RecordStore, int], Any], store: RecordStore, month: int) -> Outcome:
    """Run one branch and return (result, None) or (None, error)."""
    try:
        return fn(store, month), None
    except Exception as e:  # re-raised by compute_combined once all branches settle
        log.warning("%s failed for month=%d: %s", fn.__name__, month, e)
        return None, e


def compute_combined(store: RecordStore, month: int) -> CombinedResult:
    """Return statistics, histogram and categories for `month` together.

    Args:
        store: Record store shared read-only by the three branches.
        month: Month ordinal (1-12), already validated.

    Raises:
        Whatever the first failing branch raised, typically `StoreUnavailable`.
    """
    branches = (compute_statistics, compute_histogram, compute_categories)
    tasks = [
        delayed(_settle, pure=False)(fn, store, month)
        for fn in branches
    ]

    log.info("Computing combined report for month=%d", month)
    outcomes = compute(*tasks, scheduler="threads", num_workers=len(tasks))

    for _, error in outcomes:
        if error is not None:
            raise error

    (statistics, _), (histogram, _), (categories, _) = outcomes
    return CombinedResult(
        statistics=statistics,
        histogram=histogram,
        categories=categories,
    )
