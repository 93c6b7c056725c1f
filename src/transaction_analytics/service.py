"""The five query operations, bound to an explicitly supplied record store.

`TransactionService` is the entry point for any transport (the CLI here, or an
HTTP layer). It parses raw month/search/page values at the boundary and hands
typed values to the filter, pagination and aggregation modules.

Month handling differs by operation: listing treats an unrecognized month as
"no month filter", while every aggregation raises `InvalidMonth`.
"""

from __future__ import annotations

import logging
from typing import Any

from transaction_analytics.aggregate.categories import compute_categories
from transaction_analytics.aggregate.combined import compute_combined
from transaction_analytics.aggregate.histogram import compute_histogram
from transaction_analytics.aggregate.statistics import compute_statistics
from transaction_analytics.models import (
    CategoryCount,
    CombinedResult,
    HistogramBucket,
    PageResult,
    StatisticsResult,
)
from transaction_analytics.query.filters import build_filter, require_month
from transaction_analytics.query.pagination import (
    DEFAULT_PAGE_SIZE,
    build_page,
    parse_page_request,
)
from transaction_analytics.store.base import RecordStore

log = logging.getLogger(__name__)


class TransactionService:
    """Query operations over one record store.

    Args:
        store: Record store to read from; shared read-only by all calls.
        default_page_size: Page size used when a listing gives none.
    """

    def __init__(self, store: RecordStore, default_page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.store = store
        self.default_page_size = default_page_size

    def list_transactions(
        self,
        month: str | None = None,
        search: str | None = None,
        page: Any = None,
        page_size: Any = None,
    ) -> PageResult:
        """Return one page of records matching the month and search.

        Args:
            month: Month name; missing or unrecognized means any month.
            search: Substring of title/description, or an exact price.
            page: 1-based page number (int or numeric string).
            page_size: Records per page (int or numeric string).
        """
        flt = build_filter(month, search)
        request = parse_page_request(page, page_size, self.default_page_size)

        total = self.store.count(flt)
        items = self.store.find(flt, request.skip, request.limit)
        log.debug(
            "Listing %s page=%d size=%d -> %d of %d",
            flt, request.page, request.page_size, len(items), total,
        )
        return build_page(items, request, total)

    def get_statistics(self, month: str | None) -> StatisticsResult:
        return compute_statistics(self.store, require_month(month))

    def get_histogram(self, month: str | None) -> list[HistogramBucket]:
        return compute_histogram(self.store, require_month(month))

    def get_category_breakdown(self, month: str | None) -> list[CategoryCount]:
        return compute_categories(self.store, require_month(month))

    def get_combined(self, month: str | None) -> CombinedResult:
        """Return statistics, histogram and categories for one month.

        The month is validated once and shared by the three concurrent
        aggregations. Any branch failure fails the whole call.
        """
        return compute_combined(self.store, require_month(month))
