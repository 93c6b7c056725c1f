"""Pagination Engine.

Converts loosely typed page parameters into a `PageRequest` (skip/limit for
the store) and a total count into page metadata. No upper bound is placed on
the page size here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from transaction_analytics.models import PageResult, Transaction

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageRequest:
    """A validated page position: both fields are at least 1."""
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def _coerce_positive(value: Any, default: int) -> int:
    """Parse `value` as an int clamped to >= 1; fall back to `default`."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(1, number)


def parse_page_request(
    page: Any = None,
    page_size: Any = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> PageRequest:
    """Build a `PageRequest` from raw query values.

    Args:
        page: Page number as int, numeric string or None.
        page_size: Page size as int, numeric string or None.
        default_page_size: Size used when `page_size` is absent or invalid.

    Returns:
        A `PageRequest` with page and page_size both >= 1.
    """
    return PageRequest(
        page=_coerce_positive(page, DEFAULT_PAGE),
        page_size=_coerce_positive(page_size, max(1, default_page_size)),
    )


def total_pages(total_count: int, page_size: int) -> int:
    """Return ceil(total_count / page_size); 0 for an empty result."""
    if total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)


def build_page(
    items: Sequence[Transaction],
    request: PageRequest,
    total_count: int,
) -> PageResult:
    """Assemble the `PageResult` for one fetched page."""
    return PageResult(
        items=list(items),
        page=request.page,
        page_size=request.page_size,
        total_pages=total_pages(total_count, request.page_size),
        total_count=total_count,
    )
