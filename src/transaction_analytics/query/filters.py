"""Filter Builder.

Turns a (month name, search term) pair into a `TransactionFilter`, a plain
description of the predicate that each record store translates into its own
query language. Nothing in this module touches storage.

Numeric search policy: when the search term parses with `float()` to a finite
number, the filter also matches records whose price equals that number.
Anything else leaves the price branch out; it is never an error.
"""

from __future__ import annotations

import math
import logging
from dataclasses import dataclass

from transaction_analytics.exceptions import InvalidMonth

log = logging.getLogger(__name__)

MONTHS: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_MONTH_NUMBERS = {name: i for i, name in enumerate(MONTHS, start=1)}


@dataclass(frozen=True)
class TransactionFilter:
    """Declarative conjunction of an optional month and an optional search.

    Attributes:
        month: Sale month ordinal (1-12) or None for any month.
        search: Case-insensitive substring matched against title and
            description, or None for no search.
        search_price: Exact price also accepted by the search, set only when
            the search term is numeric.
    """
    month: int | None = None
    search: str | None = None
    search_price: float | None = None

    @property
    def has_search(self) -> bool:
        return self.search is not None


def get_month_number(name: str | None) -> int | None:
    """Return the 1-12 ordinal for an English month name, or None.

    Matching ignores case and surrounding whitespace.
    """
    if not isinstance(name, str):
        return None
    return _MONTH_NUMBERS.get(name.strip().lower())


def require_month(name: str | None) -> int:
    """Return the ordinal for `name` or raise `InvalidMonth`."""
    number = get_month_number(name)
    if number is None:
        raise InvalidMonth(name)
    return number


def parse_search_price(term: str) -> float | None:
    """Return `term` as a finite float, or None when it is not numeric."""
    try:
        value = float(term)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def month_filter(month: int) -> TransactionFilter:
    """Return a filter selecting every record sold in `month`."""
    return TransactionFilter(month=month)


def build_filter(month: str | None = None, search: str | None = None) -> TransactionFilter:
    """Build the listing filter from raw month and search values.

    An unrecognized month is dropped rather than rejected; aggregations use
    `require_month` instead.

    Args:
        month: Month name, any case.
        search: Free-text search; empty or whitespace-only means no search.

    Returns:
        A `TransactionFilter`.
    """
    month_number = get_month_number(month)
    if month is not None and month_number is None:
        log.debug("Ignoring unrecognized month %r in listing filter", month)

    term = (search or "").strip()
    if not term:
        return TransactionFilter(month=month_number)

    return TransactionFilter(
        month=month_number,
        search=term,
        search_price=parse_search_price(term),
    )
