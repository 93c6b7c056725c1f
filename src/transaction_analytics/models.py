"""Pydantic models for transaction records and query results.

Field names are snake_case in Python; the camelCase names used by the source
data and by JSON consumers are declared as aliases. Dump with
``model_dump(by_alias=True)`` to get the wire shape back.
"""

from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A single product sale record as held by the record store.

    Attributes:
        id: Unique record identifier.
        title: Product title.
        description: Free-text product description.
        category: Category label, grouped on exactly as stored.
        price: Sale price; `None` when the source omitted it.
        sold: Whether the item was sold.
        date_of_sale: Sale timestamp; its month drives every month filter.
        image: Opaque image reference.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
    id: int
    title: str = ""
    description: str = ""
    category: str = ""
    price: float | None = None
    sold: bool = False
    date_of_sale: datetime | None = Field(None, alias="dateOfSale")
    image: str = ""


class PageResult(BaseModel):
    """One page of a filtered listing plus the metadata to fetch the rest."""
    model_config = ConfigDict(populate_by_name=True)
    items: list[Transaction]
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1, alias="pageSize")
    total_pages: int = Field(..., ge=0, alias="totalPages")
    total_count: int = Field(..., ge=0, alias="totalCount")


class StatisticsResult(BaseModel):
    """Sale statistics for one month."""
    model_config = ConfigDict(populate_by_name=True)
    total_sale_amount: float = Field(..., alias="totalSaleAmount")
    total_sold_count: int = Field(..., ge=0, alias="totalSoldCount")
    total_not_sold_count: int = Field(..., ge=0, alias="totalNotSoldCount")


class HistogramBucket(BaseModel):
    """Number of records whose price falls in one fixed price range."""
    model_config = ConfigDict(populate_by_name=True)
    range: str
    count: int = Field(..., ge=0)


class CategoryCount(BaseModel):
    """Number of records carrying one category label."""
    model_config = ConfigDict(populate_by_name=True)
    category: str
    item_count: int = Field(..., ge=0, alias="itemCount")


class CombinedResult(BaseModel):
    """Statistics, histogram and category breakdown for the same month."""
    model_config = ConfigDict(populate_by_name=True)
    statistics: StatisticsResult
    histogram: list[HistogramBucket]
    categories: list[CategoryCount]
