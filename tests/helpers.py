"""Shared test data builders and fake MongoDB objects."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pymongo.errors import ServerSelectionTimeoutError


def make_row(
    id: int,
    price: float | None = 10.0,
    sold: bool = False,
    month: int | None = 3,
    category: str = "electronics",
    title: str = "Item",
    description: str = "A thing",
) -> dict[str, Any]:
    """Return a seed-shaped row sold on the 15th of `month` 2022 (None = undated)."""
    return {
        "id": id,
        "title": title,
        "description": description,
        "category": category,
        "price": price,
        "sold": sold,
        "dateOfSale": (
            datetime(2022, month, 15, 12, 0, tzinfo=timezone.utc).isoformat()
            if month is not None
            else None
        ),
        "image": f"https://img.example/{id}.jpg",
    }


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self.docs = docs
        self.calls: list[tuple[str, Any]] = []

    def sort(self, spec: Any) -> "FakeCursor":
        self.calls.append(("sort", spec))
        return self

    def skip(self, n: int) -> "FakeCursor":
        self.calls.append(("skip", n))
        self.docs = self.docs[n:]
        return self

    def limit(self, n: int) -> "FakeCursor":
        self.calls.append(("limit", n))
        self.docs = self.docs[:n]
        return self

    def __iter__(self):
        return iter(self.docs)


class FakeCollection:
    """Collection stand-in that ignores the query and returns every document."""
    name = "transactions"

    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self.docs = docs
        self.queries: list[dict[str, Any]] = []
        self.cursor: FakeCursor | None = None

    def find(self, query: dict[str, Any], projection: dict[str, Any]) -> FakeCursor:
        self.queries.append(query)
        self.cursor = FakeCursor(list(self.docs))
        return self.cursor

    def count_documents(self, query: dict[str, Any]) -> int:
        self.queries.append(query)
        return len(self.docs)


class DownCollection:
    name = "transactions"

    def find(self, *args: Any, **kwargs: Any) -> Any:
        raise ServerSelectionTimeoutError("no servers")

    def count_documents(self, *args: Any, **kwargs: Any) -> int:
        raise ServerSelectionTimeoutError("no servers")
