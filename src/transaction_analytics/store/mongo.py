"""MongoDB-backed record store.

`to_mongo_query` translates a `TransactionFilter` into a query document:

- month: ``{"$expr": {"$eq": [{"$month": "$dateOfSale"}, month]}}``; documents
  with a null or missing `dateOfSale` yield null and never match
- search: ``$or`` of case-insensitive, regex-escaped matches on `title` and
  `description`, plus ``{"price": value}`` when the term is numeric
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable

from pydantic import ValidationError
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from transaction_analytics.exceptions import StoreUnavailable
from transaction_analytics.models import Transaction
from transaction_analytics.query.filters import TransactionFilter

log = logging.getLogger(__name__)

PROJECTION = {"_id": False}
SORT = [("id", ASCENDING)]


def to_mongo_query(flt: TransactionFilter) -> dict[str, Any]:
    """Return the MongoDB query document equivalent to `flt`."""
    clauses: list[dict[str, Any]] = []

    if flt.month is not None:
        clauses.append({"$expr": {"$eq": [{"$month": "$dateOfSale"}, flt.month]}})

    if flt.has_search:
        pattern = re.escape(flt.search)
        alternatives: list[dict[str, Any]] = [
            {"title": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
        ]
        if flt.search_price is not None:
            alternatives.append({"price": flt.search_price})
        clauses.append({"$or": alternatives})

    if not clauses:
        return {}
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


class MongoRecordStore:
    """Record store reading the transactions collection through PyMongo.

    Args:
        collection: Collection holding documents in the seed's camelCase shape.
    """

    def __init__(self, collection: Collection[dict[str, Any]]) -> None:
        self.collection = collection

    def _to_records(self, docs: Iterable[dict[str, Any]]) -> list[Transaction]:
        """Validate fetched documents; a malformed one fails the whole read.

        Skipping it would make `find` disagree with `count`.
        """
        records: list[Transaction] = []
        for doc in docs:
            try:
                records.append(Transaction.model_validate(doc))
            except ValidationError as e:
                log.warning("Malformed document in %s: %s", self.collection.name, e)
                raise StoreUnavailable(
                    f"{self.collection.name} holds a malformed transaction document"
                ) from e
        return records

    def find(self, flt: TransactionFilter, skip: int, limit: int) -> list[Transaction]:
        query = to_mongo_query(flt)
        try:
            cursor = (
                self.collection.find(query, PROJECTION)
                .sort(SORT)
                .skip(skip)
                .limit(limit)
            )
            return self._to_records(cursor)
        except PyMongoError as e:
            log.warning("find failed for %s: %s", query, e)
            raise StoreUnavailable(f"find on {self.collection.name} failed") from e

    def count(self, flt: TransactionFilter) -> int:
        query = to_mongo_query(flt)
        try:
            return int(self.collection.count_documents(query))
        except PyMongoError as e:
            log.warning("count failed for %s: %s", query, e)
            raise StoreUnavailable(f"count on {self.collection.name} failed") from e

    def find_all(self, flt: TransactionFilter) -> list[Transaction]:
        query = to_mongo_query(flt)
        try:
            return self._to_records(self.collection.find(query, PROJECTION).sort(SORT))
        except PyMongoError as e:
            log.warning("find_all failed for %s: %s", query, e)
            raise StoreUnavailable(f"find on {self.collection.name} failed") from e
