"""Fetch the seed JSON document and replace the transactions collection.

The seed is a JSON array of objects with `id`, `title`, `price`,
`description`, `category`, `image`, `sold` and `dateOfSale` keys. Rows that
fail `Transaction` validation are counted and skipped.

This is the only writer of the collection; it is not meant to run while
queries are being served.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import requests
from pydantic import ValidationError
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from transaction_analytics.db import bulk_upsert
from transaction_analytics.exceptions import SeedError, StoreUnavailable
from transaction_analytics.models import Transaction

log = logging.getLogger(__name__)


def fetch_seed(url: str, timeout: float = 60.0) -> list[dict[str, Any]]:
    """Download the seed document and return its list of objects.

    Args:
        url: Location of the JSON array.
        timeout: Request timeout in seconds.

    Raises:
        SeedError: if the request fails or the body is not a JSON array.
    """
    log.info("Downloading seed %s", url)
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        raise SeedError(f"Could not fetch seed from {url}: {e}") from e

    if not isinstance(data, list):
        raise SeedError(f"Seed at {url} is a {type(data).__name__}, expected a list")

    log.info("Fetched %d seed rows", len(data))
    return data


def validate_seed(rows: Iterable[Any]) -> tuple[list[Transaction], int]:
    """Validate seed rows into `Transaction` models.

    Returns:
        A tuple of (valid_transactions, bad_count).
    """
    good: list[Transaction] = []
    bad = 0
    for row in rows:
        try:
            good.append(Transaction.model_validate(row))
        except ValidationError as e:
            bad += 1
            log.debug("Rejected seed row %r: %s", row, e)
    return good, bad


def reset_transactions(
    collection: Collection[dict[str, Any]],
    transactions: Iterable[Transaction],
) -> int:
    """Replace the collection's contents with `transactions`.

    Drops every existing document, ensures a unique `id` index and a
    `dateOfSale` index, then upserts the records keyed by `id`.

    Returns:
        Number of documents written.
    """
    try:
        deleted = collection.delete_many({}).deleted_count
        collection.create_index([("id", ASCENDING)], unique=True)
        collection.create_index([("dateOfSale", ASCENDING)])
    except PyMongoError as e:
        raise StoreUnavailable(f"Could not reset {collection.name}") from e
    log.info("Cleared %d documents from %s", deleted, collection.name)

    docs = (t.model_dump(by_alias=True) for t in transactions)
    written = bulk_upsert(collection, docs, key_field="id")
    log.info("Seed load complete for %s: %d documents", collection.name, written)
    return written
