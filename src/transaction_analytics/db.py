"""MongoDB helpers and bulk upsert utility.

Centralizes creation of Mongo clients and the batched upsert used by the seed
loader. Nothing here is cached at module level: callers construct a client and
pass it (or a collection taken from it) to whatever needs it.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import certifi
from pymongo import MongoClient, UpdateOne
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from transaction_analytics.config import Settings
from transaction_analytics.exceptions import StoreUnavailable

log = logging.getLogger(__name__)


def get_client(uri: str, tls: bool = False) -> MongoClient:
    """Return a configured PyMongo MongoClient for the provided URI.

    Args:
        uri: MongoDB connection URI.
        tls: Connect over TLS using certifi's CA bundle.

    Returns:
        Configured MongoClient instance.
    """
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": 30000,
        "socketTimeoutMS": 30000,
        "connectTimeoutMS": 30000,
    }
    if tls:
        options.update(tls=True, tlsCAFile=certifi.where())
    return MongoClient(uri, **options)


def get_db(
    client: MongoClient[dict[str, Any]],
    db_name: str,
) -> Database[dict[str, Any]]:
    """Return the named Database instance from a MongoClient.

    Args:
        client: PyMongo MongoClient.
        db_name: Database name.

    Returns:
        A Database object.
    """
    return client[db_name]


def get_collection(
    client: MongoClient[dict[str, Any]],
    settings: Settings,
) -> Collection[dict[str, Any]]:
    """Return the transactions collection named by `settings`."""
    return get_db(client, settings.mongo_db)[settings.mongo_collection]


def bulk_upsert(
    collection: Collection[dict[str, Any]],
    docs: Iterable[dict[str, Any]],
    key_field: str,
    batch_size: int = 1000,
) -> int:
    """Bulk upsert documents using `key_field` as the selector.

    Documents without `key_field` are skipped. A failing batch aborts the load
    with `StoreUnavailable` so a reset never finishes half-populated without
    the caller knowing.

    Args:
        collection: Target PyMongo collection.
        docs: Iterable of document dictionaries to upsert.
        key_field: Document key to use for upsert selector.
        batch_size: Number of ops per bulk_write call.

    Returns:
        Integer number of documents written.
    """
    ops: list[UpdateOne] = []
    written = 0

    def _flush() -> None:
        try:
            collection.bulk_write(ops, ordered=False)
        except PyMongoError as e:
            log.warning("bulk_upsert batch of %d failed: %s", len(ops), e)
            raise StoreUnavailable(f"bulk upsert into {collection.name} failed") from e
        ops.clear()

    for d in docs:
        if key_field not in d:
            log.debug("Skipping document without %s", key_field)
            continue

        ops.append(
            UpdateOne(
                {key_field: d[key_field]},
                {"$set": d},
                upsert=True,
            )
        )
        written += 1

        if len(ops) >= batch_size:
            _flush()

    if ops:
        _flush()

    return written
