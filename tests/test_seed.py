from __future__ import annotations

from typing import Any

import pytest
import requests
from pymongo.errors import BulkWriteError

from transaction_analytics.exceptions import SeedError, StoreUnavailable
from transaction_analytics.ingest import seed
from transaction_analytics.ingest.seed import fetch_seed, reset_transactions, validate_seed
from tests.helpers import make_row


class FakeResponse:
    def __init__(self, payload: Any, status: int = 200) -> None:
        self.payload = payload
        self.status = status

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self) -> Any:
        return self.payload


def test_fetch_seed_returns_rows(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(seed.requests, "get", lambda url, timeout: FakeResponse([make_row(1)]))
    assert fetch_seed("https://seed.example/data.json")[0]["id"] == 1


@pytest.mark.parametrize("response", [FakeResponse({"id": 1}), FakeResponse([], status=503)])
def test_fetch_seed_rejects_bad_responses(monkeypatch: pytest.MonkeyPatch, response: FakeResponse) -> None:
    monkeypatch.setattr(seed.requests, "get", lambda url, timeout: response)
    with pytest.raises(SeedError):
        fetch_seed("https://seed.example/data.json")


def test_validate_seed_counts_bad_rows() -> None:
    good, bad = validate_seed([make_row(1), {"title": "missing id"}, make_row(2), "junk"])
    assert [t.id for t in good] == [1, 2]
    assert bad == 2


class RecordingCollection:
    name = "transactions"

    def __init__(self, fail_writes: bool = False) -> None:
        self.fail_writes = fail_writes
        self.deleted = False
        self.indexes: list[tuple[Any, dict[str, Any]]] = []
        self.ops: list[Any] = []

    def delete_many(self, query: dict[str, Any]) -> Any:
        self.deleted = True

        class Result:
            deleted_count = 7

        return Result()

    def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return "idx"

    def bulk_write(self, ops: list[Any], ordered: bool = True) -> None:
        if self.fail_writes:
            raise BulkWriteError({"writeErrors": []})
        self.ops.extend(ops)


def test_reset_replaces_collection_contents() -> None:
    coll = RecordingCollection()
    good, _ = validate_seed([make_row(1), make_row(2)])
    assert reset_transactions(coll, good) == 2  # type: ignore[arg-type]

    assert coll.deleted
    assert coll.indexes[0] == ([("id", 1)], {"unique": True})
    docs = [op._doc["$set"] for op in coll.ops]
    assert [d["id"] for d in docs] == [1, 2]
    assert "dateOfSale" in docs[0]


def test_reset_fails_loudly_on_write_errors() -> None:
    coll = RecordingCollection(fail_writes=True)
    good, _ = validate_seed([make_row(1)])
    with pytest.raises(StoreUnavailable):
        reset_transactions(coll, good)  # type: ignore[arg-type]
