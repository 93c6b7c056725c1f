from __future__ import annotations

import pytest

from transaction_analytics.config import get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("MONGO_URI", "MONGO_DB", "MONGO_COLLECTION", "MONGO_TLS", "SEED_URL", "DEFAULT_PAGE_SIZE"):
        monkeypatch.delenv(var, raising=False)
    s = get_settings()
    assert s.mongo_uri == "mongodb://localhost:27017"
    assert s.mongo_db == "transactions"
    assert s.mongo_collection == "transactions"
    assert s.mongo_tls is False
    assert s.seed_url is None
    assert s.default_page_size == 10


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGO_TLS", "True")
    monkeypatch.setenv("SEED_URL", " https://seed.example/data.json ")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    s = get_settings()
    assert s.mongo_tls is True
    assert s.seed_url == "https://seed.example/data.json"
    assert s.default_page_size == 25


@pytest.mark.parametrize("value", ["0", "ten"])
def test_invalid_page_size_is_rejected(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", value)
    with pytest.raises(RuntimeError):
        get_settings()
