from __future__ import annotations

from typing import Any

import pytest

from transaction_analytics.store.frame import FrameRecordStore
from tests.helpers import make_row


@pytest.fixture
def rows() -> list[dict[str, Any]]:
    return [
        make_row(1, price=150, sold=True, title="Mens Cotton Jacket", category="men's clothing"),
        make_row(2, price=150, sold=False, title="Solid Gold Ring", category="jewelery"),
        make_row(3, price=950, sold=True, title="Monitor 4K", description="Wide screen", category="electronics"),
        make_row(4, price=44.6, sold=True, month=4, title="Backpack", category="men's clothing"),
        make_row(5, price=329.85, sold=False, month=4, title="SSD drive", category="electronics"),
        make_row(6, price=20, sold=True, month=None, title="Undated mug", category="home"),
    ]


@pytest.fixture
def store(rows: list[dict[str, Any]]) -> FrameRecordStore:
    return FrameRecordStore(rows)
