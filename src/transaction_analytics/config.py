"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the MongoDB connection details, the optional seed URL and the default
page size from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Container for service configuration read from the environment.

    Attributes:
        mongo_uri: MongoDB connection URI.
        mongo_db: Target MongoDB database name.
        mongo_collection: Collection holding transaction documents.
        mongo_tls: Whether to connect over TLS using certifi's CA bundle.
        seed_url: Optional URL of the JSON document used by `seed`.
        default_page_size: Page size used when a listing omits one.
    """
    mongo_uri: str
    mongo_db: str
    mongo_collection: str
    mongo_tls: bool
    seed_url: str | None
    default_page_size: int


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `DEFAULT_PAGE_SIZE` is not a positive integer.
    """
    mongo_uri = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    mongo_db = os.getenv("MONGO_DB", "transactions")
    mongo_collection = os.getenv("MONGO_COLLECTION", "transactions")
    mongo_tls = os.getenv("MONGO_TLS", "").strip().lower() in _TRUTHY
    seed_url = os.getenv("SEED_URL", "").strip() or None

    raw_page_size = os.getenv("DEFAULT_PAGE_SIZE", "10").strip()
    try:
        default_page_size = int(raw_page_size)
    except ValueError:
        default_page_size = 0
    if default_page_size < 1:
        raise RuntimeError(
            f"DEFAULT_PAGE_SIZE must be a positive integer, got {raw_page_size!r}."
        )

    return Settings(
        mongo_uri=mongo_uri,
        mongo_db=mongo_db,
        mongo_collection=mongo_collection,
        mongo_tls=mongo_tls,
        seed_url=seed_url,
        default_page_size=default_page_size,
    )
