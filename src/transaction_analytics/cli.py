"""Command-line interface for the transaction query engine.

Provides subcommands: `seed`, `list`, `stats`, `histogram`, `categories` and
`combined`. Each command is implemented as a `cmd_*` function that accepts an
argparse namespace and the service/settings built once in `main`; query
results are printed as JSON.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel

from transaction_analytics.config import Settings, get_settings
from transaction_analytics.db import get_client, get_collection
from transaction_analytics.exceptions import InvalidMonth, TransactionAnalyticsError
from transaction_analytics.ingest.seed import fetch_seed, reset_transactions, validate_seed
from transaction_analytics.logging_config import configure_logging
from transaction_analytics.service import TransactionService
from transaction_analytics.store.mongo import MongoRecordStore

log = logging.getLogger(__name__)


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _to_jsonable(result: BaseModel | Sequence[BaseModel]) -> Any:
    """Dump a result model (or list of models) in its camelCase wire shape."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    return [r.model_dump(mode="json", by_alias=True) for r in result]


def _emit(result: BaseModel | Sequence[BaseModel]) -> None:
    json.dump(_to_jsonable(result), sys.stdout, indent=2)
    sys.stdout.write("\n")


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_seed(args: argparse.Namespace, service: TransactionService, settings: Settings) -> None:
    """Replace the collection with the seed document at `--url` or SEED_URL."""
    url = args.url or settings.seed_url
    if not url:
        raise RuntimeError("SEED_URL is required for seed. Set it in .env or pass --url.")

    if not isinstance(service.store, MongoRecordStore):
        raise RuntimeError("seed needs a MongoDB-backed store")

    transactions, bad = validate_seed(fetch_seed(url))
    if bad:
        log.warning("Skipped %d invalid seed rows", bad)
    written = reset_transactions(service.store.collection, transactions)
    log.info("Seeded %d transactions", written)


def cmd_list(args: argparse.Namespace, service: TransactionService, _: Settings) -> None:
    _emit(service.list_transactions(args.month, args.search, args.page, args.page_size))


def cmd_stats(args: argparse.Namespace, service: TransactionService, _: Settings) -> None:
    _emit(service.get_statistics(args.month))


def cmd_histogram(args: argparse.Namespace, service: TransactionService, _: Settings) -> None:
    _emit(service.get_histogram(args.month))


def cmd_categories(args: argparse.Namespace, service: TransactionService, _: Settings) -> None:
    _emit(service.get_category_breakdown(args.month))


def cmd_combined(args: argparse.Namespace, service: TransactionService, _: Settings) -> None:
    _emit(service.get_combined(args.month))


COMMANDS = {
    "seed": cmd_seed,
    "list": cmd_list,
    "stats": cmd_stats,
    "histogram": cmd_histogram,
    "categories": cmd_categories,
    "combined": cmd_combined,
}


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Page values are accepted as raw strings; the service parses them.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="transaction-analytics")
    p.add_argument("--log-file", type=Path, default=None)
    p.add_argument("--verbose", "-v", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_seed = sub.add_parser("seed")
    p_seed.add_argument("--url", default=None)

    p_list = sub.add_parser("list")
    p_list.add_argument("--month", default=None)
    p_list.add_argument("--search", default=None)
    p_list.add_argument("--page", default=None)
    p_list.add_argument("--page-size", default=None)

    for name in ("stats", "histogram", "categories", "combined"):
        p_month = sub.add_parser(name)
        p_month.add_argument("--month", required=True)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)
    configure_logging(
        args.log_file,
        logging.DEBUG if args.verbose else logging.INFO,
        stream=sys.stderr,
    )

    settings = get_settings()
    client = get_client(settings.mongo_uri, tls=settings.mongo_tls)
    try:
        store = MongoRecordStore(get_collection(client, settings))
        service = TransactionService(store, settings.default_page_size)
        COMMANDS[args.cmd](args, service, settings)
    except InvalidMonth as e:
        log.error("%s", e)
        return 2
    except TransactionAnalyticsError as e:
        log.error("%s failed: %s", args.cmd, e)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
