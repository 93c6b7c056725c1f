from __future__ import annotations

import io
import logging
from pathlib import Path

from transaction_analytics.logging_config import configure_logging


def test_configure_logging_adds_stream_handler() -> None:
    # Ensure configuring logging doesn't raise and attaches a StreamHandler
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_writes_to_given_stream_and_file(tmp_path: Path) -> None:
    stream = io.StringIO()
    log_file = tmp_path / "logs" / "service.log"
    configure_logging(log_file, stream=stream)

    logging.getLogger("transaction_analytics.test").info("hello")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "| INFO | transaction_analytics.test | hello" in stream.getvalue()
    assert "hello" in log_file.read_text(encoding="utf-8")
    configure_logging(None)
