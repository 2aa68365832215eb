"""Logging setup for the API and CLI."""

import logging
import sys

from ledger.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str | None = None):
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    if any(getattr(h, "_ledger_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ledger_handler = True
    root.addHandler(handler)
