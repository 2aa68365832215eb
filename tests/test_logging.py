"""Tests for the root logging setup."""

import logging

import pytest

from ledger.config import settings
from ledger.utils.logging import LOG_FORMAT, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = [h for h in saved_handlers if not getattr(h, "_ledger_handler", False)]
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _ledger_handlers(root):
    return [h for h in root.handlers if getattr(h, "_ledger_handler", False)]


def test_setup_logging_adds_one_handler(root_logger):
    before = len(root_logger.handlers)

    setup_logging("debug")
    setup_logging("warning")

    assert len(root_logger.handlers) == before + 1
    handlers = _ledger_handlers(root_logger)
    assert len(handlers) == 1
    assert handlers[0].formatter._fmt == LOG_FORMAT


def test_second_call_only_changes_level(root_logger):
    setup_logging("debug")
    assert root_logger.level == logging.DEBUG
    handler = _ledger_handlers(root_logger)[0]

    setup_logging("error")
    assert root_logger.level == logging.ERROR
    assert _ledger_handlers(root_logger) == [handler]


def test_level_defaults_to_settings(root_logger, monkeypatch):
    monkeypatch.setattr(settings, "log_level", "warning")
    setup_logging()
    assert root_logger.level == logging.WARNING
