"""Shared fixtures: an in-memory ledger and trade factories."""

import itertools
from datetime import datetime, timezone

import pytest
from sqlalchemy.pool import StaticPool

from ledger.database import create_db_and_tables, make_engine
from ledger.schemas.trade import TradeRead
from ledger.services.store import LedgerStore


@pytest.fixture
def engine():
    # StaticPool keeps the single in-memory database alive across sessions
    engine = make_engine("sqlite://", poolclass=StaticPool)
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> LedgerStore:
    return LedgerStore(engine)


@pytest.fixture
def trade_data():
    """Factory for valid create payloads."""

    def _make(**overrides) -> dict:
        data = {
            "date": "2024-03-01T10:00:00Z",
            "pair": "BTC/USDT",
            "side": "Long",
            "entry": 100.0,
            "exit": 110.0,
            "size": 1.0,
            "leverage": 1.0,
            "notes": "",
            "profit": 10.0,
            "roi": 10.0,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_record():
    """Factory for snapshot records with sequential ids.

    ``raw=True`` skips validation so malformed legacy values (e.g. a date
    string that does not parse) can be fed to the pure functions.
    """
    ids = itertools.count(1)
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(raw: bool = False, **overrides) -> TradeRead:
        data = {
            "id": next(ids),
            "date": datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc),
            "pair": "BTC/USDT",
            "side": "Long",
            "entry": 100.0,
            "exit": 110.0,
            "size": 1.0,
            "leverage": 1.0,
            "take_profit": None,
            "stop_loss": None,
            "notes": "",
            "screenshot": None,
            "profit": 10.0,
            "roi": 10.0,
            "created_at": stamp,
            "updated_at": stamp,
        }
        data.update(overrides)
        if raw:
            return TradeRead.model_construct(**data)
        return TradeRead(**data)

    return _make
