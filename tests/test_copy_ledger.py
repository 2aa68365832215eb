"""Tests for scripts/copy_ledger.py."""

import importlib.util
from pathlib import Path

from ledger.database import create_db_and_tables, make_engine
from ledger.services.store import LedgerStore

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "copy_ledger.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("copy_ledger", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _file_store(path: Path) -> LedgerStore:
    engine = make_engine(f"sqlite:///{path}")
    create_db_and_tables(engine)
    return LedgerStore(engine)


def test_copy_between_sqlite_files(tmp_path, trade_data):
    source = _file_store(tmp_path / "source.db")
    source.create(trade_data(pair="BTC/USDT", notes="one"))
    doomed = source.create(trade_data(pair="ETH/USDT"))
    source.create(trade_data(pair="SOL/USDT", take_profit=150.0))
    source.delete(doomed.id)
    source.meta_set("session", {"role": "admin"})

    target_path = tmp_path / "target.db"
    copied = _load_script().copy_ledger(
        f"sqlite:///{tmp_path / 'source.db'}", f"sqlite:///{target_path}"
    )
    assert copied == {"trade": 2, "meta": 1}

    target = _file_store(target_path)
    assert target.list_all() == source.list_all()
    assert target.meta_get("session") == {"role": "admin"}

    # New ids continue above the copied ones
    fresh = target.create(trade_data())
    assert fresh.id > max(t.id for t in source.list_all())

    source.engine.dispose()
    target.engine.dispose()


def test_copy_replaces_existing_target_rows(tmp_path, trade_data):
    source = _file_store(tmp_path / "source.db")
    source.create(trade_data(pair="BTC/USDT"))

    target = _file_store(tmp_path / "target.db")
    target.create(trade_data(pair="OLD/USDT"))
    target.create(trade_data(pair="OLD/USDT"))

    _load_script().copy_ledger(
        f"sqlite:///{tmp_path / 'source.db'}", f"sqlite:///{tmp_path / 'target.db'}"
    )
    assert [t.pair for t in target.list_all()] == ["BTC/USDT"]

    source.engine.dispose()
    target.engine.dispose()
