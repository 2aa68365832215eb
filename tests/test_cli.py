"""Tests for the CLI commands."""

import pytest

from ledger import cli


@pytest.fixture(autouse=True)
def _no_root_handler(monkeypatch):
    # Leave logging to pytest instead of attaching a handler to a captured stream
    monkeypatch.setattr(cli, "setup_logging", lambda: None)


def test_no_command_prints_usage(capsys):
    with pytest.raises(SystemExit):
        cli.main([])
    assert "Usage" in capsys.readouterr().out


def test_unknown_command(capsys, store):
    with pytest.raises(SystemExit):
        cli.main(["frobnicate"], store=store)
    assert "Unknown command: frobnicate" in capsys.readouterr().out


def test_add_trade_computes_profit(monkeypatch, capsys, store):
    answers = iter([
        "2024-03-01T10:00",  # date
        "ETH/USDT",          # pair
        "short",             # side
        "2000",              # entry
        "1900",              # exit
        "0.5",               # size
        "2",                 # leverage
        "",                  # take profit
        "2100",              # stop loss
        "fade the pump",     # notes
    ])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))

    cli.main(["add-trade"], store=store)

    (trade,) = store.list_all()
    assert trade.side == "Short"
    assert trade.profit == 100.0
    assert trade.roi == 10.0
    assert trade.take_profit is None
    assert trade.stop_loss == 2100.0
    assert "P/L: +100.00" in capsys.readouterr().out


def test_add_trade_rejects_bad_number(monkeypatch, store):
    answers = iter(["", "BTC/USDT", "Long", "abc"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))
    with pytest.raises(SystemExit):
        cli.main(["add-trade"], store=store)
    assert store.list_all() == ()


def test_export_to_file(tmp_path, store, trade_data):
    store.create(trade_data(notes="exported"))
    target = tmp_path / "trades.csv"

    cli.main(["export-csv", str(target)], store=store)

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("id,date,pair")
    assert '"exported"' in lines[1]


def test_export_to_stdout(capsys, store, trade_data):
    store.create(trade_data())
    cli.main(["export-csv"], store=store)
    assert capsys.readouterr().out.startswith("id,date,pair")


def test_stats_and_pairs(capsys, store, trade_data):
    store.create(trade_data(pair="BTC/USDT", profit=100.0))
    store.create(trade_data(pair="ETH/USDT", profit=-20.0))

    cli.main(["stats"], store=store)
    out = capsys.readouterr().out
    assert "Total trades: 2" in out
    assert "Win rate:     50.00%" in out
    assert "2024-03-01  +80.00" in out

    cli.main(["pairs"], store=store)
    assert capsys.readouterr().out.split() == ["BTC/USDT", "ETH/USDT"]
