"""CLI tool for ledger operations.

Usage:
    python -m ledger.cli add-trade
    python -m ledger.cli export-csv [path]
    python -m ledger.cli stats
    python -m ledger.cli pairs
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

from ledger.database import create_db_and_tables
from ledger.errors import LedgerError
from ledger.services.pnl import calculate_pnl
from ledger.services.store import LedgerStore
from ledger.utils.constants import SIDES
from ledger.utils.logging import setup_logging

COMMANDS = ["add-trade", "export-csv", "stats", "pairs"]


def _prompt(label: str, default: str = "") -> str:
    suffix = f" [{default}]" if default else ""
    value = input(f"{label}{suffix}: ").strip()
    return value or default


def _prompt_float(label: str, default: str = "", optional: bool = False) -> float | None:
    raw = _prompt(label, default)
    if not raw and optional:
        return None
    try:
        return float(raw)
    except ValueError:
        print(f"{label} must be a number.")
        sys.exit(1)


def add_trade(store: LedgerStore):
    """Record a trade interactively; profit and ROI are computed here."""
    now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M")
    date = _prompt("Date (UTC, ISO 8601)", now)
    pair = _prompt("Pair (e.g. BTC/USDT)")
    if not pair:
        print("Pair cannot be empty.")
        sys.exit(1)
    side = _prompt("Side (Long/Short)", "Long").capitalize()
    if side not in SIDES:
        print("Side must be Long or Short.")
        sys.exit(1)
    entry = _prompt_float("Entry price")
    exit_price = _prompt_float("Exit price")
    size = _prompt_float("Position size")
    leverage = _prompt_float("Leverage", "1")
    take_profit = _prompt_float("Take profit (optional)", optional=True)
    stop_loss = _prompt_float("Stop loss (optional)", optional=True)
    notes = _prompt("Notes")

    profit, roi = calculate_pnl(side, entry, exit_price, size, leverage)
    trade = store.create(
        {
            "date": date,
            "pair": pair,
            "side": side,
            "entry": entry,
            "exit": exit_price,
            "size": size,
            "leverage": leverage,
            "take_profit": take_profit,
            "stop_loss": stop_loss,
            "notes": notes,
            "profit": profit,
            "roi": roi,
        }
    )
    print(f"\nTrade {trade.id} saved. P/L: {profit:+.2f} | ROI: {roi:.2f}%")


def export_csv(store: LedgerStore, path: str | None = None):
    csv_text = store.export_csv()
    if path is None:
        print(csv_text)
        return
    Path(path).write_text(csv_text + "\n", encoding="utf-8")
    print(f"Exported {len(store.list_all())} trades to {path}")


def show_stats(store: LedgerStore):
    stats = store.stats()
    print(f"Total trades: {stats.total_trades}")
    print(f"Win rate:     {stats.win_rate:.2f}%")
    print(f"Total P/L:    {stats.total_pl:+.2f}")
    print(f"Avg ROI:      {stats.avg_roi:.2f}%")
    print(f"Best pair:    {stats.best_pair or '-'}")
    print(f"Worst pair:   {stats.worst_pair or '-'}")
    if stats.timeline:
        print("\nDaily P/L:")
        for point in stats.timeline:
            print(f"  {point.date}  {point.profit:+.2f}")


def show_pairs(store: LedgerStore):
    for pair in store.list_pairs():
        print(pair)


def main(argv: list[str] | None = None, store: LedgerStore | None = None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: python -m ledger.cli <command>")
        print(f"Commands: {', '.join(COMMANDS)}")
        sys.exit(1)

    command = args[0]
    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        sys.exit(1)

    setup_logging()
    if store is None:
        create_db_and_tables()
        store = LedgerStore()

    try:
        if command == "add-trade":
            add_trade(store)
        elif command == "export-csv":
            export_csv(store, args[1] if len(args) > 1 else None)
        elif command == "stats":
            show_stats(store)
        elif command == "pairs":
            show_pairs(store)
    except LedgerError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
