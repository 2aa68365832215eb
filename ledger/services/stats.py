"""Portfolio statistics over a trade snapshot.

Everything is recomputed from scratch on each call; ledgers hold thousands
of trades, not millions.
"""

import logging
from collections.abc import Sequence

import pandas as pd

from ledger.schemas.stats import Stats, TimelinePoint
from ledger.schemas.trade import TradeRead
from ledger.utils.rounding import round2
from ledger.utils.timeutils import parse_timestamp

logger = logging.getLogger(__name__)


def _day_key(value) -> str | None:
    when = parse_timestamp(value)
    if when is None:
        return None
    return when.date().isoformat()


def _to_frame(records: Sequence[TradeRead]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "pair": [t.pair or None for t in records],
            "profit": [float(t.profit or 0) for t in records],
            "roi": [float(t.roi or 0) for t in records],
            "day": [_day_key(t.date) for t in records],
        }
    )


def compute_stats(records: Sequence[TradeRead]) -> Stats:
    """Summary figures, best/worst pair and the per-day profit series."""
    if not records:
        return Stats()

    frame = _to_frame(records)
    total = len(frame)
    wins = int((frame["profit"] > 0).sum())

    # sort=False keeps first-seen order, so idxmax/idxmin ties go to the earliest pair
    by_pair = frame.dropna(subset=["pair"]).groupby("pair", sort=False)["profit"].sum()
    best_pair = str(by_pair.idxmax()) if not by_pair.empty else None
    worst_pair = str(by_pair.idxmin()) if not by_pair.empty else None

    # Trades with an unparseable date still count everywhere except the timeline
    by_day = frame.dropna(subset=["day"]).groupby("day", sort=True)["profit"].sum()
    timeline = tuple(
        TimelinePoint(date=day, profit=float(profit)) for day, profit in by_day.items()
    )

    skipped = total - int(frame["day"].notna().sum())
    if skipped:
        logger.debug(f"{skipped} trade(s) without a parseable date left out of the timeline")

    return Stats(
        total_trades=total,
        win_rate=round2(wins / total * 100),
        total_pl=round2(float(frame["profit"].sum())),
        avg_roi=round2(float(frame["roi"].mean())),
        best_pair=best_pair,
        worst_pair=worst_pair,
        timeline=timeline,
    )
