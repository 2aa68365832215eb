"""Profit and ROI calculator for trade entry forms.

The store never calls this: profit/roi are computed once by the caller and
stored as given, so older records keep whatever formula produced them.
"""

from ledger.schemas.trade import Side
from ledger.utils.rounding import round2


def calculate_pnl(
    side: Side | str,
    entry: float,
    exit: float,
    size: float,
    leverage: float | None = 1.0,
) -> tuple[float, float]:
    """Return ``(profit, roi_pct)`` rounded to 2 decimals.

    profit = (exit - entry) * size * leverage, sign flipped for shorts.
    roi is profit relative to the unlevered notional ``entry * size``.
    """
    direction = 1 if Side(side) == Side.LONG else -1
    lev = 1.0 if leverage is None else leverage
    profit = (exit - entry) * size * lev * direction
    notional = entry * size
    roi = profit / notional * 100 if notional != 0 else 0.0
    return round2(profit), round2(roi)
