"""CSV export of a trade snapshot."""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from ledger.schemas.trade import TradeRead
from ledger.utils.constants import CSV_COLUMNS
from ledger.utils.timeutils import ensure_utc

HEADER = ",".join(CSV_COLUMNS)


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def format_cell(value) -> str:
    """Render one field: text quoted, numbers bare, None empty."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, datetime):
        return _quote(ensure_utc(value).isoformat())
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def export_csv(records: Iterable[TradeRead]) -> str:
    """Header line then one row per record, in the order given."""
    lines = [HEADER]
    for trade in records:
        lines.append(",".join(format_cell(getattr(trade, attr, None)) for attr in CSV_COLUMNS.values()))
    return "\n".join(lines)
