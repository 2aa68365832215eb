"""Database models."""

from ledger.models.trade import Trade
from ledger.models.meta import MetaEntry

__all__ = [
    "Trade",
    "MetaEntry",
]
