"""Trade model: one recorded position with the P/L the caller computed."""

from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class Trade(SQLModel, table=True):
    __tablename__ = "trade"
    # Never hand out an id again once its row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    date: datetime = Field(index=True)
    pair: str = Field(index=True)  # e.g. "BTC/USDT"
    side: str  # "Long" or "Short"
    entry: float
    exit: float
    size: float
    leverage: float = 1.0
    take_profit: float | None = None
    stop_loss: float | None = None
    notes: str = ""
    screenshot: str | None = None  # data URI or URL, never inspected

    # Stored as given by the caller, never recomputed
    profit: float = Field(default=0.0, index=True)
    roi: float = 0.0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
