"""Pydantic schemas for portfolio statistics."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TimelinePoint(BaseModel):
    date: str  # "YYYY-MM-DD", UTC calendar day
    profit: float

    model_config = ConfigDict(frozen=True)


class Stats(BaseModel):
    total_trades: int = 0
    win_rate: float = 0.0
    total_pl: float = Field(default=0.0, alias="totalPL")
    avg_roi: float = Field(default=0.0, alias="avgROI")
    best_pair: str | None = None
    worst_pair: str | None = None
    timeline: tuple[TimelinePoint, ...] = ()

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
