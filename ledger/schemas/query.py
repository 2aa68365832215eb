"""Pydantic schemas for trade list queries."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ledger.config import settings
from ledger.schemas.trade import TradeRead
from ledger.utils.constants import ALL_PAIRS


class QueryCriteria(BaseModel):
    search: str = ""
    pair: str = ALL_PAIRS
    status: Literal["all", "win", "loss"] = "all"
    # Kept raw; a bound that does not parse excludes every record
    start_date: datetime | str | None = None
    end_date: datetime | str | None = None
    sort_by: Literal["date", "pair", "profit"] = "date"
    sort_dir: Literal["asc", "desc"] = "desc"
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default_factory=lambda: settings.default_page_size, gt=0)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    @field_validator("search", mode="before")
    @classmethod
    def _search_default(cls, value):
        return "" if value is None else value

    @field_validator("pair", mode="before")
    @classmethod
    def _pair_default(cls, value):
        return ALL_PAIRS if value is None or value == "" else value


class QueryResult(BaseModel):
    items: tuple[TradeRead, ...] = ()
    total: int = 0

    model_config = ConfigDict(frozen=True)
