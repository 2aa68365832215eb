"""Pydantic schemas for Trade records."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ledger.utils.timeutils import ensure_utc, parse_timestamp


class Side(str, Enum):
    LONG = "Long"
    SHORT = "Short"


def _coerce_timestamp(value):
    if isinstance(value, str):
        parsed = parse_timestamp(value)
        if parsed is None:
            raise ValueError("must be an ISO 8601 timestamp")
        return parsed
    return value


class TradeCreate(BaseModel):
    date: datetime
    pair: str = Field(min_length=1, max_length=64)
    side: Side = Field(default=Side.LONG, validate_default=True)
    entry: float = Field(gt=0, allow_inf_nan=False)
    exit: float = Field(gt=0, allow_inf_nan=False)
    size: float = Field(gt=0, allow_inf_nan=False)
    leverage: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    take_profit: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    stop_loss: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    notes: str = ""
    screenshot: str | None = None
    profit: float = Field(default=0.0, allow_inf_nan=False)
    roi: float = Field(default=0.0, allow_inf_nan=False)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="forbid",
    )

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return _coerce_timestamp(value)

    @field_validator("date")
    @classmethod
    def _date_to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @field_validator("pair", mode="before")
    @classmethod
    def _trim_pair(cls, value):
        if isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("must not be empty")
            return text
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def _notes_default(cls, value):
        return "" if value is None else value

    @field_validator("leverage", mode="before")
    @classmethod
    def _leverage_default(cls, value):
        return 1.0 if value is None else value


class TradeUpdate(BaseModel):
    """Partial update. Only fields that were explicitly set are merged."""

    date: datetime | None = None
    pair: str | None = Field(default=None, min_length=1, max_length=64)
    side: Side | None = None
    entry: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    exit: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    size: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    leverage: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    take_profit: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    stop_loss: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    notes: str | None = None
    screenshot: str | None = None
    profit: float | None = Field(default=None, allow_inf_nan=False)
    roi: float | None = Field(default=None, allow_inf_nan=False)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="forbid",
    )

    @field_validator("date", mode="before")
    @classmethod
    def _parse_optional_date(cls, value):
        return _coerce_timestamp(value)

    @field_validator("date")
    @classmethod
    def _optional_date_to_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return ensure_utc(value)

    @field_validator("pair", mode="before")
    @classmethod
    def _trim_optional_pair(cls, value):
        if isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("must not be empty")
            return text
        return value

    # A cleared leverage falls back to 1x rather than failing the merge
    @field_validator("leverage", mode="before")
    @classmethod
    def _optional_leverage_default(cls, value):
        return 1.0 if value is None else value


class TradeRead(BaseModel):
    """Immutable snapshot of a stored trade."""

    id: int
    date: datetime
    pair: str
    side: Side
    entry: float
    exit: float
    size: float
    leverage: float
    take_profit: float | None = None
    stop_loss: float | None = None
    notes: str = ""
    screenshot: str | None = None
    profit: float
    roi: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        frozen=True,
    )

    @field_validator("date", "created_at", "updated_at")
    @classmethod
    def _timestamps_to_utc(cls, value: datetime) -> datetime:
        # SQLite hands datetimes back without tzinfo
        return ensure_utc(value)

    @property
    def is_win(self) -> bool:
        return self.profit > 0
