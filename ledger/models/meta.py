"""MetaEntry model: free-form settings keyed by string."""

from typing import Any

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON


class MetaEntry(SQLModel, table=True):
    __tablename__ = "meta"

    key: str = Field(primary_key=True)
    value: Any = Field(default=None, sa_column=Column(JSON))
