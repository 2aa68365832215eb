"""SQLModel database engine and session management."""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from ledger.config import settings

logger = logging.getLogger(__name__)


def make_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Build an engine for the given URL."""
    # SQLite needs check_same_thread=False; PostgreSQL does not
    connect_args = kwargs.pop("connect_args", {})
    if database_url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
    return create_engine(database_url, echo=echo, connect_args=connect_args, **kwargs)


engine = make_engine(settings.database_url, echo=settings.echo_sql)


def create_db_and_tables(bind: Engine | None = None):
    """Create all tables. Called on startup."""
    # Import models so metadata is populated
    import ledger.models  # noqa: F401

    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    logger.debug(f"Ensured ledger tables on {bind.url.render_as_string(hide_password=True)}")
