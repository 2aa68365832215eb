"""Record store: durable trades and metadata behind SQLModel sessions.

Every mutating call is one transaction on one table. Writers in this process
are serialised by a lock so a read-modify-write (``update``) never interleaves
with another writer; reads take no lock and see the last committed state.
"""

import json
import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ledger import database
from ledger.errors import NotFoundError, StorageError, ValidationError
from ledger.models.meta import MetaEntry
from ledger.models.trade import Trade
from ledger.schemas.query import QueryCriteria, QueryResult
from ledger.schemas.stats import Stats
from ledger.schemas.trade import TradeCreate, TradeRead, TradeUpdate
from ledger.services.export import export_csv
from ledger.services.query import known_pairs, query
from ledger.services.stats import compute_stats
from ledger.utils.constants import ENGINE_MANAGED_FIELDS

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate_create(data: TradeCreate | Mapping) -> TradeCreate:
    if isinstance(data, TradeCreate):
        return data
    try:
        return TradeCreate.model_validate(dict(data))
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


def _validate_patch(patch: TradeUpdate | Mapping) -> dict[str, Any]:
    if isinstance(patch, TradeUpdate):
        return patch.model_dump(exclude_unset=True)
    # id and the engine timestamps are silently dropped, anything else unknown is rejected
    cleaned = {k: v for k, v in dict(patch).items() if k not in ENGINE_MANAGED_FIELDS}
    try:
        return TradeUpdate.model_validate(cleaned).model_dump(exclude_unset=True)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


class LedgerStore:
    """Trade and metadata persistence."""

    def __init__(self, engine: Engine | None = None):
        self.engine = engine or database.engine
        self._write_lock = threading.Lock()

    @contextmanager
    def _transaction(self, write: bool = False) -> Iterator[Session]:
        """Session that commits on success and rolls back on any error.

        Database failures surface as StorageError; ledger errors raised by the
        body pass through unchanged after the rollback.
        """
        lock = self._write_lock if write else None
        if lock:
            lock.acquire()
        try:
            with Session(self.engine, expire_on_commit=False) as session:
                try:
                    yield session
                    if write:
                        session.commit()
                except SQLAlchemyError as e:
                    session.rollback()
                    logger.error(f"Ledger transaction failed: {e}")
                    raise StorageError(str(e)) from e
                except Exception:
                    session.rollback()
                    raise
        finally:
            if lock:
                lock.release()

    # ------------------------------------------------------------------
    # Trades
    # ------------------------------------------------------------------

    def create(self, data: TradeCreate | Mapping) -> TradeRead:
        """Persist a new trade and return it with its id and timestamps."""
        payload = _validate_create(data).model_dump()
        now = _utcnow()
        with self._transaction(write=True) as session:
            trade = Trade(**payload, created_at=now, updated_at=now)
            session.add(trade)
            session.flush()
            record = TradeRead.model_validate(trade)
        logger.info(f"Created trade {record.id} ({record.pair} {record.side})")
        return record

    def update(self, trade_id: int, patch: TradeUpdate | Mapping) -> TradeRead:
        """Shallow-merge ``patch`` over the stored trade.

        Raises NotFoundError when the id is unknown and ValidationError when
        the merged record would be invalid; nothing is written in either case.
        """
        changes = _validate_patch(patch)
        with self._transaction(write=True) as session:
            trade = session.exec(
                select(Trade).where(Trade.id == trade_id).with_for_update()
            ).first()
            if trade is None:
                raise NotFoundError(trade_id)

            # Validate the full merged record so a patch cannot null out required fields
            current = TradeRead.model_validate(trade).model_dump(exclude=set(ENGINE_MANAGED_FIELDS))
            merged = _validate_create({**current, **changes}).model_dump()

            for key, value in merged.items():
                setattr(trade, key, value)
            trade.updated_at = _utcnow()
            session.add(trade)
            session.flush()
            record = TradeRead.model_validate(trade)
        logger.info(f"Updated trade {trade_id}: {', '.join(sorted(changes)) or 'no fields'}")
        return record

    def delete(self, trade_id: int) -> None:
        """Remove a trade. Unknown ids are ignored."""
        with self._transaction(write=True) as session:
            trade = session.get(Trade, trade_id)
            if trade is None:
                logger.debug(f"Delete of unknown trade {trade_id} ignored")
                return
            session.delete(trade)
        logger.info(f"Deleted trade {trade_id}")

    def get(self, trade_id: int) -> TradeRead | None:
        with self._transaction() as session:
            trade = session.get(Trade, trade_id)
            return TradeRead.model_validate(trade) if trade else None

    def list_all(self) -> tuple[TradeRead, ...]:
        """Snapshot of every trade, ordered by id."""
        with self._transaction() as session:
            rows = session.exec(select(Trade).order_by(Trade.id)).all()
            return tuple(TradeRead.model_validate(t) for t in rows)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def meta_get(self, key: str) -> Any:
        with self._transaction() as session:
            entry = session.get(MetaEntry, key)
            return entry.value if entry else None

    def meta_set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``; None removes the key."""
        if value is not None:
            try:
                json.dumps(value)
            except (TypeError, ValueError) as e:
                raise ValidationError(f"Metadata value for {key!r} is not JSON serialisable: {e}") from e
        with self._transaction(write=True) as session:
            entry = session.get(MetaEntry, key)
            if value is None:
                if entry is not None:
                    session.delete(entry)
                return
            if entry is None:
                entry = MetaEntry(key=key, value=value)
            else:
                entry.value = value
            session.add(entry)

    # ------------------------------------------------------------------
    # Snapshot helpers
    # ------------------------------------------------------------------

    def list_pairs(self) -> list[str]:
        return known_pairs(self.list_all())

    def query(self, criteria: QueryCriteria | Mapping | None = None, **overrides) -> QueryResult:
        return query(self.list_all(), criteria, **overrides)

    def stats(self) -> Stats:
        return compute_stats(self.list_all())

    def export_csv(self) -> str:
        return export_csv(self.list_all())
