"""Query engine: filter, stable sort and paginate a trade snapshot.

Pure functions over already-fetched records; nothing here touches the
database or mutates its input.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from operator import attrgetter, itemgetter

from pydantic import ValidationError as PydanticValidationError

from ledger.errors import ValidationError
from ledger.schemas.query import QueryCriteria, QueryResult
from ledger.schemas.trade import TradeRead
from ledger.utils.constants import ALL_PAIRS
from ledger.utils.timeutils import parse_timestamp

logger = logging.getLogger(__name__)


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _bound_active(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def build_criteria(criteria: QueryCriteria | Mapping | None = None, **overrides) -> QueryCriteria:
    """Validate query criteria given as a model, a mapping or keyword overrides."""
    if isinstance(criteria, QueryCriteria) and not overrides:
        return criteria
    if isinstance(criteria, QueryCriteria):
        data = criteria.model_dump()
    else:
        data = dict(criteria or {})
    data.update(overrides)
    try:
        return QueryCriteria.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


def filter_trades(records: Iterable[TradeRead], criteria: QueryCriteria) -> list[TradeRead]:
    """Keep records that satisfy every active predicate."""
    needle = criteria.search.strip().lower()
    check_start = _bound_active(criteria.start_date)
    check_end = _bound_active(criteria.end_date)
    start = parse_timestamp(criteria.start_date) if check_start else None
    end = parse_timestamp(criteria.end_date) if check_end else None

    matched = []
    for trade in records:
        if needle:
            haystack = f"{_text(trade.pair)} {_text(trade.notes)} {_text(trade.side)}".lower()
            if needle not in haystack:
                continue
        if criteria.pair != ALL_PAIRS and trade.pair != criteria.pair:
            continue
        # Zero profit counts as a loss
        if criteria.status == "win" and not trade.profit > 0:
            continue
        if criteria.status == "loss" and trade.profit > 0:
            continue
        if check_start or check_end:
            when = parse_timestamp(trade.date)
            if when is None:
                continue
            if check_start and (start is None or when < start):
                continue
            if check_end and (end is None or when > end):
                continue
        matched.append(trade)
    return matched


def sort_trades(records: Sequence[TradeRead], sort_by: str = "date", sort_dir: str = "desc") -> list[TradeRead]:
    """Stable sort; equal keys keep their input order in both directions."""
    reverse = sort_dir == "desc"
    if sort_by != "date":
        return sorted(records, key=attrgetter(sort_by), reverse=reverse)

    dated = []
    undated = []
    for trade in records:
        when = parse_timestamp(trade.date)
        if when is None:
            undated.append(trade)
        else:
            dated.append((when, trade))
    ordered = [trade for _, trade in sorted(dated, key=itemgetter(0), reverse=reverse)]
    # Unparseable dates always trail
    return ordered + undated


def query(records: Sequence[TradeRead], criteria: QueryCriteria | Mapping | None = None, **overrides) -> QueryResult:
    """Filter, sort, then slice one page out of ``records``.

    ``total`` counts the filtered records before slicing. A page past the end
    yields no items rather than an error.
    """
    criteria = build_criteria(criteria, **overrides)

    filtered = filter_trades(records, criteria)
    ordered = sort_trades(filtered, criteria.sort_by, criteria.sort_dir)

    total = len(ordered)
    start = (criteria.page - 1) * criteria.page_size
    items = tuple(ordered[start:start + criteria.page_size])

    logger.debug(
        f"Query matched {total} of {len(records)} trades, "
        f"page {criteria.page} returned {len(items)}"
    )
    return QueryResult(items=items, total=total)


def known_pairs(records: Iterable[TradeRead]) -> list[str]:
    """Distinct non-empty pairs in the order they first appear."""
    seen: dict[str, None] = {}
    for trade in records:
        if trade.pair:
            seen.setdefault(trade.pair, None)
    return list(seen)
