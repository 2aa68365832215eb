"""Trade ledger API."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from pydantic import BaseModel, Field

from ledger.api.deps import get_store
from ledger.schemas.query import QueryResult
from ledger.schemas.trade import Side, TradeCreate, TradeRead
from ledger.services.pnl import calculate_pnl
from ledger.services.store import LedgerStore
from ledger.utils.constants import ALL_PAIRS

router = APIRouter(prefix="/api/trades", tags=["trades"])


class PnlRequest(BaseModel):
    side: Side = Side.LONG
    entry: float = Field(gt=0)
    exit: float = Field(gt=0)
    size: float = Field(gt=0)
    leverage: float = Field(default=1.0, gt=0)


@router.get("", response_model=QueryResult)
def list_trades(
    search: str = "",
    pair: str = ALL_PAIRS,
    status: str = "all",
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    sort_by: str = Query(default="date", alias="sortBy"),
    sort_dir: str = Query(default="desc", alias="sortDir"),
    page: int = 1,
    page_size: int | None = Query(default=None, alias="pageSize"),
    store: LedgerStore = Depends(get_store),
):
    criteria = {
        "search": search,
        "pair": pair,
        "status": status,
        "start_date": start_date,
        "end_date": end_date,
        "sort_by": sort_by,
        "sort_dir": sort_dir,
        "page": page,
    }
    if page_size is not None:
        criteria["page_size"] = page_size
    return store.query(criteria)


@router.get("/pairs", response_model=list[str])
def list_pairs(store: LedgerStore = Depends(get_store)):
    """Every pair that appears in the ledger."""
    return store.list_pairs()


@router.get("/export")
def export_trades(store: LedgerStore = Depends(get_store)):
    return Response(
        content=store.export_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="trades.csv"'},
    )


@router.post("/calculate")
def calculate(data: PnlRequest):
    """Profit/ROI preview for a trade that has not been saved yet."""
    profit, roi = calculate_pnl(data.side, data.entry, data.exit, data.size, data.leverage)
    return {"profit": profit, "roi": roi}


@router.get("/{trade_id}", response_model=TradeRead)
def get_trade(trade_id: int, store: LedgerStore = Depends(get_store)):
    trade = store.get(trade_id)
    if not trade:
        raise HTTPException(status_code=404, detail="Trade not found")
    return trade


@router.post("", response_model=TradeRead, status_code=201)
def create_trade(data: TradeCreate, store: LedgerStore = Depends(get_store)):
    return store.create(data)


@router.put("/{trade_id}", response_model=TradeRead)
def update_trade(
    trade_id: int,
    patch: dict[str, Any] = Body(...),
    store: LedgerStore = Depends(get_store),
):
    return store.update(trade_id, patch)


@router.delete("/{trade_id}", status_code=204)
def delete_trade(trade_id: int, store: LedgerStore = Depends(get_store)):
    store.delete(trade_id)
