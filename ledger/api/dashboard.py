"""Dashboard API: summary stats and the daily P/L series."""

from fastapi import APIRouter, Depends

from ledger.api.deps import get_store
from ledger.schemas.stats import Stats
from ledger.services.store import LedgerStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=Stats)
def dashboard_summary(store: LedgerStore = Depends(get_store)):
    """Aggregated stats across every trade."""
    return store.stats()
