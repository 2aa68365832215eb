"""Shared API dependencies."""

from functools import lru_cache

from ledger.services.store import LedgerStore


@lru_cache(maxsize=1)
def get_store() -> LedgerStore:
    """One store per process so every request shares its writer lock."""
    return LedgerStore()
