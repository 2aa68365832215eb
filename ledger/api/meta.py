"""Metadata API. Keys and values are opaque to the ledger."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ledger.api.deps import get_store
from ledger.services.store import LedgerStore

router = APIRouter(prefix="/api/meta", tags=["meta"])


class MetaValue(BaseModel):
    value: Any = None


@router.get("/{key}")
def get_meta(key: str, store: LedgerStore = Depends(get_store)):
    return {"key": key, "value": store.meta_get(key)}


@router.put("/{key}")
def set_meta(key: str, body: MetaValue, store: LedgerStore = Depends(get_store)):
    store.meta_set(key, body.value)
    return {"key": key, "value": body.value}


@router.delete("/{key}", status_code=204)
def delete_meta(key: str, store: LedgerStore = Depends(get_store)):
    store.meta_set(key, None)
