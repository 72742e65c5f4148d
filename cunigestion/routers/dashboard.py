from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from ..aggregator import compute_kpis
from ..database import get_store
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/kpis", response_model=schemas.KPIs)
def dashboard_kpis(
    as_of: date | None = Query(default=None),
    store: RecordStore = Depends(get_store),
):
    return compute_kpis(
        store.rabbits.list(),
        store.finances.list(),
        store.stocks.list(),
        as_of or store.clock(),
    )

