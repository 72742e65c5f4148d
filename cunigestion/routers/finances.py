from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..database import get_store
from ..errors import NotFoundError, ValidationError
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/finances", tags=["finances"])


@router.get("/", response_model=list[schemas.FinanceTransaction])
def list_finances(
    kind: schemas.FinanceKind | None = Query(default=None),
    store: RecordStore = Depends(get_store),
):
    finances = store.finances.list()
    if kind:
        finances = [f for f in finances if f.kind == kind]
    return sorted(finances, key=lambda f: f.date, reverse=True)


@router.get("/totals", response_model=schemas.FinanceTotals)
def finance_totals(store: RecordStore = Depends(get_store)):
    finances = store.finances.list()
    sales = sum(f.amount for f in finances if f.kind == schemas.FinanceKind.SALE)
    purchases = sum(f.amount for f in finances if f.kind == schemas.FinanceKind.PURCHASE)
    return schemas.FinanceTotals(sales=sales, purchases=purchases, balance=sales - purchases)


@router.post("/", response_model=schemas.FinanceTransaction)
def create_finance(payload: schemas.FinanceCreate, store: RecordStore = Depends(get_store)):
    finance_id = store.finances.append(payload)
    return store.finances.get(finance_id)


@router.patch("/{finance_id}", response_model=schemas.FinanceTransaction)
def update_finance(
    finance_id: int,
    payload: schemas.FinanceUpdate,
    store: RecordStore = Depends(get_store),
):
    try:
        return store.finances.replace(finance_id, payload)
    except NotFoundError:
        raise HTTPException(404, "Transaction not found")
    except ValidationError as exc:
        raise HTTPException(400, str(exc))


@router.delete("/{finance_id}", status_code=204)
def delete_finance(finance_id: int, store: RecordStore = Depends(get_store)):
    try:
        store.finances.remove(finance_id)
    except NotFoundError:
        raise HTTPException(404, "Transaction not found")
