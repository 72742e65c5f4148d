from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..aggregator import low_stock_items
from ..database import get_store
from ..errors import NotFoundError, ValidationError
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/stocks", tags=["stocks"])


@router.get("/", response_model=list[schemas.StockOut])
def list_stocks(low_only: bool = False, store: RecordStore = Depends(get_store)):
    stocks = store.stocks.list()
    if low_only:
        return low_stock_items(stocks)
    return stocks


@router.get("/alerts", response_model=list[schemas.StockOut])
def stock_alerts(store: RecordStore = Depends(get_store)):
    return low_stock_items(store.stocks.list())


@router.post("/", response_model=schemas.StockOut)
def create_stock(payload: schemas.StockCreate, store: RecordStore = Depends(get_store)):
    stock_id = store.stocks.append(payload)
    return store.stocks.get(stock_id)


@router.get("/{stock_id}", response_model=schemas.StockOut)
def get_stock(stock_id: int, store: RecordStore = Depends(get_store)):
    try:
        return store.stocks.get(stock_id)
    except NotFoundError:
        raise HTTPException(404, "Stock item not found")


@router.patch("/{stock_id}", response_model=schemas.StockOut)
def update_stock(
    stock_id: int,
    payload: schemas.StockUpdate,
    store: RecordStore = Depends(get_store),
):
    try:
        return store.stocks.replace(stock_id, payload)
    except NotFoundError:
        raise HTTPException(404, "Stock item not found")
    except ValidationError as exc:
        raise HTTPException(400, str(exc))
