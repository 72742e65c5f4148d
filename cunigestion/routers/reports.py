from __future__ import annotations

import json

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from ..aggregator import build_export, compute_report, export_filename
from ..database import get_store
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/reports", tags=["reports"])


def _report(store: RecordStore, period: schemas.Period) -> schemas.Report:
    return compute_report(
        store.rabbits.list(),
        store.finances.list(),
        store.stocks.list(),
        period,
        store.clock(),
    )


@router.get("/summary", response_model=schemas.Report)
def report_summary(
    period: schemas.Period = Query(default=schemas.Period.THIS_MONTH),
    store: RecordStore = Depends(get_store),
):
    return _report(store, period)


@router.get("/export")
def report_export(
    period: schemas.Period = Query(default=schemas.Period.THIS_MONTH),
    store: RecordStore = Depends(get_store),
):
    generated_at = store.clock()
    document = build_export(_report(store, period), generated_at, store.get_language())

    return Response(
        content=json.dumps(document, indent=2, ensure_ascii=False),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename={export_filename(generated_at)}"},
    )
