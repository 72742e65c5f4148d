from __future__ import annotations

# Run with:
#   python -m uvicorn cunigestion.main:app --reload

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .errors import StorageFault
from .logging_config import setup_logging
from .routers import dashboard, finances, health_events, preferences, rabbits, reports, reproductions, stocks
from .store import RecordStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    store = RecordStore(config.DATABASE_URL).open()
    app.state.store = store
    try:
        yield
    finally:
        store.close()


app = FastAPI(title="CuniGestion", lifespan=lifespan)


@app.exception_handler(StorageFault)
async def storage_fault_handler(request: Request, exc: StorageFault):
    logger.error("Storage fault on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})


# -----------------------------
# API ROUTERS
# -----------------------------
app.include_router(rabbits.router)
app.include_router(stocks.router)
app.include_router(finances.router)
app.include_router(reproductions.router)
app.include_router(health_events.router)
app.include_router(dashboard.router)
app.include_router(reports.router)
app.include_router(preferences.router)


@app.get("/")
def root():
    return {"status": "ok", "dashboard": "/dashboard/kpis"}
