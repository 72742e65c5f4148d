from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..database import get_store
from ..errors import NotFoundError, ValidationError
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/health-events", tags=["health-events"])


@router.get("/", response_model=list[schemas.HealthEvent])
def list_health_events(store: RecordStore = Depends(get_store)):
    return sorted(store.health_events.list(), key=lambda e: e.start_date, reverse=True)


@router.post("/", response_model=schemas.HealthEvent)
def create_health_event(payload: schemas.HealthEventCreate, store: RecordStore = Depends(get_store)):
    event_id = store.health_events.append(payload)
    return store.health_events.get(event_id)


@router.patch("/{event_id}", response_model=schemas.HealthEvent)
def update_health_event(
    event_id: int,
    payload: schemas.HealthEventUpdate,
    store: RecordStore = Depends(get_store),
):
    try:
        return store.health_events.replace(event_id, payload)
    except NotFoundError:
        raise HTTPException(404, "Health event not found")
    except ValidationError as exc:
        raise HTTPException(400, str(exc))
