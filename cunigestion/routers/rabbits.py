from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from ..database import get_store
from ..errors import NotFoundError, ValidationError
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/rabbits", tags=["rabbits"])


def _get_or_404(store: RecordStore, rabbit_id: int) -> schemas.Rabbit:
    try:
        return store.rabbits.get(rabbit_id)
    except NotFoundError:
        raise HTTPException(404, "Rabbit not found")


@router.post("/", response_model=schemas.Rabbit)
def create_rabbit(payload: schemas.RabbitCreate, store: RecordStore = Depends(get_store)):
    rabbit_id = store.rabbits.append(payload)
    return store.rabbits.get(rabbit_id)


@router.get("/", response_model=list[schemas.Rabbit])
def list_rabbits(
    status: schemas.RabbitStatus | None = Query(default=None),
    search: str | None = Query(default=None),
    store: RecordStore = Depends(get_store),
):
    rabbits = store.rabbits.list()
    if search:
        needle = search.lower()
        rabbits = [
            r for r in rabbits
            if needle in r.name.lower() or needle in r.breed.lower()
        ]
    if status:
        rabbits = [r for r in rabbits if r.status == status]
    return rabbits


@router.get("/{rabbit_id}", response_model=schemas.Rabbit)
def get_rabbit(rabbit_id: int, store: RecordStore = Depends(get_store)):
    return _get_or_404(store, rabbit_id)


@router.patch("/{rabbit_id}", response_model=schemas.Rabbit)
def update_rabbit(
    rabbit_id: int,
    payload: schemas.RabbitUpdate,
    store: RecordStore = Depends(get_store),
):
    try:
        return store.rabbits.replace(rabbit_id, payload)
    except NotFoundError:
        raise HTTPException(404, "Rabbit not found")
    except ValidationError as exc:
        raise HTTPException(400, str(exc))


@router.get("/{rabbit_id}/lineage", response_model=schemas.Lineage)
def get_lineage(rabbit_id: int, store: RecordStore = Depends(get_store)):
    rabbit = _get_or_404(store, rabbit_id)
    mother, father = store.parents_of(rabbit)
    return schemas.Lineage(
        rabbit=rabbit,
        mother=mother,
        father=father,
        offspring=store.offspring_of(rabbit_id),
    )


@router.get("/{rabbit_id}/health-events", response_model=list[schemas.HealthEvent])
def list_health_events_for_rabbit(rabbit_id: int, store: RecordStore = Depends(get_store)):
    _get_or_404(store, rabbit_id)
    return store.health_events_for(rabbit_id)


@router.get("/{rabbit_id}/reproductions", response_model=list[schemas.Reproduction])
def list_reproductions_for_rabbit(rabbit_id: int, store: RecordStore = Depends(get_store)):
    _get_or_404(store, rabbit_id)
    return store.reproductions_for(rabbit_id)
