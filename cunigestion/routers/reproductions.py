from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..database import get_store
from ..errors import NotFoundError, ValidationError
from ..store import RecordStore
from .. import schemas

router = APIRouter(prefix="/reproductions", tags=["reproductions"])


@router.get("/", response_model=list[schemas.Reproduction])
def list_reproductions(store: RecordStore = Depends(get_store)):
    return sorted(store.reproductions.list(), key=lambda r: r.mating_date, reverse=True)


@router.post("/", response_model=schemas.Reproduction)
def create_reproduction(payload: schemas.ReproductionCreate, store: RecordStore = Depends(get_store)):
    # Parents are weak references: unknown ids are recorded as given
    reproduction_id = store.reproductions.append(payload)
    return store.reproductions.get(reproduction_id)


@router.patch("/{reproduction_id}", response_model=schemas.Reproduction)
def update_reproduction(
    reproduction_id: int,
    payload: schemas.ReproductionUpdate,
    store: RecordStore = Depends(get_store),
):
    try:
        return store.reproductions.replace(reproduction_id, payload)
    except NotFoundError:
        raise HTTPException(404, "Reproduction not found")
    except ValidationError as exc:
        raise HTTPException(400, str(exc))
