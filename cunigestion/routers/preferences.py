from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..database import get_store
from ..i18n import LANGUAGES, catalog
from ..store import RecordStore
from .. import schemas

router = APIRouter(tags=["preferences"])


@router.get("/preferences/language", response_model=schemas.LanguagePreference)
def get_language(store: RecordStore = Depends(get_store)):
    return schemas.LanguagePreference(language=store.get_language())


@router.put("/preferences/language", response_model=schemas.LanguagePreference)
def set_language(payload: schemas.LanguagePreference, store: RecordStore = Depends(get_store)):
    return schemas.LanguagePreference(language=store.set_language(payload.language))


@router.get("/translations/{language}", response_model=dict[str, str])
def get_translations(language: str):
    if language not in LANGUAGES:
        raise HTTPException(404, f"Unsupported language: {language}")
    return catalog(language)
