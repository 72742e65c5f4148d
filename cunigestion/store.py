"""
Record store: one persisted collection per entity type.

Each collection is a single row in the ``collections`` table holding the whole
collection as a JSON array. Every operation loads the array, changes it and
writes it back in one session, so callers must reload after any write.

    store = RecordStore("sqlite:///./cunigestion.db")
    store.open()
    rabbit_id = store.rabbits.append({...})
    store.close()
"""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

import pydantic
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import config
from .clock import isoformat_z, utcnow
from .database import Base, make_engine, make_session_factory
from .errors import NotFoundError, StorageFault, ValidationError
from .i18n import LANGUAGES
from .models import SCHEMA_VERSION, Preference, StoredCollection
from . import schemas
from .status import derive_status

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# Assigned by the store, never taken from caller input
_READ_ONLY_FIELDS = ("id", "created_at")


def _validate(model: Type[BaseModel], data) -> BaseModel:
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid {model.__name__}: {exc}", exc.errors()) from exc


class Collection(Generic[RecordT]):
    def __init__(
        self,
        store: "RecordStore",
        key: str,
        record_type: Type[RecordT],
        create_type: Type[BaseModel],
    ):
        self._store = store
        self.key = key
        self.record_type = record_type
        self.create_type = create_type

    def list(self) -> List[RecordT]:
        with self._store.session() as db:
            _, raw = self._store.load(db, self.key)
        out: List[RecordT] = []
        for item in raw:
            try:
                out.append(self.record_type.model_validate(item))
            except pydantic.ValidationError as exc:
                raise StorageFault(f"Corrupt record in '{self.key}': {exc}") from exc
        return out

    def get(self, record_id: int) -> RecordT:
        for record in self.list():
            if record.id == record_id:
                return record
        raise NotFoundError(self.key, record_id)

    def append(self, data) -> int:
        payload = _validate(self.create_type, data).model_dump(mode="json", exclude_none=True)
        for field in _READ_ONLY_FIELDS:
            payload.pop(field, None)

        with self._store.session() as db:
            row, raw = self._store.load(db, self.key)
            payload["id"] = row.next_id
            payload["created_at"] = isoformat_z(self._store.clock())
            record = self._finalize(payload)

            raw.append(record.model_dump(mode="json"))
            row.next_id = record.id + 1
            self._store.save(row, raw)

        logger.debug("Appended %s record %s", self.key, record.id)
        return record.id

    def replace(self, record_id: int, fields) -> RecordT:
        if isinstance(fields, BaseModel):
            fields = fields.model_dump(exclude_unset=True)
        fields = {k: v for k, v in fields.items() if k not in _READ_ONLY_FIELDS}

        with self._store.session() as db:
            row, raw = self._store.load(db, self.key)
            index = self._index_of(raw, record_id)
            record = self._finalize({**raw[index], **fields})

            raw[index] = record.model_dump(mode="json")
            self._store.save(row, raw)

        logger.debug("Replaced %s record %s (%s)", self.key, record_id, ", ".join(sorted(fields)))
        return record

    def _index_of(self, raw: list, record_id: int) -> int:
        for i, item in enumerate(raw):
            if item.get("id") == record_id:
                return i
        raise NotFoundError(self.key, record_id)

    def _finalize(self, data: dict) -> RecordT:
        return _validate(self.record_type, data)


class RabbitCollection(Collection[schemas.Rabbit]):
    def _finalize(self, data: dict) -> schemas.Rabbit:
        rabbit = super()._finalize(data)
        status = derive_status(
            rabbit.birth_date,
            rabbit.current_weight,
            rabbit.status if "status" in data else None,
            self._store.clock(),
        )
        return rabbit.model_copy(update={"status": status})


class FinanceCollection(Collection[schemas.FinanceTransaction]):
    def remove(self, record_id: int) -> None:
        with self._store.session() as db:
            row, raw = self._store.load(db, self.key)
            del raw[self._index_of(raw, record_id)]
            self._store.save(row, raw)

        logger.debug("Removed %s record %s", self.key, record_id)


class RecordStore:
    def __init__(
        self,
        database_url: str = config.DATABASE_URL,
        clock: Optional[Callable[[], datetime]] = None,
        default_language: str = config.DEFAULT_LANGUAGE,
    ):
        self.database_url = database_url
        self.clock = clock or utcnow
        self.default_language = default_language
        self._engine = None
        self._session_factory = None

        self.rabbits = RabbitCollection(self, "rabbits", schemas.Rabbit, schemas.RabbitCreate)
        self.stocks = Collection(self, "stocks", schemas.StockItem, schemas.StockCreate)
        self.finances = FinanceCollection(
            self, "finances", schemas.FinanceTransaction, schemas.FinanceCreate
        )
        self.reproductions = Collection(
            self, "reproductions", schemas.Reproduction, schemas.ReproductionCreate
        )
        self.health_events = Collection(
            self, "health_events", schemas.HealthEvent, schemas.HealthEventCreate
        )

    @property
    def collections(self) -> Tuple[Collection, ...]:
        return (self.rabbits, self.stocks, self.finances, self.reproductions, self.health_events)

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def open(self) -> "RecordStore":
        if self._engine is not None:
            return self
        try:
            self._engine = make_engine(self.database_url)
            Base.metadata.create_all(bind=self._engine)
        except SQLAlchemyError as exc:
            self._engine = None
            raise StorageFault(f"Cannot open record store at {self.database_url}") from exc
        self._session_factory = make_session_factory(self._engine)

        try:
            with self.session() as db:
                for collection in self.collections:
                    self.load(db, collection.key)
        except StorageFault:
            self.close()
            raise

        logger.info("Record store opened at %s", self.database_url)
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Record store closed")

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def __enter__(self) -> "RecordStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -----------------------------
    # Persistence
    # -----------------------------
    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._session_factory is None:
            raise StorageFault("Record store is not open")

        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Storage operation failed", exc_info=True)
            raise StorageFault(str(exc)) from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def load(self, db: Session, key: str) -> Tuple[StoredCollection, list]:
        row = db.get(StoredCollection, key)
        if row is None:
            row = StoredCollection(key=key, schema_version=SCHEMA_VERSION, next_id=1, records="[]")
            db.add(row)
            return row, []

        if row.schema_version > SCHEMA_VERSION:
            raise StorageFault(
                f"Collection '{key}' has schema version {row.schema_version}, "
                f"this build reads up to {SCHEMA_VERSION}"
            )
        try:
            raw = json.loads(row.records)
        except ValueError as exc:
            raise StorageFault(f"Collection '{key}' is not valid JSON") from exc
        if not isinstance(raw, list):
            raise StorageFault(f"Collection '{key}' is not a list of records")
        return row, raw

    def save(self, row: StoredCollection, raw: list) -> None:
        try:
            row.records = json.dumps(raw)
        except (TypeError, ValueError) as exc:
            raise StorageFault(f"Cannot serialize collection '{row.key}'") from exc
        row.schema_version = SCHEMA_VERSION

    # -----------------------------
    # Lookups
    # -----------------------------
    def parents_of(
        self, rabbit: schemas.Rabbit
    ) -> Tuple[Optional[schemas.Rabbit], Optional[schemas.Rabbit]]:
        """Mother and father of ``rabbit``; dangling references resolve to None."""
        by_id = {r.id: r for r in self.rabbits.list()}
        mother = by_id.get(rabbit.mother_id) if rabbit.mother_id is not None else None
        father = by_id.get(rabbit.father_id) if rabbit.father_id is not None else None
        return mother, father

    def offspring_of(self, rabbit_id: int) -> List[schemas.Rabbit]:
        return [
            r for r in self.rabbits.list()
            if r.mother_id == rabbit_id or r.father_id == rabbit_id
        ]

    def health_events_for(self, rabbit_id: int) -> List[schemas.HealthEvent]:
        return [e for e in self.health_events.list() if e.rabbit_id == rabbit_id]

    def reproductions_for(self, rabbit_id: int) -> List[schemas.Reproduction]:
        return [
            r for r in self.reproductions.list()
            if r.mother_id == rabbit_id or r.father_id == rabbit_id
        ]

    # -----------------------------
    # Preferences
    # -----------------------------
    def get_language(self) -> str:
        with self.session() as db:
            pref = db.get(Preference, "language")
            return pref.value if pref else self.default_language

    def set_language(self, language: str) -> str:
        if language not in LANGUAGES:
            raise ValidationError(f"language must be one of: {', '.join(LANGUAGES)}")
        with self.session() as db:
            pref = db.get(Preference, "language")
            if pref is None:
                db.add(Preference(key="language", value=language))
            else:
                pref.value = language
        logger.debug("Language preference set to %s", language)
        return language
