from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text
from .database import Base

# Bumped whenever the record layout inside `records` changes
SCHEMA_VERSION = 1


class StoredCollection(Base):
    __tablename__ = "collections"

    key = Column(String, primary_key=True)
    schema_version = Column(Integer, nullable=False, default=SCHEMA_VERSION)
    next_id = Column(Integer, nullable=False, default=1)
    records = Column(Text, nullable=False, default="[]")  # JSON array, insertion order


class Preference(Base):
    __tablename__ = "preferences"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)
