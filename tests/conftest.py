from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from cunigestion.database import get_store
from cunigestion.main import app
from cunigestion.store import RecordStore

# Every test runs at this instant
FIXED_NOW = datetime(2026, 3, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def store(tmp_path, clock):
    s = RecordStore(f"sqlite:///{tmp_path / 'test.db'}", clock=clock)
    s.open()
    yield s
    s.close()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    # Not used as a context manager: the lifespan would open the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()
