from datetime import date

from cunigestion.aggregator import compute_kpis
from cunigestion.schemas import RabbitStatus
from cunigestion.seed_db import seed


def test_seed_fills_every_collection(store):
    counts = seed(store, today=date(2026, 3, 15))

    assert counts["rabbits"] > 5
    assert counts["stocks"] == 7
    assert counts["finances"] == 24
    assert counts["reproductions"] == 4
    assert counts["health_events"] == 2

    statuses = {r.status for r in store.rabbits.list()}
    assert RabbitStatus.BREEDER in statuses
    assert RabbitStatus.SICK in statuses
    assert RabbitStatus.SOLD in statuses

    kpis = compute_kpis(store.rabbits.list(), store.finances.list(), store.stocks.list(), date(2026, 3, 15))
    assert kpis.low_stock_count == 3
