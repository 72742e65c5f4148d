import json


def _rabbit(client, **overrides):
    payload = {
        "name": "Bella",
        "sex": "female",
        "breed": "Néo-Zélandais",
        "birth_date": "2025-06-01",
        "current_weight": 4.2,
    }
    payload.update(overrides)
    r = client.post("/rabbits/", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def _finance(client, **overrides):
    payload = {
        "kind": "sale",
        "amount": 30000,
        "description": "Vente 4 lapins",
        "date": "2026-03-10",
        "category": "Vente lapins",
    }
    payload.update(overrides)
    r = client.post("/finances/", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def _stock(client, **overrides):
    payload = {
        "name": "Granulés",
        "type": "feed",
        "quantity": 10,
        "unit": "sac",
        "alert_threshold": 3,
        "unit_price": 9500,
        "supplier": "Provenderie",
    }
    payload.update(overrides)
    r = client.post("/stocks/", json=payload)
    assert r.status_code == 200, r.text
    return r.json()


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_create_rabbit_and_list(client):
    data = _rabbit(client)
    assert "id" in data
    assert data["status"] == "breeder"
    assert data["created_at"].startswith("2026-03-15T10:30:00")

    r2 = client.get("/rabbits/")
    assert r2.status_code == 200
    assert any(r["name"] == "Bella" for r in r2.json())


def test_create_rabbit_requires_name_breed_and_birth_date(client):
    r = client.post("/rabbits/", json={"name": "", "sex": "female", "breed": "Rex", "birth_date": "2026-01-01"})
    assert r.status_code == 422
    r = client.post("/rabbits/", json={"name": "X", "sex": "female", "birth_date": "2026-01-01"})
    assert r.status_code == 422
    r = client.post("/rabbits/", json={"name": "X", "sex": "female", "breed": "Rex"})
    assert r.status_code == 422
    r = client.post("/rabbits/", json={"name": "X", "sex": "F", "breed": "Rex", "birth_date": "2026-01-01"})
    assert r.status_code == 422


def test_list_rabbits_search_and_status_filter(client):
    _rabbit(client, name="Bella", breed="Rex")
    _rabbit(client, name="Caramel", breed="Californien", birth_date="2026-03-01")
    _rabbit(client, name="Noisette", breed="Rex", birth_date="2026-02-01")

    r = client.get("/rabbits/?search=rex")
    assert sorted(x["name"] for x in r.json()) == ["Bella", "Noisette"]

    r = client.get("/rabbits/?search=CARA")
    assert [x["name"] for x in r.json()] == ["Caramel"]

    r = client.get("/rabbits/?status=weaned")
    assert [x["name"] for x in r.json()] == ["Noisette"]

    r = client.get("/rabbits/?status=young&search=rex")
    assert r.json() == []


def test_update_rabbit_recomputes_status(client):
    kit = _rabbit(client, name="Kit", birth_date="2026-01-05", current_weight=1.8)
    assert kit["status"] == "young"

    r = client.patch(f"/rabbits/{kit['id']}", json={"current_weight": 2.7})
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "ready_for_sale"
    assert r.json()["name"] == "Kit"


def test_mark_rabbit_sold_is_sticky(client):
    kit = _rabbit(client, name="Kit", birth_date="2026-01-05", current_weight=2.7)
    r = client.patch(f"/rabbits/{kit['id']}", json={"status": "sold"})
    assert r.json()["status"] == "sold"

    r = client.patch(f"/rabbits/{kit['id']}", json={"current_weight": 3.1})
    assert r.json()["status"] == "sold"

    lst = client.get("/rabbits/?status=sold")
    assert [x["id"] for x in lst.json()] == [kit["id"]]


def test_unknown_rabbit_is_404(client):
    assert client.get("/rabbits/999").status_code == 404
    assert client.patch("/rabbits/999", json={"current_weight": 1}).status_code == 404
    assert client.get("/rabbits/999/lineage").status_code == 404


def test_lineage(client):
    doe = _rabbit(client, name="Mère")
    buck = _rabbit(client, name="Père", sex="male")
    kit = _rabbit(client, name="Kit", birth_date="2026-02-20", mother_id=doe["id"], father_id=buck["id"])
    orphan = _rabbit(client, name="Orphelin", birth_date="2026-02-20", mother_id=4242)

    r = client.get(f"/rabbits/{kit['id']}/lineage")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["mother"]["name"] == "Mère"
    assert data["father"]["name"] == "Père"
    assert data["offspring"] == []

    r = client.get(f"/rabbits/{doe['id']}/lineage")
    assert [x["name"] for x in r.json()["offspring"]] == ["Kit"]

    r = client.get(f"/rabbits/{orphan['id']}/lineage")
    assert r.json()["mother"] is None


def test_stock_low_flag_and_alerts(client):
    _stock(client, name="Foin", quantity=3, alert_threshold=3)
    _stock(client, name="Granulés", quantity=10, alert_threshold=3)

    r = client.get("/stocks/")
    flags = {s["name"]: s["low_stock"] for s in r.json()}
    assert flags == {"Foin": True, "Granulés": False}

    r = client.get("/stocks/alerts")
    assert [s["name"] for s in r.json()] == ["Foin"]

    r = client.get("/stocks/?low_only=true")
    assert [s["name"] for s in r.json()] == ["Foin"]


def test_stock_update(client):
    item = _stock(client)
    r = client.patch(f"/stocks/{item['id']}", json={"quantity": 1})
    assert r.status_code == 200, r.text
    assert r.json()["quantity"] == 1
    assert r.json()["low_stock"] is True
    assert r.json()["supplier"] == "Provenderie"

    assert client.patch("/stocks/999", json={"quantity": 1}).status_code == 404


def test_finance_validation(client):
    r = client.post("/finances/", json={
        "kind": "sale", "amount": 0, "description": "x", "date": "2026-03-01", "category": "c",
    })
    assert r.status_code == 422
    r = client.post("/finances/", json={
        "kind": "sale", "amount": 10, "description": "", "date": "2026-03-01", "category": "c",
    })
    assert r.status_code == 422
    assert client.get("/finances/").json() == []


def test_finance_list_sorted_and_filtered(client):
    _finance(client, date="2026-03-01", description="old")
    _finance(client, date="2026-03-12", description="new")
    _finance(client, kind="purchase", date="2026-03-05", description="feed", amount=5000)

    r = client.get("/finances/")
    assert [f["description"] for f in r.json()] == ["new", "feed", "old"]

    r = client.get("/finances/?kind=purchase")
    assert [f["description"] for f in r.json()] == ["feed"]

    totals = client.get("/finances/totals").json()
    assert totals == {"sales": 60000, "purchases": 5000, "balance": 55000}


def test_finance_edit_and_delete(client):
    f = _finance(client)

    r = client.patch(f"/finances/{f['id']}", json={"amount": 45000})
    assert r.status_code == 200, r.text
    assert r.json()["amount"] == 45000
    assert r.json()["description"] == f["description"]

    rd = client.delete(f"/finances/{f['id']}")
    assert rd.status_code == 204, rd.text
    assert client.get("/finances/").json() == []

    assert client.delete(f"/finances/{f['id']}").status_code == 404
    assert client.patch(f"/finances/{f['id']}", json={"amount": 1}).status_code == 404


def test_reproduction_and_health_events(client):
    doe = _rabbit(client, name="Mère")
    buck = _rabbit(client, name="Père", sex="male")

    r = client.post("/reproductions/", json={
        "mother_id": doe["id"], "father_id": buck["id"], "mating_date": "2026-02-01",
    })
    assert r.status_code == 200, r.text
    rep = r.json()
    assert rep["expected_kindling_date"] == "2026-03-04"

    r = client.patch(f"/reproductions/{rep['id']}", json={"actual_kindling_date": "2026-03-03", "litter_size": 8})
    assert r.status_code == 200, r.text
    assert r.json()["litter_size"] == 8

    r = client.post("/health-events/", json={
        "rabbit_id": doe["id"], "type": "treatment", "description": "Gale",
        "start_date": "2026-03-01", "medication": "Ivermectine",
    })
    assert r.status_code == 200, r.text
    event = r.json()

    r = client.post("/health-events/", json={
        "rabbit_id": doe["id"], "type": "illness", "description": "x",
        "start_date": "2026-03-05", "end_date": "2026-03-01",
    })
    assert r.status_code == 422

    r = client.patch(f"/health-events/{event['id']}", json={"end_date": "2026-03-10"})
    assert r.json()["end_date"] == "2026-03-10"
    assert client.patch("/health-events/999", json={"notes": "x"}).status_code == 404

    assert len(client.get(f"/rabbits/{doe['id']}/health-events").json()) == 1
    assert len(client.get(f"/rabbits/{buck['id']}/reproductions").json()) == 1
    assert len(client.get("/reproductions/").json()) == 1
    assert len(client.get("/health-events/").json()) == 1


def test_dashboard_kpis(client):
    _rabbit(client)
    _rabbit(client, name="Kit", birth_date="2026-01-05", current_weight=2.8)
    _finance(client, amount=30000, date="2026-03-02")
    _finance(client, kind="purchase", amount=12000, date="2026-03-03")
    _finance(client, amount=99000, date="2026-02-20")
    _stock(client, quantity=1, alert_threshold=2)

    r = client.get("/dashboard/kpis")
    assert r.status_code == 200, r.text
    assert r.json() == {
        "total_rabbits": 2,
        "ready_for_sale_count": 1,
        "breeder_count": 1,
        "monthly_revenue": 30000,
        "monthly_expenses": 12000,
        "monthly_profit": 18000,
        "low_stock_count": 1,
    }

    r = client.get("/dashboard/kpis?as_of=2026-02-01")
    assert r.json()["monthly_revenue"] == 99000

    alerts = client.get("/stocks/alerts").json()
    assert [s["low_stock"] for s in alerts] == [True]


def test_reports_summary(client):
    _rabbit(client)
    _finance(client, kind="purchase", amount=100, category="Feed", date="2026-03-01")
    _finance(client, kind="purchase", amount=50, category="Feed", date="2026-03-02")
    _finance(client, kind="purchase", amount=30, category="Medicine", date="2026-03-03")
    _finance(client, amount=500, date="2026-01-10")
    _stock(client, quantity=10, unit_price=5)
    _stock(client, quantity=2, unit_price=100)

    r = client.get("/reports/summary?period=this_month")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["expenses"] == 180
    assert data["revenue"] == 0
    assert data["stock_value"] == 250
    assert data["status_counts"]["breeder"] == 1
    assert data["top_expense_categories"] == [
        {"category": "Feed", "amount": 150},
        {"category": "Medicine", "amount": 30},
    ]

    r = client.get("/reports/summary?period=this_year")
    assert r.json()["revenue"] == 500

    assert client.get("/reports/summary?period=last_decade").status_code == 422


def test_reports_export_download(client):
    _rabbit(client)
    _finance(client)

    r = client.get("/reports/export?period=this_week")
    assert r.status_code == 200, r.text
    assert "application/json" in r.headers.get("content-type", "")
    assert r.headers["content-disposition"] == "attachment; filename=rapport-cunigestion-2026-03-15.json"

    doc = json.loads(r.text)
    assert doc["periode"] == "Cette semaine"
    assert doc["dateGeneration"] == "2026-03-15T10:30:00.000Z"
    assert doc["resume"]["totalVentes"] == 30000
    assert len(doc["detailsLapins"]) == 1


def test_language_preference(client):
    assert client.get("/preferences/language").json() == {"language": "fr"}

    r = client.put("/preferences/language", json={"language": "en"})
    assert r.status_code == 200
    assert client.get("/preferences/language").json() == {"language": "en"}

    assert client.put("/preferences/language", json={"language": "de"}).status_code == 422

    _finance(client)
    doc = client.get("/reports/export?period=this_month").json()
    assert doc["periode"] == "This month"


def test_translations(client):
    r = client.get("/translations/en")
    assert r.status_code == 200
    assert r.json()["nav.rabbits"] == "Rabbits"
    assert client.get("/translations/de").status_code == 404


def test_storage_fault_is_a_500(client, store):
    store.close()
    r = client.get("/rabbits/")
    assert r.status_code == 500
    assert r.json() == {"detail": "Storage failure"}


def test_non_finite_numbers_are_rejected(client):
    r = client.post("/finances/", json={
        "kind": "sale", "amount": "Infinity", "description": "Vente",
        "date": "2026-03-10", "category": "Vente lapins",
    })
    assert r.status_code == 422
    r = client.post("/stocks/", json={"name": "Foin", "quantity": "NaN", "unit": "botte", "alert_threshold": 1})
    assert r.status_code == 422

    assert client.get("/finances/").json() == []
    assert client.get("/stocks/").json() == []
    assert client.get("/dashboard/kpis").json()["monthly_revenue"] == 0
