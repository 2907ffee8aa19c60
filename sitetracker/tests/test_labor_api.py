from decimal import Decimal

from fastapi.testclient import TestClient

from sitetracker.database import SessionLocal
from sitetracker.main import app
from sitetracker.models.labor_entry import LaborEntry

client = TestClient(app)

REQUIRED_MESSAGE = "worker_name, hours, and rate are required"


def _count_labor() -> int:
    db = SessionLocal()
    try:
        return db.query(LaborEntry).count()
    finally:
        db.close()


def test_create_labor_returns_generated_total():
    resp = client.post(
        "/api/labor",
        json={"worker_name": "Dana", "role": "Carpenter", "hours": 7.5, "rate": 40},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["ok"] is True

    entry = body["data"]
    assert entry["worker_name"] == "Dana"
    assert entry["role"] == "Carpenter"
    assert Decimal(entry["hours"]) == Decimal("7.5")
    assert Decimal(entry["rate"]) == Decimal("40")
    assert Decimal(entry["total"]) == Decimal("300")
    assert entry["created_at"]


def test_create_labor_role_is_optional():
    resp = client.post("/api/labor", json={"worker_name": "Sam", "hours": 2.5, "rate": 12.5})
    assert resp.status_code == 201
    entry = resp.json()["data"]
    assert entry["role"] is None
    assert Decimal(entry["total"]) == Decimal("31.25")


def test_create_labor_total_cannot_be_supplied():
    resp = client.post(
        "/api/labor",
        json={"worker_name": "Lee", "hours": 4, "rate": 25, "total": 9999},
    )
    assert resp.status_code == 201
    assert Decimal(resp.json()["data"]["total"]) == Decimal("100")


def test_create_labor_rejects_zero_hours_or_rate():
    # Zero is treated the same as a missing value.
    for payload in (
        {"worker_name": "Dana", "hours": 0, "rate": 40},
        {"worker_name": "Dana", "hours": 8, "rate": 0},
    ):
        resp = client.post("/api/labor", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"ok": False, "error": REQUIRED_MESSAGE}

    assert _count_labor() == 0


def test_create_labor_rejects_missing_fields():
    for payload in (
        {},
        {"hours": 8, "rate": 40},
        {"worker_name": "", "hours": 8, "rate": 40},
        {"worker_name": "Dana", "rate": 40},
        {"worker_name": "Dana", "hours": 8},
    ):
        resp = client.post("/api/labor", json=payload)
        assert resp.status_code == 400
        assert resp.json()["error"] == REQUIRED_MESSAGE

    assert _count_labor() == 0


def test_list_labor_newest_first_with_totals():
    client.post("/api/labor", json={"worker_name": "A", "hours": 1, "rate": 10})
    client.post("/api/labor", json={"worker_name": "B", "hours": 2, "rate": 10})

    resp = client.get("/api/labor")
    assert resp.status_code == 200
    rows = resp.json()["data"]
    assert [row["worker_name"] for row in rows] == ["B", "A"]
    for row in rows:
        assert Decimal(row["total"]) == Decimal(row["hours"]) * Decimal(row["rate"])


def test_create_labor_accepts_numeric_text_fields():
    resp = client.post("/api/labor", json={"worker_name": 7, "role": 3, "hours": 1, "rate": 10})
    assert resp.status_code == 201
    entry = resp.json()["data"]
    assert entry["worker_name"] == "7"
    assert entry["role"] == "3"
