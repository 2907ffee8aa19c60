from fastapi.testclient import TestClient
from sqlalchemy import Column, DateTime, Integer, MetaData, Numeric, Table, Text, create_engine, inspect

from sitetracker import database
from sitetracker.database import Base, get_engine
from sitetracker.main import app
from sitetracker.services import schema_service

client = TestClient(app)

EXPECTED_TABLES = {"tasks", "labor", "materials", "material_images"}


def _schema_snapshot(engine) -> dict:
    inspector = inspect(engine)
    return {
        name: sorted(col["name"] for col in inspector.get_columns(name))
        for name in sorted(inspector.get_table_names())
    }


def test_health_returns_ok():
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}


def test_bootstrap_is_idempotent():
    first = client.post("/api/bootstrap")
    assert first.status_code == 200
    assert first.json() == {"ok": True}
    snapshot = _schema_snapshot(database.engine)

    for _ in range(3):
        again = client.post("/api/bootstrap")
        assert again.status_code == 200
        assert again.json() == {"ok": True}

    assert _schema_snapshot(database.engine) == snapshot
    assert EXPECTED_TABLES.issubset(snapshot.keys())
    assert "image_url" in snapshot["materials"]
    assert "total" in snapshot["labor"]


def test_bootstrap_adds_image_url_to_legacy_materials_table():
    engine = database.engine
    Base.metadata.drop_all(bind=engine)

    legacy = MetaData()
    Table(
        "materials",
        legacy,
        Column("id", Integer, primary_key=True),
        Column("item_name", Text, nullable=False),
        Column("category", Text),
        Column("quantity", Numeric(10, 2), nullable=False),
        Column("unit_cost", Numeric(12, 2), nullable=False),
        Column("created_at", DateTime(timezone=True)),
    )
    legacy.create_all(bind=engine)

    try:
        assert "image_url" not in _schema_snapshot(engine)["materials"]

        resp = client.post("/api/bootstrap")
        assert resp.status_code == 200

        snapshot = _schema_snapshot(engine)
        assert "image_url" in snapshot["materials"]
        assert EXPECTED_TABLES.issubset(snapshot.keys())

        # Second run finds nothing left to add.
        resp = client.post("/api/bootstrap")
        assert resp.status_code == 200
        assert _schema_snapshot(engine) == snapshot
    finally:
        Base.metadata.drop_all(bind=engine)
        schema_service.bootstrap(engine)


def test_bootstrap_failure_returns_error_envelope():
    broken = create_engine("sqlite:////nonexistent-sitetracker-dir/nested/db.sqlite")
    app.dependency_overrides[get_engine] = lambda: broken
    try:
        resp = client.post("/api/bootstrap")
    finally:
        app.dependency_overrides.pop(get_engine, None)
        broken.dispose()

    assert resp.status_code == 500
    body = resp.json()
    assert body["ok"] is False
    assert body["error"]


def test_additive_column_ddl_is_self_idempotent_on_postgresql():
    statement = schema_service.add_column_sql("postgresql", "materials", "image_url", "TEXT")
    assert statement == "ALTER TABLE materials ADD COLUMN IF NOT EXISTS image_url TEXT"

    # SQLite has no IF NOT EXISTS form; bootstrap checks the inspector first there.
    statement = schema_service.add_column_sql("sqlite", "materials", "image_url", "TEXT")
    assert statement == "ALTER TABLE materials ADD COLUMN image_url TEXT"
