from __future__ import annotations

from datetime import datetime

from fastapi.testclient import TestClient

from main import create_app
from modules.directory.repository import EntityStore
from utils.app_settings import Settings
from utils.timefmt import format_long_date, make_clock


def test_unseeded_app_starts_empty(tmp_path):
    app = create_app(Settings(admin_store=tmp_path / "admins.json", seed=False, page_size=2))
    with TestClient(app) as client:
        listing = client.get("/api/directory/institutions").json()
        assert listing == {"items": [], "total_count": 0, "total_pages": 1, "page": 1}
        assert client.get("/api/directory/meta").json()["page_size"] == 2


def test_injected_store_is_used(tmp_path):
    store = EntityStore()
    store.add_institution({"name": "Клиника", "address": "ул. Мира, 1", "phone": "1"})
    app = create_app(Settings(admin_store=tmp_path / "admins.json"), store=store)
    with TestClient(app) as client:
        assert client.get("/api/directory/stats").json()["total"] == 1


def test_rating_policy_reaches_the_store(tmp_path):
    app = create_app(Settings(admin_store=tmp_path / "admins.json", rating_policy="reject"))
    with TestClient(app) as client:
        res = client.post(
            "/api/admin/institutions",
            json={"name": "Клиника", "address": "ул. Мира, 1", "phone": "1", "rating": 8},
            auth=("admin", "admin123"),
        )
        assert res.status_code == 422


def test_make_clock_with_unknown_zone_falls_back_to_local():
    clock = make_clock("Mars/Olympus_Mons")
    assert isinstance(clock(), datetime)


def test_format_long_date():
    assert format_long_date("2024-12-01") == "1 декабря 2024 г."
    assert format_long_date("not a date", default="?") == "?"
