from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi.testclient import TestClient

from main import create_app
from utils.app_settings import Settings


ADMIN = ("admin", "admin123")


@contextmanager
def build_client(tmp_path) -> Iterator[TestClient]:
    settings = Settings(admin_store=tmp_path / "admins.json", seed=True, log_level="WARNING")
    with TestClient(create_app(settings)) as client:
        yield client


def test_management_routes_require_credentials(tmp_path):
    with build_client(tmp_path) as client:
        assert client.get("/api/admin/reviews").status_code == 401
        res = client.get("/api/admin/reviews", auth=("admin", "nope"))
        assert res.status_code == 401
        assert res.headers["www-authenticate"] == "Basic"
        assert client.get("/api/admin/reviews", auth=ADMIN).status_code == 200


def test_register_and_login(tmp_path):
    with build_client(tmp_path) as client:
        form = {
            "username": "moder",
            "email": "moder@grodno.by",
            "password": "qwerty1",
            "confirm_password": "qwerty1",
            "full_name": "Пётр Модератор",
        }
        res = client.post("/api/admin/register", json=form)
        assert res.status_code == 201
        assert res.json()["username"] == "moder"

        assert client.post("/api/admin/register", json=form).status_code == 422
        assert client.post("/api/admin/login", json={"username": "moder", "password": "qwerty1"}).json() == {
            "status": "ok",
            "username": "moder",
        }
        assert client.post("/api/admin/login", json={"username": "moder", "password": "x"}).status_code == 401
        assert client.get("/api/admin/reviews", auth=("moder", "qwerty1")).status_code == 200


def test_review_moderation_flow(tmp_path):
    with build_client(tmp_path) as client:
        res = client.post(
            "/api/directory/institutions/4/reviews",
            json={"author_name": "Светлана", "rating": 5, "comment": "Не больно!"},
        )
        review_id = res.json()["id"]

        queue = client.get("/api/admin/reviews", auth=ADMIN).json()
        pending = {e["review"]["id"]: e["institution_name"] for e in queue["pending"]}
        assert pending[review_id] == "Стоматологическая клиника «Дентал Арт»"
        assert len(queue["recent_approved"]) == 3

        approved = client.post(f"/api/admin/reviews/{review_id}/approve", auth=ADMIN).json()
        assert approved["approved"] is True
        assert approved["comment"] == "Не больно!"
        public = client.get("/api/directory/institutions/4/reviews").json()
        assert [r["id"] for r in public] == [review_id]

        assert client.delete("/api/admin/reviews/r4", auth=ADMIN).json() == {"status": "ok"}
        assert client.delete("/api/admin/reviews/r4", auth=ADMIN).status_code == 404
        assert client.post("/api/admin/reviews/missing/approve", auth=ADMIN).status_code == 404


def test_institution_and_doctor_crud(tmp_path):
    with build_client(tmp_path) as client:
        res = client.post(
            "/api/admin/institutions",
            json={"name": "Аптека Центр", "address": "ул. Советская, 1", "phone": "+375 152 00-00-00", "type": "pharmacy"},
            auth=ADMIN,
        )
        assert res.status_code == 201
        inst = res.json()
        assert inst["working_hours"]["saturday"] == {"open": "09:00", "close": "14:00", "is_working": True}
        assert inst["working_hours"]["sunday"]["is_working"] is False

        missing_phone = {"name": "Клиника", "address": "ул. Мира, 3", "phone": ""}
        assert client.post("/api/admin/institutions", json=missing_phone, auth=ADMIN).status_code == 422

        res = client.patch(f"/api/admin/institutions/{inst['id']}", json={"paid": True}, auth=ADMIN)
        assert res.json()["paid"] is True
        assert res.json()["name"] == "Аптека Центр"

        listing = client.get("/api/directory/institutions").json()
        assert listing["total_count"] == 7
        assert "Аптека Центр" in [item["name"] for item in listing["items"][:2]]

        res = client.post(
            f"/api/admin/institutions/{inst['id']}/doctors",
            json={"name": "Фармацевт Ольга", "specialization": "Фармация"},
            auth=ADMIN,
        )
        assert res.status_code == 201
        doctor_id = res.json()["id"]
        res = client.patch(
            f"/api/admin/institutions/{inst['id']}/doctors/{doctor_id}", json={"experience": 4}, auth=ADMIN
        )
        assert res.json()["experience"] == 4
        assert client.delete(f"/api/admin/institutions/{inst['id']}/doctors/{doctor_id}", auth=ADMIN).status_code == 200

        assert client.delete(f"/api/admin/institutions/{inst['id']}", auth=ADMIN).status_code == 200
        assert client.get(f"/api/directory/institutions/{inst['id']}").status_code == 404
        assert client.patch("/api/admin/institutions/missing", json={"paid": True}, auth=ADMIN).status_code == 404


def test_news_management(tmp_path):
    with build_client(tmp_path) as client:
        res = client.post(
            "/api/admin/news",
            json={"title": "Новая поликлиника", "summary": "Открытие", "content": "Подробности", "category": "announcement"},
            auth=ADMIN,
        )
        assert res.status_code == 201
        news_id = res.json()["id"]
        assert res.json()["category_label"] == "Объявления"
        assert len(client.get("/api/directory/news").json()) == 4

        assert client.delete(f"/api/admin/news/{news_id}", auth=ADMIN).status_code == 200
        assert client.delete(f"/api/admin/news/{news_id}", auth=ADMIN).status_code == 404


def test_patch_rejects_null_for_required_fields(tmp_path):
    with build_client(tmp_path) as client:
        res = client.patch(
            "/api/admin/institutions/3", json={"paid": None, "type": None, "rating": None}, auth=ADMIN
        )
        assert res.status_code == 422
        inst = client.get("/api/directory/institutions/3").json()
        assert (inst["paid"], inst["type"], inst["rating"]) == (True, "center", 4.8)

        res = client.patch("/api/admin/institutions/3", json={"website": None}, auth=ADMIN)
        assert res.status_code == 200
        assert res.json()["website"] is None
        assert res.json()["paid"] is True

        res = client.patch("/api/admin/institutions/3/doctors/d4", json={"name": None}, auth=ADMIN)
        assert res.status_code == 422


def test_working_hours_must_be_zero_padded(tmp_path):
    with build_client(tmp_path) as client:
        base = {"name": "Клиника Мира", "address": "ул. Мира, 3", "phone": "+375 152 11-11-11"}
        loose = {**base, "working_hours": {"monday": {"open": "9:00", "close": "18:00", "is_working": True}}}
        assert client.post("/api/admin/institutions", json=loose, auth=ADMIN).status_code == 422

        no_open = {**base, "working_hours": {"monday": {"open": "", "close": "18:00", "is_working": True}}}
        assert client.post("/api/admin/institutions", json=no_open, auth=ADMIN).status_code == 422

        good = {
            **base,
            "working_hours": {
                "monday": {"open": "09:00", "close": "18:00", "is_working": True},
                "sunday": {"open": "", "close": "", "is_working": False},
            },
        }
        res = client.post("/api/admin/institutions", json=good, auth=ADMIN)
        assert res.status_code == 201
        assert res.json()["working_hours"]["monday"] == {"open": "09:00", "close": "18:00", "is_working": True}


def test_system_overview_stats(tmp_path):
    with build_client(tmp_path) as client:
        assert client.get("/api/admin/stats").status_code == 401
        assert client.get("/api/admin/stats", auth=ADMIN).json() == {
            "institutions": 6,
            "doctors": 6,
            "approved_reviews": 3,
            "pending_reviews": 1,
            "services": 20,
            "districts": 5,
        }
        client.post("/api/admin/reviews/r4/approve", auth=ADMIN)
        stats = client.get("/api/admin/stats", auth=ADMIN).json()
        assert (stats["approved_reviews"], stats["pending_reviews"]) == (4, 0)


def test_admin_news_list_is_newest_first(tmp_path):
    with build_client(tmp_path) as client:
        assert client.get("/api/admin/news").status_code == 401
        assert [n["id"] for n in client.get("/api/admin/news", auth=ADMIN).json()] == ["n3", "n2", "n1"]
        res = client.post(
            "/api/admin/news",
            json={"title": "Прививочная кампания", "summary": "Старт", "content": "Подробности"},
            auth=ADMIN,
        )
        ids = [n["id"] for n in client.get("/api/admin/news", auth=ADMIN).json()]
        assert ids == [res.json()["id"], "n3", "n2", "n1"]
