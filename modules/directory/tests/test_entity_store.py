from __future__ import annotations

import pytest

from modules.directory.exceptions import ValidationError
from modules.directory.models import NewsCategory, default_schedule
from modules.directory.repository import EntityStore, counter_ids


def test_add_institution_assigns_id_and_default_schedule(empty_store):
    inst = empty_store.add_institution({"name": "Клиника", "address": "ул. Ленина, 1", "phone": "123"})
    assert inst.id == "id-1"
    assert inst.working_hours == default_schedule()
    assert empty_store.get_institution("id-1") is inst


def test_update_institution_merges_fields(store):
    assert store.update_institution("2", {"paid": True, "id": "hijack", "unknown": 1})
    inst = store.get_institution("2")
    assert inst.paid is True
    assert inst.name == "Городская поликлиника №1"
    assert store.get_institution("hijack") is None



def test_update_institution_skips_nulls_except_website(store):
    assert store.update_institution("3", {"paid": None, "type": None, "rating": None, "website": None})
    inst = store.get_institution("3")
    assert inst.paid is True
    assert inst.type.value == "center"
    assert inst.rating == 4.8
    assert inst.website is None


def test_update_doctor_skips_nulls(store):
    assert store.update_doctor("3", "d4", {"name": None, "experience": None, "photo": None})
    doctor = next(d for d in store.get_institution("3").doctors if d.id == "d4")
    assert "Савич" in doctor.name
    assert doctor.experience == 14
    assert doctor.photo is None

def test_unknown_ids_are_no_ops(store):
    before = [i.to_dict() for i in store.institutions]
    assert store.update_institution("missing", {"name": "X"}) is False
    assert store.delete_institution("missing") is False
    assert store.approve_review("missing") is False
    assert store.delete_review("missing") is False
    assert store.delete_news("missing") is False
    assert store.add_doctor("missing", {"name": "Доктор"}) is None
    assert store.update_doctor("1", "missing", {"name": "Доктор"}) is False
    assert store.remove_doctor("1", "missing") is False
    assert [i.to_dict() for i in store.institutions] == before


def test_delete_institution_leaves_reviews(store):
    assert store.delete_institution("1")
    assert store.get_institution("1") is None
    assert [r.id for r in store.reviews if r.institution_id == "1"] == ["r1", "r2"]


def test_review_moderation_round_trip(store):
    review = store.add_review({"institution_id": "4", "author_name": "Павел", "rating": 4, "comment": "Хорошо"})
    assert review.approved is False
    assert review.date == "2024-03-05"

    assert store.approve_review(review.id)
    approved = store.get_review(review.id)
    assert approved.approved is True
    assert (approved.id, approved.author_name, approved.rating, approved.comment) == (
        review.id,
        "Павел",
        4,
        "Хорошо",
    )


def test_review_rating_defaults_to_five(store):
    review = store.add_review({"institution_id": "1", "author_name": "Анна", "comment": "Спасибо"})
    assert review.rating == 5


def test_doctor_lifecycle(store):
    doctor = store.add_doctor("2", {"name": "Новиков Илья", "specialization": "Хирургия"})
    assert doctor.id == "id-1"
    assert store.update_doctor("2", doctor.id, {"experience": 5})
    updated = next(d for d in store.get_institution("2").doctors if d.id == doctor.id)
    assert updated.experience == 5
    assert updated.name == "Новиков Илья"
    assert store.remove_doctor("2", doctor.id)
    assert all(d.id != doctor.id for d in store.get_institution("2").doctors)


def test_add_news_defaults(store):
    item = store.add_news({"title": "Т", "summary": "С", "content": "К"})
    assert item.category is NewsCategory.health
    assert item.date == "2024-03-05"
    assert store.get_news(item.id) is item
    assert store.delete_news(item.id)


def test_collections_are_copies(store):
    store.institutions.clear()
    assert len(store.institutions) == 6


def test_rating_policy_accept_keeps_value(empty_store):
    assert empty_store.add_institution({"name": "A", "rating": 7}).rating == 7


def test_rating_policy_clamp():
    store = EntityStore(id_factory=counter_ids(), rating_policy="clamp")
    assert store.add_institution({"name": "A", "rating": 7}).rating == 5.0
    assert store.add_institution({"name": "B", "rating": -1}).rating == 0.0


def test_rating_policy_reject():
    store = EntityStore(id_factory=counter_ids(), rating_policy="reject")
    with pytest.raises(ValidationError):
        store.add_institution({"name": "A", "rating": 7})
    assert store.institutions == []
    inst = store.add_institution({"name": "B", "rating": 4.2})
    with pytest.raises(ValidationError):
        store.update_institution(inst.id, {"rating": 9})
    assert store.get_institution(inst.id).rating == 4.2
