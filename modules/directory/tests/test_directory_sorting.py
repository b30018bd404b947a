from __future__ import annotations

from modules.directory.filters import filter_institutions
from modules.directory.models import FilterSpec, PriceType, SortBy
from modules.directory.sorting import coerce_sort_by, sort_institutions


def _names(items):
    return [item.name for item in items]


def test_cyrillic_alphabetical_and_rating_order(make_institution):
    a = make_institution("a", "Клиника Здоровье", rating=3.9, paid=True)
    b = make_institution("b", "Аптека Центр", rating=4.8, paid=True)
    c = make_institution("c", "Больница №1", rating=4.5, paid=False)

    assert _names(sort_institutions([a, b, c], SortBy.alphabetical)) == [
        "Аптека Центр",
        "Больница №1",
        "Клиника Здоровье",
    ]
    assert [i.id for i in sort_institutions([a, b, c], SortBy.rating)] == ["b", "c", "a"]


def test_free_filter_then_sort(make_institution):
    a = make_institution("A", "Аптека Центр", paid=False, rating=4.0)
    b = make_institution("B", "Больница №1", paid=True, rating=4.8)
    c = make_institution("C", "Клиника Здоровье", paid=False, rating=3.5)

    free = filter_institutions([a, b, c], FilterSpec(price_type=PriceType.free))
    assert {i.id for i in free} == {"A", "C"}
    assert [i.id for i in sort_institutions(free, SortBy.alphabetical)] == ["A", "C"]
    assert [i.id for i in sort_institutions([a, b, c], SortBy.rating)] == ["B", "A", "C"]


def test_price_sort_puts_free_first_and_keeps_ties_in_order(store):
    ordered = sort_institutions(store.institutions, SortBy.price)
    assert [i.id for i in ordered] == ["1", "2", "6", "3", "4", "5"]


def test_rating_sort_is_descending(store):
    ordered = sort_institutions(store.institutions, "rating")
    assert [i.id for i in ordered] == ["3", "1", "6", "4", "2", "5"]


def test_rating_ties_keep_input_order(make_institution):
    items = [make_institution(str(n), f"Учреждение {n}", rating=4.0) for n in range(5)]
    assert [i.id for i in sort_institutions(items, SortBy.rating)] == ["0", "1", "2", "3", "4"]


def test_sorting_is_idempotent(store):
    for mode in SortBy:
        once = sort_institutions(store.institutions, mode)
        assert sort_institutions(once, mode) == once


def test_sort_does_not_mutate_input(store):
    original = store.institutions
    sort_institutions(original, SortBy.rating)
    assert [i.id for i in original] == ["1", "2", "3", "4", "5", "6"]


def test_unknown_sort_mode_falls_back_to_alphabetical(store, caplog):
    assert coerce_sort_by("popularity") is SortBy.alphabetical
    assert "popularity" in caplog.text
    assert sort_institutions(store.institutions, "popularity") == sort_institutions(
        store.institutions, SortBy.alphabetical
    )
