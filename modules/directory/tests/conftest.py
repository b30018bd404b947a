from __future__ import annotations

from datetime import date

import pytest

from modules.directory.models import Institution
from modules.directory.repository import EntityStore, counter_ids
from modules.directory.seed import seed


TODAY = date(2024, 3, 5)


@pytest.fixture
def empty_store() -> EntityStore:
    return EntityStore(id_factory=counter_ids("id-"), today=lambda: TODAY)


@pytest.fixture
def store(empty_store: EntityStore) -> EntityStore:
    seed(empty_store)
    return empty_store


@pytest.fixture
def make_institution():
    def _make(id: str, name: str, **fields) -> Institution:
        return Institution.from_dict({"id": id, "name": name, **fields})

    return _make
