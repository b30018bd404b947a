"""Ordering strategies for the listing view."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, List, Union

from pyuca import Collator

from .models import Institution, SortBy

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # loads the DUCET table once per process
    return Collator()


def collation_key(text: str) -> tuple:
    """Unicode Collation Algorithm sort key; orders Cyrillic like Russian dictionaries."""

    return _collator().sort_key(text)


def coerce_sort_by(value: Union[SortBy, str, None]) -> SortBy:
    if isinstance(value, SortBy):
        return value
    try:
        return SortBy(value)
    except ValueError:
        logger.warning("Unknown sort mode %r; falling back to alphabetical", value)
        return SortBy.alphabetical


def sort_institutions(
    institutions: Iterable[Institution],
    sort_by: Union[SortBy, str, None] = SortBy.alphabetical,
) -> List[Institution]:
    """Return a new list ordered by ``sort_by``; ties keep their input order."""

    mode = coerce_sort_by(sort_by)
    items = list(institutions)
    if mode is SortBy.price:
        return sorted(items, key=lambda i: int(i.paid))
    if mode is SortBy.rating:
        return sorted(items, key=lambda i: i.rating, reverse=True)
    return sorted(items, key=lambda i: collation_key(i.name))


__all__ = ["collation_key", "coerce_sort_by", "sort_institutions"]
