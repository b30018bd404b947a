"""Fixed-size page slicing for ordered listings."""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 6


def total_pages(count: int, page_size: int) -> int:
    """Number of pages for ``count`` items; an empty listing still has one page."""

    if page_size < 1:
        raise ValueError("page_size must be positive")
    return max(1, math.ceil(count / page_size))


def paginate(items: Sequence[T], page_size: int, page: int) -> List[T]:
    """Items of 1-based ``page``; pages outside the listing come back empty."""

    if page_size < 1:
        raise ValueError("page_size must be positive")
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


__all__ = ["DEFAULT_PAGE_SIZE", "total_pages", "paginate"]
