"""Listing pipeline: filter, sort and paginate the institution collection."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Union

from .filters import filter_institutions
from .models import NO_FILTER, FilterSpec, Institution, ListingPage, PriceType
from .pagination import DEFAULT_PAGE_SIZE, paginate, total_pages
from .repository import EntityStore
from .sorting import coerce_sort_by, sort_institutions

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def coerce_price_type(value: Union[PriceType, str, None]) -> PriceType:
    if isinstance(value, PriceType):
        return value
    try:
        return PriceType(value)
    except ValueError:
        logger.warning("Unknown price type %r; showing all institutions", value)
        return PriceType.all


def build_filter_spec(
    query: Optional[str] = "",
    price_type: Union[PriceType, str, None] = PriceType.all,
    specialization: Optional[str] = NO_FILTER,
    district: Optional[str] = NO_FILTER,
    working_now: bool = False,
    sort_by: Any = None,
) -> FilterSpec:
    """Normalise raw request values into a :class:`FilterSpec`.

    Unrecognised price or sort modes fall back to their defaults instead of
    failing; blank specialization/district values mean "no filter".
    """

    return FilterSpec(
        query=query or "",
        price_type=coerce_price_type(price_type),
        specialization=specialization or NO_FILTER,
        district=district or NO_FILTER,
        working_now=bool(working_now),
        sort_by=coerce_sort_by(sort_by),
    )


def run_listing(
    institutions: Iterable[Institution],
    spec: FilterSpec,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
    now: Optional[datetime] = None,
) -> ListingPage:
    filtered = filter_institutions(institutions, spec, now)
    ordered = sort_institutions(filtered, spec.sort_by)
    return ListingPage(
        items=paginate(ordered, page_size, page),
        total_count=len(ordered),
        total_pages=total_pages(len(ordered), page_size),
        page=page,
    )


class ListingPipeline:
    """Stateful listing view over an :class:`EntityStore`.

    Holds the active filter spec and page number. Every :meth:`view` call
    recomputes from the store, so collection changes show up immediately.
    """

    def __init__(
        self,
        store: EntityStore,
        page_size: int = DEFAULT_PAGE_SIZE,
        *,
        clock: Optional[Clock] = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size must be positive")
        self.store = store
        self.page_size = page_size
        self._clock = clock or datetime.now
        self._spec = FilterSpec()
        self._page = 1

    @property
    def spec(self) -> FilterSpec:
        return self._spec

    @property
    def page(self) -> int:
        return self._page

    def set_filters(self, spec: FilterSpec) -> None:
        if spec != self._spec:
            logger.debug("Filters changed %s -> %s; back to page 1", self._spec, spec)
            self._spec = spec
            self._page = 1

    def update_filters(self, **changes: Any) -> None:
        self.set_filters(replace(self._spec, **changes))

    def clear_filters(self) -> None:
        self.set_filters(FilterSpec())

    def go_to(self, page: int) -> None:
        self._page = page

    def next_page(self) -> None:
        self._page = min(self._page + 1, self.total_pages())

    def previous_page(self) -> None:
        self._page = max(1, min(self._page - 1, self.total_pages()))

    def total_pages(self) -> int:
        return self.view().total_pages

    def view(self, now: Optional[datetime] = None) -> ListingPage:
        if now is None and self._spec.working_now:
            now = self._clock()
        return run_listing(self.store.institutions, self._spec, self._page, self.page_size, now)


__all__ = [
    "Clock",
    "coerce_price_type",
    "build_filter_spec",
    "run_listing",
    "ListingPipeline",
]
