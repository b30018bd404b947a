from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from .exceptions import NotFoundError, ValidationError
from .models import INSTITUTION_TYPE_LABELS, NEWS_CATEGORY_LABELS, NO_FILTER, NewsCategory
from .options import DISTRICTS, PRICE_LABELS, QUICK_SEARCHES, SORT_LABELS, SPECIALIZATIONS
from .pipeline import build_filter_spec
from .schemas import (
    DoctorOut,
    InstitutionDetailOut,
    ListingOut,
    MetaOut,
    NewsOut,
    OptionOut,
    ReviewIn,
    ReviewOut,
    StatsOut,
)
from .services import DirectoryService


router = APIRouter(prefix="/api/directory", tags=["directory"])


def get_service(request: Request) -> DirectoryService:
    return request.app.state.directory_service


@contextmanager
def translate_errors() -> Iterator[None]:
    """Turn domain exceptions into HTTP errors."""
    try:
        yield
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _options(labels: dict) -> list[OptionOut]:
    return [OptionOut(value=str(getattr(key, "value", key)), label=label) for key, label in labels.items()]


@router.get("/institutions", response_model=ListingOut)
def list_institutions(
    q: str = "",
    price_type: str = "all",
    specialization: str = NO_FILTER,
    district: str = NO_FILTER,
    working_now: bool = False,
    sort_by: str = "alphabetical",
    page: int = 1,
    service: DirectoryService = Depends(get_service),
):
    spec = build_filter_spec(q, price_type, specialization, district, working_now, sort_by)
    listing = service.listing(spec, page)
    return ListingOut.from_page(listing, service.is_open_now)


@router.get("/institutions/{institution_id}", response_model=InstitutionDetailOut)
def get_institution(institution_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        institution = service.get_institution(institution_id)
    base = InstitutionDetailOut.from_model(institution, open_now=service.is_open_now(institution))
    base.reviews = [ReviewOut.from_model(r) for r in service.public_reviews(institution_id)]
    return base


@router.get("/institutions/{institution_id}/doctors", response_model=list[DoctorOut])
def list_doctors(institution_id: str, q: str = "", service: DirectoryService = Depends(get_service)):
    with translate_errors():
        doctors = service.find_doctors(institution_id, q)
    return [DoctorOut.from_model(d) for d in doctors]


@router.get("/institutions/{institution_id}/reviews", response_model=list[ReviewOut])
def list_reviews(institution_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        service.get_institution(institution_id)
    return [ReviewOut.from_model(r) for r in service.public_reviews(institution_id)]


@router.post("/institutions/{institution_id}/reviews", response_model=ReviewOut, status_code=201)
def submit_review(institution_id: str, payload: ReviewIn, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        review = service.submit_review(institution_id, payload.author_name, payload.rating, payload.comment)
    return ReviewOut.from_model(review)


@router.get("/news", response_model=list[NewsOut])
def list_news(category: Optional[NewsCategory] = None, service: DirectoryService = Depends(get_service)):
    return [NewsOut.from_model(item) for item in service.list_news(category)]


@router.get("/meta", response_model=MetaOut)
def get_meta(service: DirectoryService = Depends(get_service)):
    return MetaOut(
        districts=[OptionOut(value=value, label=label) for value, label in DISTRICTS.items()],
        specializations=list(SPECIALIZATIONS),
        quick_searches=list(QUICK_SEARCHES),
        sort_options=_options(SORT_LABELS),
        price_options=_options(PRICE_LABELS),
        institution_types=_options(INSTITUTION_TYPE_LABELS),
        news_categories=_options(NEWS_CATEGORY_LABELS),
        page_size=service.page_size,
    )


@router.get("/stats", response_model=StatsOut)
def get_stats(service: DirectoryService = Depends(get_service)):
    stats = service.stats()
    return StatsOut(total=stats.total, free=stats.free, paid=stats.paid, approved_reviews=stats.approved_reviews)


__all__ = ["router", "get_service", "translate_errors"]
