"""Service layer providing the directory's read models and admin actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Mapping, Optional

from .exceptions import NotFoundError, ValidationError
from .filters import filter_doctors, is_open_now
from .models import (
    UNKNOWN_INSTITUTION,
    Doctor,
    FilterSpec,
    Institution,
    ListingPage,
    NewsCategory,
    NewsItem,
    Review,
)
from .pagination import DEFAULT_PAGE_SIZE
from .pipeline import Clock, ListingPipeline
from .repository import EntityStore

logger = logging.getLogger(__name__)

RECENT_APPROVED_LIMIT = 10
MIN_REVIEW_RATING = 1
MAX_REVIEW_RATING = 5


@dataclass(slots=True)
class ModerationEntry:
    review: Review
    institution_name: str


@dataclass(slots=True)
class DirectoryStats:
    total: int
    free: int
    paid: int
    approved_reviews: int


@dataclass(slots=True)
class AdminStats:
    """Counts shown on the admin system overview."""

    institutions: int
    doctors: int
    approved_reviews: int
    pending_reviews: int
    services: int
    districts: int


def _require(data: Mapping[str, Any], *names: str) -> None:
    missing = [name for name in names if not str(data.get(name) or "").strip()]
    if missing:
        raise ValidationError(f"Required fields are empty: {', '.join(missing)}")


class DirectoryService:
    """High-level API consumed by the HTTP routers."""

    def __init__(
        self,
        store: EntityStore,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        clock: Optional[Clock] = None,
    ) -> None:
        self.store = store
        self.page_size = page_size
        self._clock = clock or datetime.now

    def now(self) -> datetime:
        return self._clock()

    # ------------------------------------------------------------------
    # Public listing and details
    # ------------------------------------------------------------------
    def listing(self, spec: FilterSpec, page: int = 1) -> ListingPage:
        pipeline = ListingPipeline(self.store, self.page_size, clock=self._clock)
        pipeline.set_filters(spec)
        pipeline.go_to(page)
        return pipeline.view()

    def get_institution(self, institution_id: str) -> Institution:
        institution = self.store.get_institution(institution_id)
        if institution is None:
            raise NotFoundError("Institution", institution_id)
        return institution

    def is_open_now(self, institution: Institution) -> bool:
        return is_open_now(institution.working_hours, self._clock())

    def public_reviews(self, institution_id: str) -> List[Review]:
        return [
            review
            for review in self.store.reviews
            if review.institution_id == institution_id and review.approved
        ]

    def submit_review(
        self,
        institution_id: str,
        author_name: str,
        rating: int,
        comment: str,
    ) -> Review:
        self.get_institution(institution_id)
        payload = {
            "institution_id": institution_id,
            "author_name": author_name.strip(),
            "rating": rating,
            "comment": comment.strip(),
        }
        _require(payload, "author_name", "comment")
        if not MIN_REVIEW_RATING <= int(rating) <= MAX_REVIEW_RATING:
            raise ValidationError(f"Review rating must be {MIN_REVIEW_RATING}..{MAX_REVIEW_RATING}")
        review = self.store.add_review(payload)
        logger.info("Review %s queued for moderation", review.id)
        return review

    def list_news(self, category: Optional[NewsCategory] = None) -> List[NewsItem]:
        items = self.store.news
        if category is not None:
            items = [item for item in items if item.category == category]
        return items

    def stats(self) -> DirectoryStats:
        institutions = self.store.institutions
        free = sum(1 for i in institutions if not i.paid)
        return DirectoryStats(
            total=len(institutions),
            free=free,
            paid=len(institutions) - free,
            approved_reviews=sum(1 for r in self.store.reviews if r.approved),
        )

    def admin_stats(self) -> AdminStats:
        institutions = self.store.institutions
        reviews = self.store.reviews
        approved = sum(1 for r in reviews if r.approved)
        return AdminStats(
            institutions=len(institutions),
            doctors=sum(len(i.doctors) for i in institutions),
            approved_reviews=approved,
            pending_reviews=len(reviews) - approved,
            services=sum(len(i.services) for i in institutions),
            districts=len({i.district for i in institutions}),
        )

    # ------------------------------------------------------------------
    # Moderation
    # ------------------------------------------------------------------
    def institution_name(self, institution_id: str) -> str:
        institution = self.store.get_institution(institution_id)
        return institution.name if institution else UNKNOWN_INSTITUTION

    def pending_reviews(self) -> List[ModerationEntry]:
        return [
            ModerationEntry(review, self.institution_name(review.institution_id))
            for review in self.store.reviews
            if not review.approved
        ]

    def recent_approved_reviews(self, limit: int = RECENT_APPROVED_LIMIT) -> List[ModerationEntry]:
        approved = [r for r in self.store.reviews if r.approved][:limit]
        return [ModerationEntry(r, self.institution_name(r.institution_id)) for r in approved]

    def approve_review(self, review_id: str) -> Review:
        if not self.store.approve_review(review_id):
            raise NotFoundError("Review", review_id)
        logger.info("Review %s approved", review_id)
        return self.store.get_review(review_id)

    def delete_review(self, review_id: str) -> None:
        if not self.store.delete_review(review_id):
            raise NotFoundError("Review", review_id)
        logger.info("Review %s deleted", review_id)

    # ------------------------------------------------------------------
    # Institution management
    # ------------------------------------------------------------------
    def add_institution(self, data: Mapping[str, Any]) -> Institution:
        _require(data, "name", "address", "phone")
        institution = self.store.add_institution(data)
        logger.info("Institution %s created: %s", institution.id, institution.name)
        return institution

    def update_institution(self, institution_id: str, fields: Mapping[str, Any]) -> Institution:
        if "name" in fields:
            _require(fields, "name")
        if not self.store.update_institution(institution_id, fields):
            raise NotFoundError("Institution", institution_id)
        return self.get_institution(institution_id)

    def delete_institution(self, institution_id: str) -> None:
        if not self.store.delete_institution(institution_id):
            raise NotFoundError("Institution", institution_id)
        logger.info("Institution %s deleted", institution_id)

    def add_doctor(self, institution_id: str, data: Mapping[str, Any]) -> Doctor:
        _require(data, "name", "specialization")
        doctor = self.store.add_doctor(institution_id, data)
        if doctor is None:
            raise NotFoundError("Institution", institution_id)
        return doctor

    def update_doctor(self, institution_id: str, doctor_id: str, fields: Mapping[str, Any]) -> Doctor:
        if not self.store.update_doctor(institution_id, doctor_id, fields):
            raise NotFoundError("Doctor", doctor_id)
        institution = self.get_institution(institution_id)
        return next(d for d in institution.doctors if d.id == doctor_id)

    def find_doctors(self, institution_id: str, text: str = "") -> List[Doctor]:
        """Doctors of one institution matching name, specialization or category."""
        return filter_doctors(self.get_institution(institution_id).doctors, text)

    def remove_doctor(self, institution_id: str, doctor_id: str) -> None:
        if not self.store.remove_doctor(institution_id, doctor_id):
            raise NotFoundError("Doctor", doctor_id)

    # ------------------------------------------------------------------
    # News management
    # ------------------------------------------------------------------
    def add_news(self, data: Mapping[str, Any]) -> NewsItem:
        _require(data, "title", "summary", "content")
        item = self.store.add_news(data)
        logger.info("News item %s published", item.id)
        return item

    def news_newest_first(self) -> List[NewsItem]:
        """News in reverse insertion order, as the admin list shows it."""
        return list(reversed(self.store.news))

    def delete_news(self, news_id: str) -> None:
        if not self.store.delete_news(news_id):
            raise NotFoundError("News item", news_id)


__all__ = ["AdminStats", "DirectoryService", "DirectoryStats", "ModerationEntry"]
