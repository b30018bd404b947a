"""In-memory entity store for institutions, reviews and news."""

from __future__ import annotations

import itertools
import logging
from datetime import date
from typing import Any, Callable, Iterable, List, Mapping, Optional
from uuid import uuid4

from .exceptions import ValidationError
from .models import (
    INSTITUTION_FIELDS,
    Doctor,
    Institution,
    NewsCategory,
    NewsItem,
    Review,
    default_schedule,
)

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]

MIN_RATING = 0.0
MAX_RATING = 5.0

NULLABLE_INSTITUTION_FIELDS = frozenset({"website"})
NULLABLE_DOCTOR_FIELDS = frozenset({"photo"})


def uuid_ids() -> IdFactory:
    return lambda: uuid4().hex


def counter_ids(prefix: str = "", start: int = 1) -> IdFactory:
    """Monotonic ids, handy for deterministic fixtures."""

    counter = itertools.count(start)
    return lambda: f"{prefix}{next(counter)}"


class EntityStore:
    """Single source of truth for the directory collections.

    Lookups are linear scans by id; collections hold tens of records.
    Mutations on unknown ids are ignored and reported through the ``bool``
    return value rather than by raising.
    """

    def __init__(
        self,
        *,
        id_factory: Optional[IdFactory] = None,
        today: Optional[Callable[[], date]] = None,
        rating_policy: str = "accept",
    ) -> None:
        self._new_id = id_factory or uuid_ids()
        self._today = today or date.today
        self.rating_policy = rating_policy
        self._institutions: List[Institution] = []
        self._reviews: List[Review] = []
        self._news: List[NewsItem] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def institutions(self) -> List[Institution]:
        return list(self._institutions)

    @property
    def reviews(self) -> List[Review]:
        return list(self._reviews)

    @property
    def news(self) -> List[NewsItem]:
        return list(self._news)

    def get_institution(self, institution_id: str) -> Optional[Institution]:
        return next((i for i in self._institutions if i.id == institution_id), None)

    def get_review(self, review_id: str) -> Optional[Review]:
        return next((r for r in self._reviews if r.id == review_id), None)

    def get_news(self, news_id: str) -> Optional[NewsItem]:
        return next((n for n in self._news if n.id == news_id), None)

    def load(
        self,
        institutions: Iterable[Institution] = (),
        reviews: Iterable[Review] = (),
        news: Iterable[NewsItem] = (),
    ) -> None:
        """Replace every collection, e.g. with seed fixtures."""
        self._institutions = list(institutions)
        self._reviews = list(reviews)
        self._news = list(news)
        logger.info(
            "Loaded %d institutions, %d reviews, %d news items",
            len(self._institutions),
            len(self._reviews),
            len(self._news),
        )

    # ------------------------------------------------------------------
    # Institutions
    # ------------------------------------------------------------------
    def add_institution(self, data: Mapping[str, Any]) -> Institution:
        payload = dict(data)
        payload["id"] = self._new_id()
        payload.setdefault("working_hours", default_schedule())
        institution = Institution.from_dict(payload)
        institution.rating = self._checked_rating(institution.rating)
        self._institutions.append(institution)
        logger.debug("Added institution %s (%s)", institution.id, institution.name)
        return institution

    def update_institution(self, institution_id: str, fields: Mapping[str, Any]) -> bool:
        for idx, current in enumerate(self._institutions):
            if current.id != institution_id:
                continue
            patch = {}
            for key, value in fields.items():
                if key == "id":
                    continue
                if key not in INSTITUTION_FIELDS:
                    logger.warning("Ignoring unknown institution field %r", key)
                    continue
                if value is None and key not in NULLABLE_INSTITUTION_FIELDS:
                    logger.warning("Ignoring null for institution field %r", key)
                    continue
                patch[key] = value
            merged = current.to_dict()
            merged.update(patch)
            updated = Institution.from_dict(merged)
            updated.rating = self._checked_rating(updated.rating)
            self._institutions[idx] = updated
            logger.debug("Updated institution %s: %s", institution_id, sorted(patch))
            return True
        logger.debug("update_institution: no institution %s", institution_id)
        return False

    def delete_institution(self, institution_id: str) -> bool:
        before = len(self._institutions)
        self._institutions = [i for i in self._institutions if i.id != institution_id]
        removed = len(self._institutions) != before
        if removed:
            # reviews stay behind as orphans
            logger.debug("Deleted institution %s", institution_id)
        return removed

    # ------------------------------------------------------------------
    # Doctors (nested inside an institution)
    # ------------------------------------------------------------------
    def add_doctor(self, institution_id: str, data: Mapping[str, Any]) -> Optional[Doctor]:
        institution = self.get_institution(institution_id)
        if institution is None:
            return None
        payload = dict(data)
        payload["id"] = self._new_id()
        doctor = Doctor.from_dict(payload)
        institution.doctors.append(doctor)
        logger.debug("Added doctor %s to %s", doctor.id, institution_id)
        return doctor

    def update_doctor(self, institution_id: str, doctor_id: str, fields: Mapping[str, Any]) -> bool:
        institution = self.get_institution(institution_id)
        if institution is None:
            return False
        for idx, current in enumerate(institution.doctors):
            if current.id != doctor_id:
                continue
            merged = current.to_dict()
            merged.update(
                {
                    k: v
                    for k, v in fields.items()
                    if k != "id" and (v is not None or k in NULLABLE_DOCTOR_FIELDS)
                }
            )
            institution.doctors[idx] = Doctor.from_dict(merged)
            return True
        return False

    def remove_doctor(self, institution_id: str, doctor_id: str) -> bool:
        institution = self.get_institution(institution_id)
        if institution is None:
            return False
        before = len(institution.doctors)
        institution.doctors = [d for d in institution.doctors if d.id != doctor_id]
        return len(institution.doctors) != before

    # ------------------------------------------------------------------
    # Reviews
    # ------------------------------------------------------------------
    def add_review(self, data: Mapping[str, Any]) -> Review:
        review = Review(
            id=self._new_id(),
            institution_id=str(data.get("institution_id", "")),
            author_name=str(data.get("author_name", "")),
            rating=int(data.get("rating", 5)),
            comment=str(data.get("comment", "")),
            date=self._today().isoformat(),
            approved=False,
        )
        self._reviews.append(review)
        logger.debug("Review %s submitted for %s", review.id, review.institution_id)
        return review

    def approve_review(self, review_id: str) -> bool:
        review = self.get_review(review_id)
        if review is None:
            return False
        review.approved = True
        logger.debug("Approved review %s", review_id)
        return True

    def delete_review(self, review_id: str) -> bool:
        before = len(self._reviews)
        self._reviews = [r for r in self._reviews if r.id != review_id]
        return len(self._reviews) != before

    # ------------------------------------------------------------------
    # News
    # ------------------------------------------------------------------
    def add_news(self, data: Mapping[str, Any]) -> NewsItem:
        item = NewsItem(
            id=self._new_id(),
            title=str(data.get("title", "")),
            summary=str(data.get("summary", "")),
            content=str(data.get("content", "")),
            category=NewsCategory(data.get("category") or NewsCategory.health),
            date=str(data.get("date") or self._today().isoformat()),
            image_url=data.get("image_url") or None,
            source=data.get("source") or None,
        )
        self._news.append(item)
        logger.debug("Added news item %s", item.id)
        return item

    def delete_news(self, news_id: str) -> bool:
        before = len(self._news)
        self._news = [n for n in self._news if n.id != news_id]
        return len(self._news) != before

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _checked_rating(self, rating: float) -> float:
        if MIN_RATING <= rating <= MAX_RATING or self.rating_policy == "accept":
            return rating
        if self.rating_policy == "clamp":
            clamped = min(max(rating, MIN_RATING), MAX_RATING)
            logger.debug("Clamped rating %s to %s", rating, clamped)
            return clamped
        raise ValidationError(f"Rating {rating} is outside [{MIN_RATING}, {MAX_RATING}]")


__all__ = ["EntityStore", "IdFactory", "uuid_ids", "counter_ids"]
