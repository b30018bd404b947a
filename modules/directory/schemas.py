"""Request/response schemas for the directory HTTP API."""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from utils.timefmt import format_long_date

from .models import (
    DaySchedule,
    Doctor,
    Institution,
    InstitutionType,
    ListingPage,
    NewsCategory,
    NewsItem,
    Review,
)


_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _not_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


def _not_null(value: Any) -> Any:
    if value is None:
        raise ValueError("may be omitted but not null")
    return value


class DayScheduleSchema(BaseModel):
    open: str = ""
    close: str = ""
    is_working: bool = False

    @field_validator("open", "close")
    @classmethod
    def check_time(cls, value: str) -> str:
        value = value.strip()
        if value and not _HHMM.match(value):
            raise ValueError("time must be zero-padded 24h HH:MM")
        return value

    @model_validator(mode="after")
    def require_hours_on_working_days(self) -> "DayScheduleSchema":
        if self.is_working and not (self.open and self.close):
            raise ValueError("open and close are required on a working day")
        return self

    @classmethod
    def from_model(cls, model: DaySchedule) -> "DayScheduleSchema":
        return cls.model_construct(open=model.open, close=model.close, is_working=model.is_working)


class DoctorIn(BaseModel):
    name: str
    specialization: str
    experience: int = Field(default=0, ge=0)
    category: str = ""
    photo: Optional[str] = None
    working_hours: dict[str, DayScheduleSchema] = Field(default_factory=dict)

    @field_validator("name", "specialization")
    @classmethod
    def require_text(cls, value: str) -> str:
        return _not_blank(value)


class DoctorPatch(BaseModel):
    name: Optional[str] = None
    specialization: Optional[str] = None
    experience: Optional[int] = Field(default=None, ge=0)
    category: Optional[str] = None
    photo: Optional[str] = None
    working_hours: Optional[dict[str, DayScheduleSchema]] = None

    @field_validator("name", "specialization", "experience", "category", "working_hours")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _not_null(value)


class DoctorOut(BaseModel):
    id: str
    name: str
    specialization: str
    experience: int
    category: str
    photo: Optional[str] = None
    working_hours: dict[str, DayScheduleSchema] = Field(default_factory=dict)

    @classmethod
    def from_model(cls, model: Doctor) -> "DoctorOut":
        return cls(
            id=model.id,
            name=model.name,
            specialization=model.specialization,
            experience=model.experience,
            category=model.category,
            photo=model.photo,
            working_hours={day: DayScheduleSchema.from_model(s) for day, s in model.working_hours.items()},
        )


class InstitutionIn(BaseModel):
    name: str
    address: str
    phone: str
    email: str = ""
    website: Optional[str] = None
    type: InstitutionType = InstitutionType.clinic
    paid: bool = False
    working_hours: Optional[dict[str, DayScheduleSchema]] = Field(
        default=None, description="Omit to use the standard weekday schedule"
    )
    services: list[str] = Field(default_factory=list)
    photos: list[str] = Field(default_factory=list)
    description: str = ""
    rating: float = 0.0
    review_count: int = Field(default=0, ge=0)
    district: str = ""
    lat: float = 0.0
    lng: float = 0.0
    achievements: list[str] = Field(default_factory=list)
    years_of_work: int = Field(default=0, ge=0)

    @field_validator("name", "address", "phone")
    @classmethod
    def require_text(cls, value: str) -> str:
        return _not_blank(value)


class InstitutionPatch(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    type: Optional[InstitutionType] = None
    paid: Optional[bool] = None
    working_hours: Optional[dict[str, DayScheduleSchema]] = None
    services: Optional[list[str]] = None
    photos: Optional[list[str]] = None
    description: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = Field(default=None, ge=0)
    district: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    achievements: Optional[list[str]] = None
    years_of_work: Optional[int] = Field(default=None, ge=0)

    # website is the only field a client may clear with null
    @field_validator(
        "name", "address", "phone", "email", "type", "paid", "working_hours", "services", "photos",
        "description", "rating", "review_count", "district", "lat", "lng", "achievements", "years_of_work",
    )
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        return _not_null(value)


class InstitutionOut(BaseModel):
    id: str
    name: str
    address: str
    phone: str
    email: str
    website: Optional[str] = None
    type: InstitutionType
    type_label: str
    paid: bool
    working_hours: dict[str, DayScheduleSchema]
    is_open_now: bool
    services: list[str]
    doctors: list[DoctorOut]
    photos: list[str]
    description: str
    rating: float
    review_count: int
    district: str
    lat: float
    lng: float
    achievements: list[str]
    years_of_work: int

    @classmethod
    def from_model(cls, model: Institution, *, open_now: bool = False) -> "InstitutionOut":
        return cls(
            id=model.id,
            name=model.name,
            address=model.address,
            phone=model.phone,
            email=model.email,
            website=model.website,
            type=model.type,
            type_label=model.type_label,
            paid=model.paid,
            working_hours={day: DayScheduleSchema.from_model(s) for day, s in model.working_hours.items()},
            is_open_now=open_now,
            services=list(model.services),
            doctors=[DoctorOut.from_model(d) for d in model.doctors],
            photos=list(model.photos),
            description=model.description,
            rating=model.rating,
            review_count=model.review_count,
            district=model.district,
            lat=model.lat,
            lng=model.lng,
            achievements=list(model.achievements),
            years_of_work=model.years_of_work,
        )


class ListingOut(BaseModel):
    items: list[InstitutionOut]
    total_count: int
    total_pages: int
    page: int

    @classmethod
    def from_page(cls, page: ListingPage, open_now) -> "ListingOut":
        return cls(
            items=[InstitutionOut.from_model(i, open_now=open_now(i)) for i in page.items],
            total_count=page.total_count,
            total_pages=page.total_pages,
            page=page.page,
        )


class ReviewIn(BaseModel):
    author_name: str
    rating: int = Field(default=5, ge=1, le=5)
    comment: str

    @field_validator("author_name", "comment")
    @classmethod
    def require_text(cls, value: str) -> str:
        return _not_blank(value)


class ReviewOut(BaseModel):
    id: str
    institution_id: str
    author_name: str
    rating: int
    comment: str
    date: str
    date_label: str
    approved: bool

    @classmethod
    def from_model(cls, model: Review) -> "ReviewOut":
        return cls(
            id=model.id,
            institution_id=model.institution_id,
            author_name=model.author_name,
            rating=model.rating,
            comment=model.comment,
            date=model.date,
            date_label=format_long_date(model.date, default=model.date),
            approved=model.approved,
        )


class InstitutionDetailOut(InstitutionOut):
    reviews: list[ReviewOut] = Field(default_factory=list)


class NewsIn(BaseModel):
    title: str
    summary: str
    content: str
    category: NewsCategory = NewsCategory.health
    date: Optional[str] = None
    image_url: Optional[str] = None
    source: Optional[str] = None

    @field_validator("title", "summary", "content")
    @classmethod
    def require_text(cls, value: str) -> str:
        return _not_blank(value)


class NewsOut(BaseModel):
    id: str
    title: str
    summary: str
    content: str
    category: NewsCategory
    category_label: str
    date: str
    date_label: str
    image_url: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_model(cls, model: NewsItem) -> "NewsOut":
        return cls(
            id=model.id,
            title=model.title,
            summary=model.summary,
            content=model.content,
            category=model.category,
            category_label=model.category_label,
            date=model.date,
            date_label=format_long_date(model.date, default=model.date),
            image_url=model.image_url,
            source=model.source,
        )


class OptionOut(BaseModel):
    value: str
    label: str


class MetaOut(BaseModel):
    districts: list[OptionOut]
    specializations: list[str]
    quick_searches: list[str]
    sort_options: list[OptionOut]
    price_options: list[OptionOut]
    institution_types: list[OptionOut]
    news_categories: list[OptionOut]
    page_size: int


class StatsOut(BaseModel):
    total: int
    free: int
    paid: int
    approved_reviews: int


__all__ = [
    "DayScheduleSchema",
    "DoctorIn",
    "DoctorPatch",
    "DoctorOut",
    "InstitutionIn",
    "InstitutionPatch",
    "InstitutionOut",
    "InstitutionDetailOut",
    "ListingOut",
    "ReviewIn",
    "ReviewOut",
    "NewsIn",
    "NewsOut",
    "OptionOut",
    "MetaOut",
    "StatsOut",
]
