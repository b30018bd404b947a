"""Domain models for the medical institution directory."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

WEEKDAY_LABELS = {
    "monday": "Понедельник",
    "tuesday": "Вторник",
    "wednesday": "Среда",
    "thursday": "Четверг",
    "friday": "Пятница",
    "saturday": "Суббота",
    "sunday": "Воскресенье",
}

UNKNOWN_INSTITUTION = "Неизвестное учреждение"


class InstitutionType(str, Enum):
    hospital = "hospital"
    clinic = "clinic"
    polyclinic = "polyclinic"
    center = "center"
    pharmacy = "pharmacy"


INSTITUTION_TYPE_LABELS = {
    InstitutionType.hospital: "Больница",
    InstitutionType.clinic: "Клиника",
    InstitutionType.polyclinic: "Поликлиника",
    InstitutionType.center: "Медицинский центр",
    InstitutionType.pharmacy: "Аптека",
}


class NewsCategory(str, Enum):
    health = "health"
    announcement = "announcement"
    prevention = "prevention"
    research = "research"
    events = "events"


NEWS_CATEGORY_LABELS = {
    NewsCategory.health: "Здоровье",
    NewsCategory.announcement: "Объявления",
    NewsCategory.prevention: "Профилактика",
    NewsCategory.research: "Исследования",
    NewsCategory.events: "События",
}


class PriceType(str, Enum):
    all = "all"
    free = "free"
    paid = "paid"


class SortBy(str, Enum):
    alphabetical = "alphabetical"
    price = "price"
    rating = "rating"


NO_FILTER = "none"


@dataclass(slots=True)
class DaySchedule:
    """Opening hours for a single weekday; times are zero-padded ``HH:MM``."""

    open: str = ""
    close: str = ""
    is_working: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {"open": self.open, "close": self.close, "is_working": self.is_working}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DaySchedule":
        working = data.get("is_working", data.get("isWorking", False))
        return cls(
            open=str(data.get("open") or ""),
            close=str(data.get("close") or ""),
            is_working=bool(working),
        )


WeeklySchedule = Dict[str, DaySchedule]


def default_schedule() -> WeeklySchedule:
    """Weekly hours given to newly registered institutions."""

    schedule = {day: DaySchedule("08:00", "18:00", True) for day in WEEKDAYS[:5]}
    schedule["saturday"] = DaySchedule("09:00", "14:00", True)
    schedule["sunday"] = DaySchedule("", "", False)
    return schedule


def schedule_to_dict(schedule: Mapping[str, DaySchedule]) -> Dict[str, Dict[str, object]]:
    return {day: entry.to_dict() for day, entry in schedule.items()}


def schedule_from_dict(data: Optional[Mapping[str, Any]]) -> WeeklySchedule:
    schedule: WeeklySchedule = {}
    for day, entry in (data or {}).items():
        if isinstance(entry, DaySchedule):
            schedule[str(day).lower()] = entry
        elif isinstance(entry, Mapping):
            schedule[str(day).lower()] = DaySchedule.from_dict(entry)
        # anything else is a malformed entry and is treated as a closed day
    return schedule


@dataclass(slots=True)
class Doctor:
    id: str
    name: str
    specialization: str = ""
    experience: int = 0
    category: str = ""
    photo: Optional[str] = None
    working_hours: WeeklySchedule = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["working_hours"] = schedule_to_dict(self.working_hours)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Doctor":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            specialization=str(data.get("specialization", "")),
            experience=int(data.get("experience") or 0),
            category=str(data.get("category", "")),
            photo=data.get("photo") or None,
            working_hours=schedule_from_dict(data.get("working_hours")),
        )


@dataclass(slots=True)
class Institution:
    """A medical facility listed in the directory."""

    id: str
    name: str
    address: str = ""
    phone: str = ""
    email: str = ""
    website: Optional[str] = None
    type: InstitutionType = InstitutionType.clinic
    paid: bool = False
    working_hours: WeeklySchedule = field(default_factory=dict)
    services: List[str] = field(default_factory=list)
    doctors: List[Doctor] = field(default_factory=list)
    photos: List[str] = field(default_factory=list)
    description: str = ""
    rating: float = 0.0
    review_count: int = 0
    district: str = ""
    lat: float = 0.0
    lng: float = 0.0
    achievements: List[str] = field(default_factory=list)
    years_of_work: int = 0

    @property
    def type_label(self) -> str:
        return INSTITUTION_TYPE_LABELS.get(self.type, str(self.type))

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
            "website": self.website,
            "type": self.type.value,
            "paid": self.paid,
            "working_hours": schedule_to_dict(self.working_hours),
            "services": list(self.services),
            "doctors": [doctor.to_dict() for doctor in self.doctors],
            "photos": list(self.photos),
            "description": self.description,
            "rating": self.rating,
            "review_count": self.review_count,
            "district": self.district,
            "lat": self.lat,
            "lng": self.lng,
            "achievements": list(self.achievements),
            "years_of_work": self.years_of_work,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Institution":
        doctors = [
            entry if isinstance(entry, Doctor) else Doctor.from_dict(entry)
            for entry in data.get("doctors") or []
        ]
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            address=str(data.get("address", "")),
            phone=str(data.get("phone", "")),
            email=str(data.get("email", "")),
            website=data.get("website") or None,
            type=InstitutionType(data.get("type") or InstitutionType.clinic),
            paid=bool(data.get("paid", False)),
            working_hours=schedule_from_dict(data.get("working_hours")),
            services=[str(s) for s in data.get("services") or []],
            doctors=doctors,
            photos=[str(p) for p in data.get("photos") or []],
            description=str(data.get("description", "")),
            rating=float(data.get("rating") or 0.0),
            review_count=int(data.get("review_count") or 0),
            district=str(data.get("district", "")),
            lat=float(data.get("lat") or 0.0),
            lng=float(data.get("lng") or 0.0),
            achievements=[str(a) for a in data.get("achievements") or []],
            years_of_work=int(data.get("years_of_work") or 0),
        )


INSTITUTION_FIELDS = frozenset(Institution.__dataclass_fields__)


@dataclass(slots=True)
class Review:
    id: str
    institution_id: str
    author_name: str
    rating: int
    comment: str
    date: str
    approved: bool = False

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(slots=True)
class NewsItem:
    id: str
    title: str
    summary: str
    content: str
    category: NewsCategory
    date: str
    image_url: Optional[str] = None
    source: Optional[str] = None

    @property
    def category_label(self) -> str:
        return NEWS_CATEGORY_LABELS.get(self.category, str(self.category))

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["category"] = self.category.value
        return data


@dataclass(slots=True, frozen=True)
class FilterSpec:
    """Search, filter and sort parameters chosen by a user."""

    query: str = ""
    price_type: PriceType = PriceType.all
    specialization: str = NO_FILTER
    district: str = NO_FILTER
    working_now: bool = False
    sort_by: SortBy = SortBy.alphabetical

    @property
    def active_filter_count(self) -> int:
        return sum(
            (
                self.price_type != PriceType.all,
                self.specialization != NO_FILTER,
                self.district != NO_FILTER,
                self.working_now,
            )
        )


@dataclass(slots=True)
class ListingPage:
    items: List[Institution]
    total_count: int
    total_pages: int
    page: int


__all__ = [
    "WEEKDAYS",
    "WEEKDAY_LABELS",
    "UNKNOWN_INSTITUTION",
    "InstitutionType",
    "INSTITUTION_TYPE_LABELS",
    "NewsCategory",
    "NEWS_CATEGORY_LABELS",
    "PriceType",
    "SortBy",
    "NO_FILTER",
    "DaySchedule",
    "WeeklySchedule",
    "default_schedule",
    "schedule_to_dict",
    "schedule_from_dict",
    "Doctor",
    "Institution",
    "INSTITUTION_FIELDS",
    "Review",
    "NewsItem",
    "FilterSpec",
    "ListingPage",
]
