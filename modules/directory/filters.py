"""Filter predicates applied to institutions in the listing view."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Mapping, Optional

from .models import (
    NO_FILTER,
    WEEKDAYS,
    DaySchedule,
    Doctor,
    FilterSpec,
    Institution,
    PriceType,
)


def search_text(institution: Institution) -> str:
    """Lower-cased text the free-text query is matched against."""

    parts = [institution.name, institution.description, institution.address]
    parts.extend(institution.services)
    parts.extend(f"{doctor.name} {doctor.specialization}" for doctor in institution.doctors)
    return " ".join(parts).lower()


def matches_query(institution: Institution, query: str) -> bool:
    if not query:
        return True
    return query.lower() in search_text(institution)


def matches_price(institution: Institution, price_type: PriceType) -> bool:
    if price_type == PriceType.free:
        return not institution.paid
    if price_type == PriceType.paid:
        return institution.paid
    return True


def matches_specialization(institution: Institution, specialization: str) -> bool:
    if not specialization or specialization == NO_FILTER:
        return True
    needle = specialization.lower()
    if any(needle in service.lower() for service in institution.services):
        return True
    return any(needle in doctor.specialization.lower() for doctor in institution.doctors)


def matches_district(institution: Institution, district: str) -> bool:
    if not district or district == NO_FILTER:
        return True
    return institution.district == district


def is_open_now(schedule: Mapping[str, DaySchedule], now: Optional[datetime] = None) -> bool:
    """Whether ``schedule`` has the place open at ``now`` (local time).

    Missing or malformed entries for the day count as closed. ``HH:MM``
    strings compare chronologically, bounds are inclusive.
    """

    now = now or datetime.now()
    day = WEEKDAYS[now.weekday()]
    entry = schedule.get(day)
    if not isinstance(entry, DaySchedule) or not entry.is_working:
        return False
    current = now.strftime("%H:%M")
    return entry.open <= current <= entry.close


def matches(institution: Institution, spec: FilterSpec, now: Optional[datetime] = None) -> bool:
    """True when ``institution`` passes every active filter of ``spec``."""

    if not matches_query(institution, spec.query):
        return False
    if not matches_price(institution, spec.price_type):
        return False
    if not matches_specialization(institution, spec.specialization):
        return False
    if not matches_district(institution, spec.district):
        return False
    if spec.working_now and not is_open_now(institution.working_hours, now):
        return False
    return True


def filter_institutions(
    institutions: Iterable[Institution],
    spec: FilterSpec,
    now: Optional[datetime] = None,
) -> List[Institution]:
    # one clock reading per pass so every record sees the same instant
    if spec.working_now and now is None:
        now = datetime.now()
    return [institution for institution in institutions if matches(institution, spec, now)]


def filter_doctors(doctors: Iterable[Doctor], text: str) -> List[Doctor]:
    """Doctors whose name, specialization or category contains ``text``."""

    needle = text.lower()
    return [
        doctor
        for doctor in doctors
        if needle in doctor.name.lower()
        or needle in doctor.specialization.lower()
        or needle in doctor.category.lower()
    ]


__all__ = [
    "search_text",
    "matches_query",
    "matches_price",
    "matches_specialization",
    "matches_district",
    "is_open_now",
    "matches",
    "filter_institutions",
    "filter_doctors",
]
