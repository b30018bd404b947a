from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from modules.directory.schemas import ReviewOut
from modules.directory.services import AdminStats, ModerationEntry

from .models import AdminAccount


class RegisterIn(BaseModel):
    username: str
    email: str
    password: str
    confirm_password: str
    full_name: str
    position: Optional[str] = ""


class LoginIn(BaseModel):
    username: str
    password: str


class AdminOut(BaseModel):
    username: str
    email: str
    full_name: str
    position: str = ""
    registered_at: str = ""

    @classmethod
    def from_model(cls, model: AdminAccount) -> "AdminOut":
        return cls(**model.to_dict())


class ModerationEntryOut(BaseModel):
    review: ReviewOut
    institution_name: str

    @classmethod
    def from_model(cls, entry: ModerationEntry) -> "ModerationEntryOut":
        return cls(review=ReviewOut.from_model(entry.review), institution_name=entry.institution_name)


class AdminStatsOut(BaseModel):
    institutions: int
    doctors: int
    approved_reviews: int
    pending_reviews: int
    services: int
    districts: int

    @classmethod
    def from_model(cls, stats: AdminStats) -> "AdminStatsOut":
        return cls(
            institutions=stats.institutions,
            doctors=stats.doctors,
            approved_reviews=stats.approved_reviews,
            pending_reviews=stats.pending_reviews,
            services=stats.services,
            districts=stats.districts,
        )


class ModerationQueueOut(BaseModel):
    pending: list[ModerationEntryOut] = Field(default_factory=list)
    recent_approved: list[ModerationEntryOut] = Field(default_factory=list)


__all__ = ["RegisterIn", "LoginIn", "AdminOut", "AdminStatsOut", "ModerationEntryOut", "ModerationQueueOut"]
