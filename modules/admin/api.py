from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from modules.directory.api import get_service, translate_errors
from modules.directory.schemas import (
    DoctorIn,
    DoctorOut,
    DoctorPatch,
    InstitutionIn,
    InstitutionOut,
    InstitutionPatch,
    NewsIn,
    NewsOut,
    ReviewOut,
)
from modules.directory.services import DirectoryService

from .exceptions import AuthenticationError, RegistrationError
from .schemas import AdminOut, AdminStatsOut, LoginIn, ModerationEntryOut, ModerationQueueOut, RegisterIn
from .services import AdminAuthService


security = HTTPBasic(auto_error=False)


def get_auth_service(request: Request) -> AdminAuthService:
    return request.app.state.admin_auth


def require_admin(
    credentials: HTTPBasicCredentials | None = Depends(security),
    auth: AdminAuthService = Depends(get_auth_service),
) -> str:
    unauthorized = HTTPException(
        status_code=401,
        detail="Invalid administrator credentials",
        headers={"WWW-Authenticate": "Basic"},
    )
    if credentials is None:
        raise unauthorized
    try:
        return auth.login(credentials.username, credentials.password)
    except AuthenticationError as exc:
        raise unauthorized from exc


auth_router = APIRouter(prefix="/api/admin", tags=["admin"])
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# ----------------------------------------------------------------------
# Accounts
# ----------------------------------------------------------------------
@auth_router.post("/register", response_model=AdminOut, status_code=201)
def register(payload: RegisterIn, auth: AdminAuthService = Depends(get_auth_service)):
    try:
        account = auth.register(
            payload.username,
            payload.email,
            payload.password,
            payload.confirm_password,
            payload.full_name,
            payload.position or "",
        )
    except RegistrationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return AdminOut.from_model(account)


@auth_router.post("/login")
def login(payload: LoginIn, auth: AdminAuthService = Depends(get_auth_service)):
    try:
        username = auth.login(payload.username, payload.password)
    except AuthenticationError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    return {"status": "ok", "username": username}


# ----------------------------------------------------------------------
# Institutions and doctors
# ----------------------------------------------------------------------
@router.post("/institutions", response_model=InstitutionOut, status_code=201)
def create_institution(payload: InstitutionIn, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        institution = service.add_institution(payload.model_dump(exclude_none=True))
    return InstitutionOut.from_model(institution, open_now=service.is_open_now(institution))


@router.patch("/institutions/{institution_id}", response_model=InstitutionOut)
def update_institution(
    institution_id: str,
    payload: InstitutionPatch,
    service: DirectoryService = Depends(get_service),
):
    with translate_errors():
        institution = service.update_institution(institution_id, payload.model_dump(exclude_unset=True))
    return InstitutionOut.from_model(institution, open_now=service.is_open_now(institution))


@router.delete("/institutions/{institution_id}")
def delete_institution(institution_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        service.delete_institution(institution_id)
    return {"status": "ok"}


@router.post("/institutions/{institution_id}/doctors", response_model=DoctorOut, status_code=201)
def add_doctor(institution_id: str, payload: DoctorIn, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        doctor = service.add_doctor(institution_id, payload.model_dump())
    return DoctorOut.from_model(doctor)


@router.patch("/institutions/{institution_id}/doctors/{doctor_id}", response_model=DoctorOut)
def update_doctor(
    institution_id: str,
    doctor_id: str,
    payload: DoctorPatch,
    service: DirectoryService = Depends(get_service),
):
    with translate_errors():
        doctor = service.update_doctor(institution_id, doctor_id, payload.model_dump(exclude_unset=True))
    return DoctorOut.from_model(doctor)


@router.delete("/institutions/{institution_id}/doctors/{doctor_id}")
def remove_doctor(institution_id: str, doctor_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        service.remove_doctor(institution_id, doctor_id)
    return {"status": "ok"}


# ----------------------------------------------------------------------
# Review moderation
# ----------------------------------------------------------------------
@router.get("/reviews", response_model=ModerationQueueOut)
def moderation_queue(service: DirectoryService = Depends(get_service)):
    return ModerationQueueOut(
        pending=[ModerationEntryOut.from_model(e) for e in service.pending_reviews()],
        recent_approved=[ModerationEntryOut.from_model(e) for e in service.recent_approved_reviews()],
    )


@router.post("/reviews/{review_id}/approve", response_model=ReviewOut)
def approve_review(review_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        review = service.approve_review(review_id)
    return ReviewOut.from_model(review)


@router.delete("/reviews/{review_id}")
def delete_review(review_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        service.delete_review(review_id)
    return {"status": "ok"}


# ----------------------------------------------------------------------
# News
# ----------------------------------------------------------------------
@router.get("/news", response_model=list[NewsOut])
def list_news_newest_first(service: DirectoryService = Depends(get_service)):
    return [NewsOut.from_model(item) for item in service.news_newest_first()]


@router.post("/news", response_model=NewsOut, status_code=201)
def create_news(payload: NewsIn, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        item = service.add_news(payload.model_dump(exclude_none=True))
    return NewsOut.from_model(item)


@router.delete("/news/{news_id}")
def delete_news(news_id: str, service: DirectoryService = Depends(get_service)):
    with translate_errors():
        service.delete_news(news_id)
    return {"status": "ok"}


# ----------------------------------------------------------------------
# System overview
# ----------------------------------------------------------------------
@router.get("/stats", response_model=AdminStatsOut)
def admin_stats(service: DirectoryService = Depends(get_service)):
    return AdminStatsOut.from_model(service.admin_stats())


__all__ = ["auth_router", "router", "get_auth_service", "require_admin"]
