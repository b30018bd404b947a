"""Administrator accounts and the protected management API."""

from .exceptions import AuthenticationError, RegistrationError
from .models import AdminAccount
from .repository import AdminAccountRepository
from .services import AdminAuthService


def register_api(app) -> None:
    """Register account and management routes on ``app``."""
    from .api import auth_router, router as admin_router

    if not any(getattr(r, "path", "").startswith("/api/admin") for r in app.router.routes):
        app.include_router(auth_router)
        app.include_router(admin_router)


__all__ = [
    "AuthenticationError",
    "RegistrationError",
    "AdminAccount",
    "AdminAccountRepository",
    "AdminAuthService",
    "register_api",
]
