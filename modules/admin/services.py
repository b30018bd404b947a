"""Registration and login for directory administrators."""

from __future__ import annotations

import hmac
import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from .exceptions import AuthenticationError, RegistrationError
from .models import AdminAccount
from .repository import AdminAccountRepository

logger = logging.getLogger(__name__)

DEMO_CREDENTIALS = ("admin", "admin123")
MIN_PASSWORD_LENGTH = 6
_RESERVED_PREFIX = "password_"

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def _same(left: str, right: str) -> bool:
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


def verify_password(password: str, encoded: str) -> bool:
    try:
        return _hasher.verify(encoded, password)
    except VerifyMismatchError:
        return False
    except (InvalidHashError, VerificationError):
        logger.warning("Malformed password hash in admin store")
        return False


class AdminAuthService:
    def __init__(
        self,
        repo: AdminAccountRepository,
        demo_credentials: Optional[Tuple[str, str]] = DEMO_CREDENTIALS,
    ) -> None:
        self.repo = repo
        self.demo_credentials = demo_credentials

    def register(
        self,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
        full_name: str,
        position: str = "",
    ) -> AdminAccount:
        username = (username or "").strip()
        email = (email or "").strip()
        full_name = (full_name or "").strip()
        if not (username and email and password and full_name):
            raise RegistrationError("Заполните все обязательные поля")
        if password != confirm_password:
            raise RegistrationError("Пароли не совпадают")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise RegistrationError(f"Пароль должен содержать минимум {MIN_PASSWORD_LENGTH} символов")
        # profile and password keys share the admin_ namespace
        if username.startswith(_RESERVED_PREFIX):
            raise RegistrationError("Недопустимое имя пользователя")
        if self.repo.exists(username):
            raise RegistrationError("Пользователь с таким именем уже существует")
        account = AdminAccount(
            username=username,
            email=email,
            full_name=full_name,
            position=(position or "").strip(),
            registered_at=datetime.now(timezone.utc).isoformat(),
        )
        return self.repo.save_account(account, hash_password(password))

    def authenticate(self, username: str, password: str) -> bool:
        if self.demo_credentials is not None:
            demo_user, demo_password = self.demo_credentials
            if _same(username, demo_user) and _same(password, demo_password):
                return True
        stored = self.repo.password_hash(username)
        if stored is not None and verify_password(password, stored):
            return True
        logger.info("Rejected admin login for %r", username)
        return False

    def login(self, username: str, password: str) -> str:
        if not self.authenticate(username, password):
            raise AuthenticationError("Неверный логин или пароль")
        return username


__all__ = [
    "AdminAuthService",
    "DEMO_CREDENTIALS",
    "MIN_PASSWORD_LENGTH",
    "hash_password",
    "verify_password",
]
