from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .models import AdminAccount

logger = logging.getLogger(__name__)

DEFAULT_STORAGE = Path("data/admin_accounts.json")

_PROFILE_PREFIX = "admin_"
_PASSWORD_PREFIX = "admin_password_"


def profile_key(username: str) -> str:
    return f"{_PROFILE_PREFIX}{username}"


def password_key(username: str) -> str:
    return f"{_PASSWORD_PREFIX}{username}"


class AdminAccountRepository:
    """Flat JSON key/value store of administrator profiles and password hashes.

    Each account occupies two keys: ``admin_<username>`` holds the profile and
    ``admin_password_<username>`` holds the encoded password hash.
    """

    def __init__(self, storage_path: Path | str | None = None):
        self._path = Path(storage_path or DEFAULT_STORAGE)
        if not self._path.parent.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
        self._data: Dict[str, object] = {}
        self._load()

    # ------------------------------------------------------------------
    # Internal helpers
    def _load(self) -> None:
        if self._path.exists():
            try:
                self._data = json.loads(self._path.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                logger.warning("Admin store %s is corrupt; starting empty", self._path)
                self._data = {}
        if not isinstance(self._data, dict):
            self._data = {}

    def _save(self) -> None:
        payload = json.dumps(self._data, indent=2, sort_keys=True, ensure_ascii=False)
        self._path.write_text(payload, encoding="utf-8")

    # ------------------------------------------------------------------
    # Accounts
    def exists(self, username: str) -> bool:
        return profile_key(username) in self._data

    def get_account(self, username: str) -> Optional[AdminAccount]:
        entry = self._data.get(profile_key(username))
        if not isinstance(entry, dict):
            return None
        return AdminAccount.from_dict(entry)

    def list_accounts(self) -> List[AdminAccount]:
        accounts = [
            AdminAccount.from_dict(entry)
            for key, entry in self._data.items()
            if not key.startswith(_PASSWORD_PREFIX) and isinstance(entry, dict)
        ]
        accounts.sort(key=lambda a: a.username.lower())
        return accounts

    def password_hash(self, username: str) -> Optional[str]:
        value = self._data.get(password_key(username))
        return value if isinstance(value, str) else None

    def save_account(self, account: AdminAccount, password_hash: str) -> AdminAccount:
        self._data[profile_key(account.username)] = account.to_dict()
        self._data[password_key(account.username)] = password_hash
        self._save()
        logger.info("Stored admin account %s", account.username)
        return account

    def delete_account(self, username: str) -> None:
        removed = self._data.pop(profile_key(username), None)
        self._data.pop(password_key(username), None)
        if removed is not None:
            self._save()


__all__ = ["AdminAccountRepository", "DEFAULT_STORAGE", "profile_key", "password_key"]
