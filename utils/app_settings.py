"""Application settings for the directory service.

Values come from ``MEDDIR_*`` environment variables first and then from an
optional INI file at ``<data dir>/app.ini``::

    [directory]
    page_size = 6
    rating_policy = clamp
    timezone = Europe/Minsk
    admin_store = data/admin_accounts.json
    seed = true
    log_level = INFO

Anything unspecified falls back to the defaults below.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

RATING_POLICIES = ("accept", "clamp", "reject")

_ENV_PREFIX = "MEDDIR_"
_SECTION = "directory"


@dataclass(slots=True, frozen=True)
class Settings:
    page_size: int = 6
    rating_policy: str = "accept"
    timezone: str = ""
    admin_store: Path = Path("data/admin_accounts.json")
    seed: bool = True
    log_level: str = "INFO"


def _data_dir(environ: Mapping[str, str]) -> Path:
    return Path(environ.get(f"{_ENV_PREFIX}DATA_DIR", "data"))


def _read_ini(data_dir: Path) -> dict[str, str]:
    """Read the ``[directory]`` section of ``app.ini`` if present."""
    ini_path = data_dir / "app.ini"
    if not ini_path.exists():
        return {}
    cp = configparser.ConfigParser()
    try:
        cp.read(ini_path, encoding="utf-8")
    except configparser.Error as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", ini_path, exc)
        return {}
    if not cp.has_section(_SECTION):
        return {}
    return {key: value for key, value in cp.items(_SECTION)}


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    data_dir = _data_dir(env)
    raw = _read_ini(data_dir)
    for key in ("page_size", "rating_policy", "timezone", "admin_store", "seed", "log_level"):
        value = env.get(f"{_ENV_PREFIX}{key.upper()}")
        if value is not None:
            raw[key] = value

    defaults = Settings()
    page_size = defaults.page_size
    if raw.get("page_size"):
        try:
            page_size = int(raw["page_size"])
        except ValueError:
            logger.warning("Invalid page_size %r; using %s", raw["page_size"], defaults.page_size)
        if page_size < 1:
            logger.warning("page_size must be positive; using %s", defaults.page_size)
            page_size = defaults.page_size

    policy = raw.get("rating_policy", defaults.rating_policy).strip().lower()
    if policy not in RATING_POLICIES:
        logger.warning("Unknown rating_policy %r; using %r", policy, defaults.rating_policy)
        policy = defaults.rating_policy

    admin_store = Path(raw["admin_store"]) if raw.get("admin_store") else data_dir / "admin_accounts.json"

    return Settings(
        page_size=page_size,
        rating_policy=policy,
        timezone=raw.get("timezone", "").strip(),
        admin_store=admin_store,
        seed=_to_bool(raw["seed"]) if "seed" in raw else defaults.seed,
        log_level=raw.get("log_level", defaults.log_level).strip().upper() or defaults.log_level,
    )


__all__ = ["Settings", "RATING_POLICIES", "load_settings"]
