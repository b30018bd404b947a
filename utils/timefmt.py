"""Clock and date formatting helpers."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


logger = logging.getLogger(__name__)

_MONTHS_GENITIVE = (
    "января",
    "февраля",
    "марта",
    "апреля",
    "мая",
    "июня",
    "июля",
    "августа",
    "сентября",
    "октября",
    "ноября",
    "декабря",
)


def make_clock(timezone_name: str = "") -> Callable[[], datetime]:
    """Return a zero-argument callable giving the current wall-clock time.

    An empty name means the host's local time. Unknown zone names are logged
    and also fall back to local time.
    """

    if not timezone_name:
        return datetime.now
    try:
        tz = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.warning("Unknown timezone %r (%s); using local time", timezone_name, exc)
        return datetime.now
    return lambda: datetime.now(tz)


def _coerce_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def format_long_date(value: Any, default: str = "") -> str:
    """Render an ISO date the way Russian readers expect, e.g. ``5 марта 2024 г.``"""

    day = _coerce_date(value)
    if day is None:
        return default
    return f"{day.day} {_MONTHS_GENITIVE[day.month - 1]} {day.year} г."


__all__ = ["make_clock", "format_long_date"]
