from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Mapping


@dataclass(slots=True)
class AdminAccount:
    """Profile of a registered administrator (the password lives elsewhere)."""

    username: str
    email: str
    full_name: str
    position: str = ""
    registered_at: str = ""

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "AdminAccount":
        return cls(
            username=str(data.get("username", "")),
            email=str(data.get("email", "")),
            full_name=str(data.get("full_name", data.get("fullName", ""))),
            position=str(data.get("position") or ""),
            registered_at=str(data.get("registered_at", data.get("registeredAt", ""))),
        )


__all__ = ["AdminAccount"]
