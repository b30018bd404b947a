"""Custom exceptions for the directory module."""
from __future__ import annotations


class DirectoryError(RuntimeError):
    """Base exception for directory operations."""


class ValidationError(DirectoryError):
    """Raised when submitted data cannot be stored as given."""


class NotFoundError(DirectoryError):
    """Raised when a lookup by identifier has no matching record."""

    def __init__(self, kind: str, item_id: str) -> None:
        super().__init__(f"{kind} {item_id!r} not found")
        self.kind = kind
        self.item_id = item_id


__all__ = ["DirectoryError", "ValidationError", "NotFoundError"]
