"""Errors raised by the administrator account layer."""
from __future__ import annotations


class RegistrationError(ValueError):
    """Raised when a registration form fails validation."""


class AuthenticationError(RuntimeError):
    """Raised when a username/password pair is not recognised."""
