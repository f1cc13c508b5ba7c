"""
Domain exceptions - Semantic error types for registration and login.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Every exception carries a fixed, caller-safe ``message``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single failed validation rule for one request field."""

    field: str
    message: str


class AccountError(Exception):
    """Base class for account domain errors."""

    message = "Account request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class ValidationError(AccountError):
    """One or more request fields violate the validation rules."""

    message = "Validation failed"

    def __init__(self, errors: list[FieldError]) -> None:
        super().__init__()
        self.errors = list(errors)


class InvalidEmailFormat(AccountError):
    """Email failed the secondary syntax check."""

    message = "Invalid email format"


class DuplicateAccount(AccountError):
    """Email or (country code, mobile) already belongs to an account."""

    message = "User with this email or mobile already exists"


class InvalidCredentials(AccountError):
    """Unknown email or password mismatch (deliberately indistinguishable)."""

    message = "Invalid credentials"


class RateLimited(AccountError):
    """Client exceeded the login attempt budget for the current window."""

    message = "Too many login attempts, please try again later."


class InternalError(AccountError):
    """Unexpected failure; details are logged, never returned."""

    message = "Server error"
