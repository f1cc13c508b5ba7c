"""
Request validation rules for registration and login.

Every rule is evaluated and all failures are collected, in rule order,
so callers can report the complete list at once. Validation never
touches the credential store.
"""

import re

from email_validator import EmailNotValidError, validate_email

from .contracts import LoginRequest, RegistrationRequest
from .exceptions import FieldError
from .ports import Role

PASSWORD_MIN_LENGTH = 6
MOBILE_LENGTH = 10
PASSWORD_SYMBOLS = "@$!%*?&#"

# (pattern, message) pairs checked in order after the length rule
_PASSWORD_RULES = (
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one digit"),
    (
        re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]"),
        "Password must contain at least one special character",
    ),
)

_ADDRESS_RULES = (
    ("street", "address.street", "Street address is required"),
    ("city", "address.city", "City is required"),
    ("state", "address.state", "State is required"),
    ("country", "address.country", "Country is required"),
    ("zip_code", "address.zipCode", "ZipCode is required"),
)


def is_valid_email(email: str | None) -> bool:
    """Syntax-only email check (no DNS deliverability lookup)."""
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def password_errors(password: str | None) -> list[FieldError]:
    """Return every password strength rule the value fails."""
    value = password or ""
    errors = []
    if len(value) < PASSWORD_MIN_LENGTH:
        errors.append(
            FieldError("password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
        )
    for pattern, message in _PASSWORD_RULES:
        if not pattern.search(value):
            errors.append(FieldError("password", message))
    return errors


def validate_registration(request: RegistrationRequest) -> list[FieldError]:
    """
    Check a registration request against every registration rule.

    Args:
        request: Raw registration payload

    Returns:
        Ordered list of failures; empty when the request is valid
    """
    errors: list[FieldError] = []

    if not request.name:
        errors.append(FieldError("name", "Name is required"))
    if not is_valid_email(request.email):
        errors.append(FieldError("email", "Enter a valid email"))
    errors.extend(password_errors(request.password))
    if not request.country_code:
        errors.append(FieldError("countryCode", "Country code is required"))
    if request.mobile is None or len(request.mobile) != MOBILE_LENGTH:
        errors.append(FieldError("mobile", "Enter a valid 10-digit mobile number"))

    for attribute, field_name, message in _ADDRESS_RULES:
        if not getattr(request.address, attribute):
            errors.append(FieldError(field_name, message))

    if request.role is not None and request.role not in {role.value for role in Role}:
        errors.append(FieldError("role", "Role must be one of admin, seller, buyer"))

    return errors


def validate_login(request: LoginRequest) -> list[FieldError]:
    """Check a login request: valid email syntax and a non-empty password."""
    errors: list[FieldError] = []
    if not is_valid_email(request.email):
        errors.append(FieldError("email", "Enter a valid email"))
    if not request.password:
        errors.append(FieldError("password", "Password is required"))
    return errors
