"""Request contracts handed to the domain services by the HTTP layer."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class AddressInput:
    """Unvalidated address sub-record of a registration request."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None


@dataclass(frozen=True)
class RegistrationRequest:
    """Unvalidated registration payload; every rule is checked by the service."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    country_code: str | None = None
    mobile: str | None = None
    address: AddressInput = field(default_factory=AddressInput)
    role: str | None = None
    date_of_birth: date | None = None


@dataclass(frozen=True)
class LoginRequest:
    """Unvalidated login payload."""

    email: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class TokenPair:
    """Access/refresh token pair returned by a successful login."""

    access_token: str
    refresh_token: str
