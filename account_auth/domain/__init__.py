"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core credential-handling logic for account
registration and login. It defines its own port interfaces for
infrastructure abstraction, ensuring true hexagonal architecture
decoupling.
"""

from .authentication import AuthenticationService
from .contracts import AddressInput, LoginRequest, RegistrationRequest, TokenPair
from .exceptions import (
    AccountError,
    DuplicateAccount,
    FieldError,
    InternalError,
    InvalidCredentials,
    InvalidEmailFormat,
    RateLimited,
    ValidationError,
)
from .ports import Account, Address, CredentialStore, NewAccount, RateLimiter, Role
from .registration import RegistrationService
from .tokens import TokenIssuer

__all__ = [
    "Account",
    "AccountError",
    "Address",
    "AddressInput",
    "AuthenticationService",
    "CredentialStore",
    "DuplicateAccount",
    "FieldError",
    "InternalError",
    "InvalidCredentials",
    "InvalidEmailFormat",
    "LoginRequest",
    "NewAccount",
    "RateLimited",
    "RateLimiter",
    "RegistrationRequest",
    "RegistrationService",
    "Role",
    "TokenIssuer",
    "TokenPair",
    "ValidationError",
]
