"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the account record types and the interfaces (ports)
that the domain requires from infrastructure. Adapters implement these
protocols.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Protocol


class Role(str, Enum):
    """
    Account roles.

    Every persisted account carries exactly one of these values;
    BUYER is assigned when registration does not specify a role.
    """

    ADMIN = "admin"
    SELLER = "seller"
    BUYER = "buyer"


@dataclass(frozen=True)
class Address:
    """Postal address attached to every account."""

    street: str
    city: str
    state: str
    country: str
    zip_code: str


@dataclass(frozen=True)
class NewAccount:
    """Account fields supplied by the domain at creation time."""

    name: str
    email: str
    password_hash: str
    country_code: str
    mobile: str
    address: Address
    role: Role = Role.BUYER
    date_of_birth: date | None = None


@dataclass(frozen=True)
class Account:
    """Persisted account as returned by a CredentialStore."""

    account_id: str
    name: str
    email: str
    password_hash: str
    country_code: str
    mobile: str
    address: Address
    role: Role
    date_of_birth: date | None
    created_at: datetime
    updated_at: datetime


class CredentialStore(Protocol):
    """Port interface for account persistence."""

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up an account by exact (normalized) email.

        Args:
            email: Normalized email address

        Returns:
            The matching Account, or None
        """
        ...

    def find_conflicting(self, email: str, country_code: str, mobile: str) -> Account | None:
        """
        Find any account whose email OR (country_code, mobile) pair matches.

        This lookup is advisory. The store's own uniqueness constraints
        are what actually prevent duplicates under concurrent inserts.

        Args:
            email: Normalized email address
            country_code: Dialling prefix
            mobile: 10-character mobile number

        Returns:
            A colliding Account, or None
        """
        ...

    def create(self, account: NewAccount) -> Account:
        """
        Insert a new account, atomically enforcing uniqueness.

        Args:
            account: Fields of the account to create (password already hashed)

        Returns:
            The stored Account with its assigned identifier and timestamps

        Raises:
            DuplicateAccount: If email or (country_code, mobile) is taken
        """
        ...

    def ping(self) -> None:
        """Raise if the backing store is unreachable."""
        ...


class RateLimiter(Protocol):
    """Port interface for per-key attempt limiting."""

    def allow(self, key: str) -> bool:
        """
        Record an attempt for ``key`` and report whether it is permitted.

        Args:
            key: Client identity (e.g. "login:<source address>")

        Returns:
            True while the key is within its budget for the current window
        """
        ...
