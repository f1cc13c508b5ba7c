"""
In-memory repository adapter - Implements CredentialStore protocol.

Process-local store for development and tests. Uniqueness is enforced
by checking and inserting under a single lock, mirroring the UNIQUE
constraints of the PostgreSQL schema.
"""

import uuid
from datetime import datetime, timezone
from threading import Lock

from account_auth.domain.exceptions import DuplicateAccount
from account_auth.domain.ports import Account, NewAccount


class InMemoryCredentialStore:
    """
    Implements CredentialStore protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._lock = Lock()

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            return self._find_by_email(email)

    def find_conflicting(self, email: str, country_code: str, mobile: str) -> Account | None:
        with self._lock:
            return self._find_conflicting(email, country_code, mobile)

    def create(self, account: NewAccount) -> Account:
        """Insert ``account`` unless its email or mobile pair is already taken."""
        now = datetime.now(timezone.utc)
        with self._lock:
            if self._find_conflicting(account.email, account.country_code, account.mobile):
                raise DuplicateAccount()
            stored = Account(
                account_id=str(uuid.uuid4()),
                name=account.name,
                email=account.email,
                password_hash=account.password_hash,
                country_code=account.country_code,
                mobile=account.mobile,
                address=account.address,
                role=account.role,
                date_of_birth=account.date_of_birth,
                created_at=now,
                updated_at=now,
            )
            self._accounts[stored.account_id] = stored
        return stored

    def ping(self) -> None:
        """Always reachable."""

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def _find_by_email(self, email: str) -> Account | None:
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    def _find_conflicting(self, email: str, country_code: str, mobile: str) -> Account | None:
        for account in self._accounts.values():
            if account.email == email:
                return account
            if account.country_code == country_code and account.mobile == mobile:
                return account
        return None
