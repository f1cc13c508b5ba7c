"""
Registration domain service - account creation and first token.

Registration Flow
=================

1. Validate every field, collecting all failures (ValidationError)
2. Re-check email syntax (InvalidEmailFormat)
3. Advisory uniqueness lookup on email OR (country code, mobile)
   (DuplicateAccount, without revealing which field collided)
4. Hash the password with bcrypt, once, right before persistence
5. Persist; a store-level uniqueness violation also maps to DuplicateAccount
6. Issue a 1-hour access token

Note: The lookup in step 3 is not atomic with the insert in step 5.
Concurrent registrations are resolved by the store's uniqueness
constraints, which the store reports as DuplicateAccount.
"""

import logging
from dataclasses import dataclass

from .contracts import RegistrationRequest
from .exceptions import (
    AccountError,
    DuplicateAccount,
    InternalError,
    InvalidEmailFormat,
    ValidationError,
)
from .passwords import DEFAULT_ROUNDS, hash_password
from .ports import Address, CredentialStore, NewAccount, Role
from .tokens import TokenIssuer
from .validation import is_valid_email, normalize_email, validate_registration

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, uniqueness check,
    password hashing, persistence and access token issuance.
    """

    store: CredentialStore
    tokens: TokenIssuer
    password_rounds: int = DEFAULT_ROUNDS

    def register(self, request: RegistrationRequest) -> str:
        """
        Register a new account and return its access token.

        Args:
            request: Raw registration payload

        Returns:
            Signed access token for the new account

        Raises:
            ValidationError: If any field rule fails
            InvalidEmailFormat: If the email fails the secondary check
            DuplicateAccount: If the email or mobile is already registered
            InternalError: On any unexpected failure (logged, not exposed)
        """
        errors = validate_registration(request)
        if errors:
            raise ValidationError(errors)

        if not is_valid_email(request.email):
            raise InvalidEmailFormat()

        email = normalize_email(request.email)

        try:
            conflict = self.store.find_conflicting(email, request.country_code, request.mobile)
            if conflict is not None:
                raise DuplicateAccount()

            account = self.store.create(self._new_account(request, email))
            token = self.tokens.issue_access_token(account)
        except DuplicateAccount:
            logger.info("Registration rejected: email or mobile already registered")
            raise
        except AccountError:
            raise
        except Exception as exc:
            logger.exception("Registration failed unexpectedly")
            raise InternalError() from exc

        logger.info("Account registered: %s (role=%s)", account.account_id, account.role.value)
        return token

    def _new_account(self, request: RegistrationRequest, email: str) -> NewAccount:
        """Build the record to persist, hashing the plaintext password."""
        address = request.address
        return NewAccount(
            name=request.name,
            email=email,
            password_hash=hash_password(request.password, self.password_rounds),
            country_code=request.country_code,
            mobile=request.mobile,
            address=Address(
                street=address.street,
                city=address.city,
                state=address.state,
                country=address.country,
                zip_code=address.zip_code,
            ),
            role=Role(request.role) if request.role else Role.BUYER,
            date_of_birth=request.date_of_birth,
        )
