"""
Authentication domain service - credential check and token pair issuance.

Unknown emails and wrong passwords fail identically (InvalidCredentials)
and both run exactly one bcrypt verification, so neither the response
body nor its timing reveals whether an account exists.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

import bcrypt

from .contracts import LoginRequest, TokenPair
from .exceptions import (
    AccountError,
    InternalError,
    InvalidCredentials,
    InvalidEmailFormat,
    RateLimited,
    ValidationError,
)
from .passwords import DEFAULT_ROUNDS, verify_password
from .ports import CredentialStore, RateLimiter
from .tokens import TokenIssuer
from .validation import is_valid_email, normalize_email, validate_login

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    """Hash checked in place of a real one when no account matches the email."""
    return bcrypt.hashpw(b"dummy_password_for_timing_safety", bcrypt.gensalt(rounds)).decode()


@dataclass
class AuthenticationService:
    """
    Domain service for login.

    The rate limiter is keyed by client identity and consulted before
    validation, so every attempt counts against the client's budget.
    ``password_rounds`` must match the cost used for stored hashes so the
    unknown-email path costs the same as a wrong password.
    """

    store: CredentialStore
    tokens: TokenIssuer
    rate_limiter: RateLimiter
    password_rounds: int = DEFAULT_ROUNDS

    def login(self, request: LoginRequest, client_key: str) -> TokenPair:
        """
        Authenticate credentials and issue access and refresh tokens.

        Args:
            request: Raw login payload
            client_key: Identity of the calling client (source address)

        Returns:
            TokenPair with a 1-hour access token and a 7-day refresh token

        Raises:
            RateLimited: If the client exhausted its attempt budget
            ValidationError: If email or password fails validation
            InvalidEmailFormat: If the email fails the secondary check
            InvalidCredentials: If the email is unknown or the password is wrong
            InternalError: On any unexpected failure (logged, not exposed)
        """
        try:
            return self._login(request, client_key)
        except AccountError:
            raise
        except Exception as exc:
            logger.exception("Login failed unexpectedly")
            raise InternalError() from exc

    def _login(self, request: LoginRequest, client_key: str) -> TokenPair:
        if not self.rate_limiter.allow(f"login:{client_key}"):
            logger.warning("Login rate limit exceeded for client %s", client_key)
            raise RateLimited()

        errors = validate_login(request)
        if errors:
            raise ValidationError(errors)

        if not is_valid_email(request.email):
            raise InvalidEmailFormat()

        account = self.store.find_by_email(normalize_email(request.email))

        # Always run bcrypt, even for unknown emails
        stored_hash = account.password_hash if account is not None else _dummy_hash(self.password_rounds)
        password_valid = verify_password(request.password, stored_hash)

        if account is None or not password_valid:
            logger.warning("Failed login from client %s", client_key)
            raise InvalidCredentials()

        logger.info("Account logged in: %s", account.account_id)
        return TokenPair(
            access_token=self.tokens.issue_access_token(account),
            refresh_token=self.tokens.issue_refresh_token(account),
        )
