"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition, brute force
and timing tests, backed by in-memory components.
"""

from collections.abc import Callable

import pytest

from account_auth.adapters.ratelimit.memory import SlidingWindowRateLimiter
from account_auth.adapters.repository.memory import InMemoryCredentialStore
from account_auth.domain.authentication import AuthenticationService
from account_auth.domain.contracts import RegistrationRequest
from account_auth.domain.passwords import DEFAULT_ROUNDS
from account_auth.domain.registration import RegistrationService
from account_auth.domain.tokens import TokenIssuer

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def registration_service(
    store: InMemoryCredentialStore, token_issuer: TokenIssuer
) -> RegistrationService:
    """Registration service hashing at the production bcrypt cost."""
    return RegistrationService(store=store, tokens=token_issuer, password_rounds=DEFAULT_ROUNDS)


@pytest.fixture
def limiter() -> SlidingWindowRateLimiter:
    """Login limiter with the production budget (5 per 15 minutes)."""
    return SlidingWindowRateLimiter(max_requests=5, window_seconds=900)


@pytest.fixture
def auth_service(
    store: InMemoryCredentialStore,
    token_issuer: TokenIssuer,
    limiter: SlidingWindowRateLimiter,
) -> AuthenticationService:
    return AuthenticationService(store=store, tokens=token_issuer, rate_limiter=limiter)


@pytest.fixture
def registered(
    registration_service: RegistrationService,
    make_registration: Callable[..., RegistrationRequest],
) -> RegistrationRequest:
    """A registered account (jane@example.com / Abc123!)."""
    request = make_registration()
    registration_service.register(request)
    return request
