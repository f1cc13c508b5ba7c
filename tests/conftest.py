"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory credential store and token issuer
- Registration request factories (domain contract and JSON payload)
- A fully wired FastAPI test client backed by in-memory components
"""

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from account_auth.adapters.repository.memory import InMemoryCredentialStore
from account_auth.config.settings import get_settings
from account_auth.domain.contracts import AddressInput, RegistrationRequest
from account_auth.domain.tokens import TokenIssuer

TEST_SECRET = "test-secret-that-is-at-least-32-bytes-long"

# Lowest bcrypt cost; keeps hashing fast where cost is not under test
FAST_ROUNDS = 4


@pytest.fixture
def store() -> InMemoryCredentialStore:
    """Empty in-memory credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def token_issuer() -> TokenIssuer:
    """Token issuer with a fixed test secret and default lifetimes."""
    return TokenIssuer(secret=TEST_SECRET)


@pytest.fixture
def make_registration() -> Callable[..., RegistrationRequest]:
    """Factory for valid registration requests; keyword arguments override fields."""

    def factory(**overrides: Any) -> RegistrationRequest:
        fields: dict[str, Any] = {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "password": "Abc123!",
            "country_code": "+1",
            "mobile": "5551234567",
            "address": AddressInput(
                street="1 Main St",
                city="Springfield",
                state="IL",
                country="USA",
                zip_code="62701",
            ),
        }
        fields.update(overrides)
        return RegistrationRequest(**fields)

    return factory


@pytest.fixture
def register_payload() -> Callable[..., dict[str, Any]]:
    """Factory for valid JSON registration bodies; keyword arguments override keys."""

    def factory(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "password": "Abc123!",
            "countryCode": "+1",
            "mobile": "5551234567",
            "address": {
                "street": "1 Main St",
                "city": "Springfield",
                "state": "IL",
                "country": "USA",
                "zipCode": "62701",
            },
        }
        payload.update(overrides)
        return payload

    return factory


@pytest.fixture
def app_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """
    Test client for the real application, wired to in-memory components.

    Runs the app lifespan, so the store and rate limiter are fresh per test.
    """
    monkeypatch.setenv("CREDENTIAL_STORE_BACKEND", "memory")
    monkeypatch.setenv("RATE_LIMIT_BACKEND", "memory")
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("BCRYPT_COST", str(FAST_ROUNDS))
    get_settings.cache_clear()

    from account_auth.api.main import app

    with TestClient(app) as client:
        yield client

    get_settings.cache_clear()
