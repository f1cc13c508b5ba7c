"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting domain services
and the app-owned infrastructure components (credential store, rate
limiter) into routes, plus the factories that build those components.
"""

import logging

import redis
from fastapi import Request

from account_auth.adapters.ratelimit import RedisSlidingWindowRateLimiter, SlidingWindowRateLimiter
from account_auth.config.settings import Settings, get_settings
from account_auth.domain.authentication import AuthenticationService
from account_auth.domain.ports import CredentialStore, RateLimiter
from account_auth.domain.registration import RegistrationService
from account_auth.domain.tokens import TokenIssuer

logger = logging.getLogger(__name__)


def build_token_issuer(settings: Settings) -> TokenIssuer:
    """Create the token issuer from configured secret and lifetimes."""
    return TokenIssuer(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        access_ttl_seconds=settings.access_token_ttl_seconds,
        refresh_ttl_seconds=settings.refresh_token_ttl_seconds,
    )


def build_rate_limiter(settings: Settings) -> RateLimiter:
    """Instantiate the configured login rate limiter, preferring Redis when selected."""
    if settings.rate_limit_backend == "redis":
        try:
            client = redis.from_url(settings.redis_url)
            # ensure connectivity early to fail fast and fall back
            client.ping()
            logger.info("Login rate limiter using redis backend")
            return RedisSlidingWindowRateLimiter(
                client,
                max_requests=settings.login_rate_limit_attempts,
                window_seconds=settings.login_rate_limit_window_seconds,
            )
        except (redis.exceptions.RedisError, ValueError) as exc:
            logger.error("Redis rate limiter unavailable, falling back to in-memory: %s", exc)

    logger.info("Login rate limiter using in-memory backend")
    return SlidingWindowRateLimiter(
        max_requests=settings.login_rate_limit_attempts,
        window_seconds=settings.login_rate_limit_window_seconds,
    )


def get_credential_store(request: Request) -> CredentialStore:
    """
    Get credential store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.credential_store


def get_rate_limiter(request: Request) -> RateLimiter:
    """Get the app-wide login rate limiter from app state."""
    return request.app.state.rate_limiter


def get_client_key(request: Request) -> str:
    """Identify the calling client by source address."""
    return request.client.host if request.client else "unknown"


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the credential store and token issuer for the domain service.
    """
    settings = get_settings()
    return RegistrationService(
        store=get_credential_store(request),
        tokens=build_token_issuer(settings),
        password_rounds=settings.bcrypt_cost,
    )


def get_authentication_service(request: Request) -> AuthenticationService:
    """Create authentication service sharing the app-wide rate limiter."""
    settings = get_settings()
    return AuthenticationService(
        store=get_credential_store(request),
        tokens=build_token_issuer(settings),
        rate_limiter=get_rate_limiter(request),
        password_rounds=settings.bcrypt_cost,
    )
