"""
Auth API routes.

Defines the REST endpoints for account registration and login.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from account_auth.api.dependencies import (
    get_authentication_service,
    get_client_key,
    get_registration_service,
)
from account_auth.api.errors import error_response
from account_auth.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from account_auth.domain.authentication import AuthenticationService
from account_auth.domain.exceptions import AccountError
from account_auth.domain.registration import RegistrationService

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Validation errors, invalid email or duplicate account"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Register a new account",
    description="Create an account and receive a one-hour access token.",
)
def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse | JSONResponse:
    """
    Register a new account.

    All field rules are checked together; a 400 lists every failure.
    Duplicate email or mobile returns a generic 400 that does not say
    which one collided.
    """
    try:
        token = service.register(request_data.to_domain())
    except AccountError as exc:
        return error_response(exc)
    return RegisterResponse(access_token=token)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Validation errors or invalid credentials"},
        429: {"model": ErrorResponse, "description": "Too many login attempts"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Log in to an account",
    description="Exchange email and password for an access token and a refresh token. "
    "Limited to 5 attempts per client per 15 minutes.",
)
def login(
    request_data: LoginRequest,
    client_key: str = Depends(get_client_key),
    service: AuthenticationService = Depends(get_authentication_service),
) -> LoginResponse | JSONResponse:
    """
    Log in with email and password.

    Unknown email and wrong password produce the same response.
    """
    try:
        tokens = service.login(request_data.to_domain(), client_key)
    except AccountError as exc:
        return error_response(exc)
    return LoginResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)
