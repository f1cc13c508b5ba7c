"""
Unit tests for API request/response models.

Tests Pydantic model parsing for registration and login endpoints.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from account_auth.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from account_auth.domain import contracts


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_camel_case_payload_parsed(self, register_payload) -> None:
        """camelCase JSON keys map onto model fields."""
        request = RegisterRequest.model_validate(register_payload(dateOfBirth="1990-05-17", role="seller"))
        assert request.country_code == "+1"
        assert request.address.zip_code == "62701"
        assert request.date_of_birth == date(1990, 5, 17)
        assert request.role == "seller"

    def test_missing_fields_are_none(self) -> None:
        """Missing fields parse to None so the domain can report them."""
        request = RegisterRequest.model_validate({})
        assert request.name is None
        assert request.address.street is None

    def test_invalid_date_rejected(self, register_payload) -> None:
        """A malformed dateOfBirth is a parsing error."""
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest.model_validate(register_payload(dateOfBirth="not-a-date"))
        assert "dateOfBirth" in str(exc_info.value)

    def test_to_domain(self, register_payload) -> None:
        """Conversion produces the domain contract."""
        domain = RegisterRequest.model_validate(register_payload()).to_domain()
        assert isinstance(domain, contracts.RegistrationRequest)
        assert domain.email == "jane@example.com"
        assert domain.mobile == "5551234567"
        assert domain.address == contracts.AddressInput(
            street="1 Main St", city="Springfield", state="IL", country="USA", zip_code="62701"
        )
        assert domain.role is None
        assert domain.date_of_birth is None


class TestLoginRequest:
    """Tests for LoginRequest model."""

    def test_to_domain(self) -> None:
        request = LoginRequest(email="jane@example.com", password="Abc123!")
        assert request.to_domain() == contracts.LoginRequest(email="jane@example.com", password="Abc123!")


class TestResponses:
    """Tests for response models."""

    def test_register_response_serializes_camel_case(self) -> None:
        response = RegisterResponse(access_token="tok")
        assert response.model_dump(by_alias=True) == {"accessToken": "tok"}

    def test_login_response_serializes_camel_case(self) -> None:
        response = LoginResponse(access_token="a", refresh_token="r")
        assert response.model_dump(by_alias=True) == {"accessToken": "a", "refreshToken": "r"}

    def test_error_response(self) -> None:
        assert ErrorResponse(message="Invalid credentials").message == "Invalid credentials"
