"""
API request and response models.

Pydantic models for FastAPI endpoint parsing and OpenAPI schema generation.
Request fields are deliberately lenient (all optional strings): the domain
validates them so that every rule violation is reported together.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from account_auth.domain import contracts


class AddressModel(BaseModel):
    """Postal address sub-record of a registration request."""

    model_config = ConfigDict(populate_by_name=True)

    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = Field(default=None, alias="zipCode")


class RegisterRequest(BaseModel):
    """Request model for account registration."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = Field(default=None, description="Min 6 chars with lower, upper, digit and symbol")
    country_code: str | None = Field(default=None, alias="countryCode")
    mobile: str | None = Field(default=None, description="10-digit mobile number")
    address: AddressModel = Field(default_factory=AddressModel)
    role: str | None = Field(default=None, description="admin, seller or buyer (default)")
    date_of_birth: date | None = Field(default=None, alias="dateOfBirth")

    def to_domain(self) -> contracts.RegistrationRequest:
        """Convert to the domain registration contract."""
        return contracts.RegistrationRequest(
            name=self.name,
            email=self.email,
            password=self.password,
            country_code=self.country_code,
            mobile=self.mobile,
            address=contracts.AddressInput(
                street=self.address.street,
                city=self.address.city,
                state=self.address.state,
                country=self.address.country,
                zip_code=self.address.zip_code,
            ),
            role=self.role,
            date_of_birth=self.date_of_birth,
        )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class LoginRequest(BaseModel):
    """Request model for login."""

    email: str | None = None
    password: str | None = None

    def to_domain(self) -> contracts.LoginRequest:
        """Convert to the domain login contract."""
        return contracts.LoginRequest(email=self.email, password=self.password)


class LoginResponse(BaseModel):
    """Response model for successful login."""

    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    refresh_token: str = Field(alias="refreshToken")


class FieldErrorModel(BaseModel):
    """One failed validation rule."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Error response listing every failed validation rule."""

    errors: list[FieldErrorModel]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
