"""Pydantic schemas for authentication."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, EmailStr, Field, field_validator

from banking.validators import dni as dni_validator


class ErrorResponse(BaseModel):
    """Uniform error body."""

    error: str


class SignupRequest(BaseModel):
    """Request schema for signup.

    The DNI is normalized and checksum-validated here, so invalid IDs are
    rejected with 400 before any service code runs.
    """

    full_name: str = Field(
        ...,
        min_length=3,
        max_length=255,
        validation_alias=AliasChoices("full_name", "fullName"),
    )
    dni: str
    email: EmailStr

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_full_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("dni")
    @classmethod
    def validate_dni(cls, v: str) -> str:
        return dni_validator.validate(v)


class SignupResponse(BaseModel):
    """The plaintext PIN is returned exactly once, here."""

    user_id: str
    pin: str


class LoginRequest(BaseModel):
    """Request schema for login."""

    dni: str
    pin: str

    @field_validator("dni")
    @classmethod
    def normalize_dni(cls, v: str) -> str:
        return dni_validator.normalize(v)


class TokenResponse(BaseModel):
    """Response schema for login/refresh endpoints."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class RefreshRequest(BaseModel):
    """Request schema for token refresh."""

    refresh_token: str


class ChangePinRequest(BaseModel):
    """``new_pin`` is accepted for compatibility but ignored; the server mints the PIN."""

    old_pin: str
    new_pin: str | None = None


class ChangePinResponse(BaseModel):
    message: str
    new_pin: str


class StatusResponse(BaseModel):
    status: str = "ok"


class AuthenticatedUser(BaseModel):
    """Identity established by the auth gate for the current request."""

    id: str
    token_expires_at: datetime


class UserResponse(BaseModel):
    """Public user information."""

    id: str
    dni: str
    full_name: str
    email: str

    model_config = {"from_attributes": True}
