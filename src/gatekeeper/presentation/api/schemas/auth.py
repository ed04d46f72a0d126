"""Authentication schemas for request/response models."""

from __future__ import annotations

import re
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from gatekeeper.application.dtos import AuthResult, VerifyResult

# At least one of each class, on top of the minimum length
_PASSWORD_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[a-z]"), "a lowercase letter"),
    (re.compile(r"[A-Z]"), "an uppercase letter"),
    (re.compile(r"\d"), "a number"),
    (re.compile(r"[^A-Za-z0-9]"), "a symbol"),
)


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Strong password (8-128 characters)",
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Ada",
                "email": "ada@x.io",
                "password": "Str0ng!Pass",
            },
        },
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        if not v.strip():
            msg = "Name cannot be blank"
            raise ValueError(msg)
        return v.strip()

    @field_validator("password")
    @classmethod
    def _validate_password_strength(cls, v: str) -> str:
        missing = [label for pattern, label in _PASSWORD_RULES if not pattern.search(v)]
        if missing:
            msg = f"Password must contain {', '.join(missing)}"
            raise ValueError(msg)
        return v


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "email": "ada@x.io",
                "password": "Str0ng!Pass",
            },
        },
    )


class VerifyRequest(BaseModel):
    """Request schema for token verification.

    The token is optional in the body; the Authorization header is used
    when it is missing.
    """

    token: str | None = Field(default=None, description="Token to verify")

    model_config = ConfigDict(extra="forbid")


class UserResponse(BaseModel):
    """Response schema for user data (never includes the password hash)."""

    id: UUID
    email: str
    name: str
    is_active: bool = Field(alias="isActive")

    model_config = ConfigDict(populate_by_name=True)


class TokenUserResponse(BaseModel):
    """Identity claims carried by a verified token."""

    id: UUID
    email: str
    name: str


class AuthResponse(BaseModel):
    """Response schema for register and login."""

    user: UserResponse
    token: str

    @classmethod
    def from_result(cls, result: AuthResult) -> AuthResponse:
        return cls(
            user=UserResponse(
                id=result.user.id,
                email=result.user.email,
                name=result.user.name,
                is_active=result.user.is_active,
            ),
            token=result.token,
        )


class VerifyResponse(BaseModel):
    """Response schema for token verification: claims plus a fresh token."""

    user: TokenUserResponse
    token: str

    @classmethod
    def from_result(cls, result: VerifyResult) -> VerifyResponse:
        return cls(
            user=TokenUserResponse(
                id=result.user.id,
                email=result.user.email,
                name=result.user.name,
            ),
            token=result.token,
        )


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    status: int
    message: str
    code: str
    timestamp: str
