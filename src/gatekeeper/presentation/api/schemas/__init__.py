"""Pydantic schemas for API request/response models."""

from gatekeeper.presentation.api.schemas.auth import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    TokenUserResponse,
    UserResponse,
    VerifyRequest,
    VerifyResponse,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "LoginRequest",
    "RegisterRequest",
    "TokenUserResponse",
    "UserResponse",
    "VerifyRequest",
    "VerifyResponse",
]
