"""Gatekeeper Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of any specific user model. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    gatekeeper_auth/
    ├── ports.py            # Abstract hasher / token interfaces
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from gatekeeper_auth import PasswordHashingService, JWTService
"""

from gatekeeper_auth.exceptions import AuthError, InvalidTokenError
from gatekeeper_auth.ports import PasswordHasher, TokenService
from gatekeeper_auth.schemas import TokenPayload
from gatekeeper_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Interfaces
    "PasswordHasher",
    "TokenService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
]
