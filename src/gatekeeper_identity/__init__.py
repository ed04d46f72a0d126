"""Gatekeeper Identity - user records and their storage.

This package handles identity-related concerns:
- The User aggregate and its invariants
- Email normalization
- The UserRepository contract and its SQLAlchemy implementation

Password hashing and tokens live in gatekeeper_auth; the workflows that
combine them live in gatekeeper.application.
"""

from gatekeeper_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    User,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
