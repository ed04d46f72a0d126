"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, email, name, password hash, active flag)
- Email normalization and validation
- The storage contract for user records
"""

from gatekeeper_identity.domain.user.aggregates import User
from gatekeeper_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidUserNameError,
    UserNotFoundError,
)
from gatekeeper_identity.domain.user.repositories import UserRepository
from gatekeeper_identity.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidUserNameError",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
