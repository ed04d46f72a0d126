"""Repository interfaces for the user domain."""

from gatekeeper_identity.domain.user.repositories.user_repository import (
    UserRepository,
)

__all__ = ["UserRepository"]
