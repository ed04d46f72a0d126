"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from gatekeeper_identity.domain.user.aggregates.user import User
from gatekeeper_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Email uniqueness is the store's responsibility: ``save`` must reject a
    duplicate with ``EmailAlreadyExistsError`` even when two registrations
    race past the engine's existence check.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user and return the stored record.

        Raises EmailAlreadyExistsError on a duplicate email.
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID. Raises UserNotFoundError if absent."""
